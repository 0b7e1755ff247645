#!/usr/bin/env python3
"""
Scopes and Ethernet network example.

Creates two scopes, builds a third scope that contains an Ethernet
network, renames it, reads and reassigns the network's scopes, then
deletes the renamed scope.

Environment Variables:
    ONEVIEW_OV_USER, ONEVIEW_OV_PASSWORD, ONEVIEW_OV_DOMAIN, ONEVIEW_OV_ENDPOINT
    ONEVIEW_APIVERSION
"""

import os
import sys

from oneview_client import OneViewError, OVClient
from oneview_client.log import setup_logging
from oneview_client.models import Scope

SCOPE_NAME = "ScopeTest"
SCOPE_NAME_2 = "Auto-Scope"
NEW_SCOPE = "new-scope"
UPDATED_SCOPE = "update-scope"
ETH_NETWORK = "Auto-ethernet_network"


def print_scopes(client: OVClient, sort: str) -> list[Scope]:
    try:
        members = client.scopes.list(sort=sort).members
    except OneViewError as e:
        print(e)
        return []
    print("# ................... Scopes List .................#")
    for s in members:
        print(s.name)
    return members


def main() -> int:
    setup_logging(os.environ.get("ONEVIEW_DEBUG") == "1")
    with OVClient.from_environment() as client:
        for name in (SCOPE_NAME, SCOPE_NAME_2):
            try:
                client.scopes.create(Scope(name=name, description="Test from script", type="ScopeV3")).wait()
            except OneViewError as e:
                print("Error Creating Scope: ", e)

        print("#................... Scope by Name ...............#")
        scope = None
        try:
            scope = client.scopes.get_by_name(SCOPE_NAME)
        except OneViewError as e:
            print(e)
        print(scope)

        sort = "name:desc"
        print_scopes(client, sort)

        eth = None
        try:
            eth = client.ethernet_networks.get_by_name(ETH_NETWORK)
        except OneViewError as e:
            print(e)

        new_scope = Scope(
            name=NEW_SCOPE,
            description="Test from script",
            type="ScopeV3",
            initial_scope_uris=[scope.uri] if scope and scope.uri else None,
            added_resource_uris=[eth.uri] if eth and eth.uri else None,
        )
        try:
            client.scopes.create(new_scope).wait()
            print("# ................... Scope Created Successfully.................#")
        except OneViewError as e:
            print("............... Scope Creation Failed:", e)

        try:
            created = client.scopes.get_by_name(NEW_SCOPE)
        except OneViewError as e:
            print(e)
        else:
            if created is not None:
                created.name = UPDATED_SCOPE
                try:
                    client.scopes.update(created).wait()
                except OneViewError:
                    print("#.................... Scope Updation failed ...........#")
                    raise
                print("#.................... Scope after Updating ...........#")

        updated = print_scopes(client, sort)

        if eth is not None and eth.uri:
            try:
                in_resource = client.scopes.get_for_resource(eth.uri)
            except OneViewError as e:
                print(e)
            else:
                print("#.................Scopes assigned to a resource ..............#")
                print(in_resource)
                if updated and updated[0].uri:
                    print("#.................Scope by Uri ..............#")
                    print(client.scopes.get_by_uri(updated[0].uri))
                    in_resource.scope_uris = [updated[0].uri]
                    try:
                        client.scopes.update_for_resource(in_resource).wait()
                        print(f"resource {in_resource.resource_uri} updated")
                    except OneViewError as e:
                        print(e)

        client.scopes.delete(UPDATED_SCOPE).wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())
