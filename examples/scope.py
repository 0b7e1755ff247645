#!/usr/bin/env python3
"""
Scope lifecycle example.

Looks up a scope, lists scopes, creates a new scope holding an Ethernet
network, renames it, and deletes it again.

Environment Variables:
    ONEVIEW_OV_USER, ONEVIEW_OV_PASSWORD, ONEVIEW_OV_DOMAIN, ONEVIEW_OV_ENDPOINT
    ONEVIEW_APIVERSION - API version (0 or unset: ask the appliance)
"""

import os
import sys

from oneview_client import OneViewError, OVClient, Settings
from oneview_client.log import setup_logging
from oneview_client.models import Scope

SCOPE_NAME = "updated-SD2"
NEW_SCOPE = "new-scope"
UPDATED_SCOPE = "update-scope"
INITIAL_SCOPE_URI = "/rest/scopes/7f658031-c942-4336-be7a-67957cf20ba2"
ADDED_RESOURCE_URI = "/rest/ethernet-networks/6d0f7c41-9d1d-4de4-92ef-21a15bb0e8d0"


def print_scopes(client: OVClient, sort: str) -> None:
    try:
        page = client.scopes.list(sort=sort)
    except OneViewError as e:
        print(e)
        return
    print("# ................... Scopes List .................#")
    for s in page.members:
        print(s.name)


def main() -> int:
    setup_logging(os.environ.get("ONEVIEW_DEBUG") == "1")
    settings = Settings(api_version=800)
    with OVClient(settings) as client:
        print("#................... Scope by Name ...............#")
        try:
            print(client.scopes.get_by_name(SCOPE_NAME))
        except OneViewError as e:
            print(e)

        sort = "name:desc"
        print_scopes(client, sort)

        scope = Scope(
            name=NEW_SCOPE,
            description="Test from script",
            type="ScopeV3",
            initial_scope_uris=[INITIAL_SCOPE_URI],
            added_resource_uris=[ADDED_RESOURCE_URI],
        )
        try:
            client.scopes.create(scope).wait()
            print("# ................... Scope Created Successfully.................#")
        except OneViewError as e:
            print("............... Scope Creation Failed:", e)

        try:
            new_scope = client.scopes.get_by_name(NEW_SCOPE)
        except OneViewError as e:
            print(e)
        else:
            if new_scope is not None:
                new_scope.name = UPDATED_SCOPE
                try:
                    client.scopes.update(new_scope).wait()
                except OneViewError:
                    print("#.................... Scope Updation failed ...........#")
                    raise
                print("#.................... Scope after Updating ...........#")

        print_scopes(client, sort)

        client.scopes.delete(UPDATED_SCOPE).wait()
        print("#...................... Deleted Scope Successfully .....#")
        print_scopes(client, sort)
    return 0


if __name__ == "__main__":
    sys.exit(main())
