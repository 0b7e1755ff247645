#!/usr/bin/env python3
"""
FC network example driven by oneview_config.json.

Creates an FC network, lists FC networks, renames the new one and
deletes it.

Config file fields: UserName, Password, Domain, Endpoint, SSlVerify,
ApiVersion, IfMatch.
"""

import os
import sys

from oneview_client import ConfigError, OneViewError, OVClient
from oneview_client.log import setup_logging
from oneview_client.models import FCNetwork

TEST_NAME = "TestFCNetworkGOsdk"
NEW_NAME = "RenamedFCNetwork"
INITIAL_SCOPE_URI = "/rest/scopes/7e4f76b0-bb2c-49d2-a641-d785475df423"


def main() -> int:
    setup_logging(os.environ.get("ONEVIEW_DEBUG") == "1")
    try:
        client = OVClient.from_config_file("oneview_config.json")
    except ConfigError as e:
        print(e)
        client = OVClient.from_environment()

    with client:
        network = FCNetwork(
            name=TEST_NAME,
            description="Test FC Network",
            auto_login_redistribution=False,
            link_stability_time=30,
            fabric_type="FabricAttach",
            type="fc-networkV4",
            initial_scope_uris=[INITIAL_SCOPE_URI],
        )
        print(network)
        try:
            client.fc_networks.create(network).wait()
            print("Fc Network created successfully...")
        except OneViewError as e:
            print("Fc Network Creation Failed: ", e)

        print("#---Get Fc Networks sorted by name in descending order----#")
        for n in client.fc_networks.list(sort="name:desc").members:
            print(n.name)

        found = client.fc_networks.get_by_name(TEST_NAME)
        print("#-------------Get FCNetworks by name----------------#")
        print(found)
        if found is None:
            print(f"FC network {TEST_NAME} not found")
            return 1

        found.name = NEW_NAME
        client.fc_networks.update(found).wait()
        print("FCNetwork has been updated with name: " + found.name)

        client.fc_networks.delete(NEW_NAME).wait()
        print("Deleted FCNetworks successfully...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
