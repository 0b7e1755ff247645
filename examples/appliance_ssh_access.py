#!/usr/bin/env python3
"""Read the appliance SSH access setting, then turn SSH access off."""

import os
import sys

from oneview_client import OneViewError, OVClient
from oneview_client.log import setup_logging
from oneview_client.models import ApplianceSshAccess


def main() -> int:
    setup_logging(os.environ.get("ONEVIEW_DEBUG") == "1")
    with OVClient.from_environment() as client:
        access = client.appliance.get_ssh_access()
        print("#--- Got the Appliance SSH access ---#")
        print(access)

        wanted = ApplianceSshAccess(allow_ssh_access=False)
        print(wanted)
        try:
            client.appliance.set_ssh_access(wanted).wait()
            print("Appliance SSH access set successfully...")
        except OneViewError as e:
            print("Appliance SSH access set failed: ", e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
