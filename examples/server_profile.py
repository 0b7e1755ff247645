#!/usr/bin/env python3
"""
Server profile example.

Clones an existing profile onto a blade, waits for the creation task,
then deletes the new profile (powering the blade off first).

Usage:
    server_profile.py TEMPLATE_PROFILE NEW_NAME SERVER_HARDWARE_URI
"""

import os
import sys

from oneview_client import OVClient
from oneview_client.log import setup_logging


def main(argv: list[str]) -> int:
    setup_logging(os.environ.get("ONEVIEW_DEBUG") == "1")
    if len(argv) != 4:
        print(__doc__)
        return 1
    template_name, new_name, hardware_uri = argv[1:]
    with OVClient.from_environment() as client:
        template = client.server_profiles.get_by_name(template_name)
        if template is None:
            print(f"server template {template_name} is not found")
            return 2
        blade = client.server_hardware.get_by_uri(hardware_uri)
        if blade.server_profile_uri:
            print("a server profile already exists for this hardware")
            return 3

        task = client.server_profiles.create_from_template(new_name, template, blade)
        print(f"Created {new_name}: {task}")

        client.server_profiles.delete_profile(new_name)
        print(f"Deleted {new_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
