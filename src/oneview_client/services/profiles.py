from __future__ import annotations

import logging

from ..connection import OVConnection
from ..errors import OneViewError
from ..models import ResourceList, ServerHardware, ServerProfile
from .base import ResourceService
from .hardware import ServerHardwareService
from .tasks import Task, TaskService

logger = logging.getLogger(__name__)


class ServerProfileService(ResourceService[ServerProfile]):
    uri = "/rest/server-profiles"
    model = ServerProfile
    kind = "server profile"

    def __init__(self, connection: OVConnection, tasks: TaskService, hardware: ServerHardwareService) -> None:
        super().__init__(connection, tasks)
        self.hardware = hardware

    def get_profiles(self, filter: str = "", sort: str = "") -> ResourceList[ServerProfile]:
        return self.list(filter=filter, sort=sort)

    def get_by_serial_number(self, serial_number: str) -> ServerProfile | None:
        page = self.list(filter=f"serialNumber matches '{serial_number}'", sort="name:asc")
        if page.members:
            return page.members[0]
        return None

    def submit_new_profile(self, profile: ServerProfile) -> Task:
        """POST a new profile and return its task without waiting."""
        logger.info(f"Initializing creation of server profile for {profile.name}.")
        logger.debug(f"REST : {self.uri} \n {profile!r}")
        try:
            r = self.connection.post(self.uri, profile)
        except OneViewError as exc:
            logger.error(f"Error submitting new profile request: {exc}")
            raise
        return self.tasks.from_response(r, f"create server profile {profile.name}")

    def create_from_template(self, name: str, template: ServerProfile, blade: ServerHardware) -> Task:
        logger.debug(f"TEMPLATE : {template!r}")
        profile = template.clone()
        profile.server_hardware_uri = blade.uri
        profile.description = f"{profile.description or ''} {name}"
        profile.name = name
        return self.submit_new_profile(profile).wait()

    def submit_delete_profile(self, profile: ServerProfile) -> Task:
        if not profile.uri:
            logger.warning("Unable to post delete, no uri found.")
            return self.tasks.completed(f"delete server profile {profile.name}")
        logger.debug(f"REST : {profile.uri}")
        try:
            r = self.connection.delete(profile.uri)
        except OneViewError as exc:
            logger.error(f"Error submitting delete profile request: {exc}")
            raise
        return self.tasks.from_response(r, f"delete server profile {profile.name}")

    def delete_profile(self, name: str) -> Task:
        """Delete a profile by name, unassigning (and powering off) its server."""
        profile = self.get_by_name(name)
        if profile is None or not profile.name:
            logger.info(f"Profile could not be found to delete, {name}, skipping delete ...")
            return self.tasks.completed(f"delete server profile {name}")

        server: ServerHardware | None = None
        server_name = "'no server'"
        if profile.server_hardware_uri:
            try:
                server = self.hardware.get_by_uri(profile.server_hardware_uri)
            except OneViewError as exc:
                logger.warning(f"Problem getting server hardware, {exc}")
            else:
                if server.name:
                    server_name = server.name
        logger.info(f"Delete server profile {profile.name} from oneview, {server_name} will be unassigned.")

        # the appliance refuses to unassign a powered-on server
        if server is not None and server.name:
            try:
                self.hardware.power_off(server)
            except OneViewError as exc:
                logger.warning(f"Problem powering off server {server_name}, {exc}")

        return self.submit_delete_profile(profile).wait()

    # name-based delete for profiles also handles the assigned server
    delete = delete_profile
