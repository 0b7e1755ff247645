from __future__ import annotations

import logging

from ..connection import OVConnection
from ..models import ApplianceSshAccess
from .tasks import Task, TaskService

logger = logging.getLogger(__name__)

SSH_ACCESS_URI = "/rest/appliance/ssh-access"


class ApplianceService:
    def __init__(self, connection: OVConnection, tasks: TaskService) -> None:
        self.connection = connection
        self.tasks = tasks

    def get_ssh_access(self) -> ApplianceSshAccess:
        return ApplianceSshAccess.model_validate(self.connection.get(SSH_ACCESS_URI) or {})

    def set_ssh_access(self, access: ApplianceSshAccess) -> Task:
        logger.info(f"Setting appliance SSH access to {access.allow_ssh_access}")
        r = self.connection.put(SSH_ACCESS_URI, access)
        return self.tasks.from_response(r, "set appliance ssh access")
