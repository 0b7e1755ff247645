from __future__ import annotations

import logging

from ..models import ServerHardware
from .base import ResourceService
from .tasks import Task

logger = logging.getLogger(__name__)


class ServerHardwareService(ResourceService[ServerHardware]):
    uri = "/rest/server-hardware"
    model = ServerHardware
    kind = "server hardware"

    def set_power_state(self, hardware: ServerHardware, state: str, control: str = "MomentaryPress") -> Task:
        if not hardware.uri:
            raise ValueError(f"server hardware {hardware.name!r} has no uri")
        body = {"powerState": state, "powerControl": control}
        logger.info(f"Power {state} ({control}) for {hardware.name}")
        r = self.connection.put(f"{hardware.uri}/powerState", body)
        return self.tasks.from_response(r, f"power {state.lower()} {hardware.name}")

    def power_off(self, hardware: ServerHardware) -> Task:
        """Force the server off; a server already off is left alone."""
        if hardware.power_state == "Off":
            logger.debug(f"{hardware.name} is already powered off")
            return self.tasks.completed(f"power off {hardware.name}")
        task = self.set_power_state(hardware, "Off", "PressAndHold")
        task.wait()
        hardware.power_state = "Off"
        return task
