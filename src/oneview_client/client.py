from __future__ import annotations

from pathlib import Path

import httpx

from .config import Settings, load_config_file, load_settings
from .connection import OVConnection
from .services.appliance import ApplianceService
from .services.hardware import ServerHardwareService
from .services.networks import EthernetNetworkService, FCNetworkService
from .services.profiles import ServerProfileService
from .services.scopes import ScopeService
from .services.tasks import TaskService


class OVClient:
    """Entry point: one authenticated connection plus a service per resource."""

    def __init__(self, settings: Settings | None = None, *, transport: httpx.BaseTransport | None = None) -> None:
        self.settings = settings or Settings()
        self.connection = OVConnection(self.settings, transport=transport)
        self.tasks = TaskService(self.connection, self.settings)
        self.scopes = ScopeService(self.connection, self.tasks)
        self.fc_networks = FCNetworkService(self.connection, self.tasks)
        self.ethernet_networks = EthernetNetworkService(self.connection, self.tasks)
        self.server_hardware = ServerHardwareService(self.connection, self.tasks)
        self.server_profiles = ServerProfileService(self.connection, self.tasks, self.server_hardware)
        self.appliance = ApplianceService(self.connection, self.tasks)

    @classmethod
    def from_environment(cls, **kwargs) -> OVClient:
        return cls(load_settings(), **kwargs)

    @classmethod
    def from_config_file(cls, path: str | Path = "oneview_config.json", **kwargs) -> OVClient:
        return cls(load_config_file(path), **kwargs)

    def __enter__(self) -> OVClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.connection.close()
