"""Client for the HP OneView REST API."""

from .client import OVClient
from .config import Settings, load_config_file
from .errors import (
    AuthenticationError,
    ConfigError,
    OneViewConnectionError,
    OneViewError,
    OneViewHTTPError,
    TaskFailedError,
    TaskTimeoutError,
)
from .services.tasks import Task

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "OVClient",
    "OneViewConnectionError",
    "OneViewError",
    "OneViewHTTPError",
    "Settings",
    "Task",
    "TaskFailedError",
    "TaskTimeoutError",
    "load_config_file",
]
