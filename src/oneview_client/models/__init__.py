from .profiles import (
    BiosOption,
    BiosSettings,
    BootManagement,
    BootModeOption,
    Connection,
    ConnectionBoot,
    FirmwareOption,
    LocalStorageOptions,
    LogicalDrive,
    SanStorageOptions,
    ServerProfile,
    StoragePath,
    VolumeAttachment,
)
from .resources import (
    ApplianceSshAccess,
    EthernetNetwork,
    FCNetwork,
    OVModel,
    ResourceList,
    ResourceScope,
    Scope,
    ServerHardware,
)

__all__ = [
    "ApplianceSshAccess",
    "BiosOption",
    "BiosSettings",
    "BootManagement",
    "BootModeOption",
    "Connection",
    "ConnectionBoot",
    "EthernetNetwork",
    "FCNetwork",
    "FirmwareOption",
    "LocalStorageOptions",
    "LogicalDrive",
    "OVModel",
    "ResourceList",
    "ResourceScope",
    "SanStorageOptions",
    "Scope",
    "ServerHardware",
    "ServerProfile",
    "StoragePath",
    "VolumeAttachment",
]
