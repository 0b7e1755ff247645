from __future__ import annotations

from pydantic import Field

from .resources import OVModel

# firmwareInstallType (API 200+):
#   FirmwareOnly, FirmwareAndOSDrivers, FirmwareOnlyOfflineMode


class FirmwareOption(OVModel):
    firmware_install_type: str | None = None
    force_install_firmware: bool | None = None
    firmware_baseline_uri: str | None = None
    manage_firmware: bool | None = None


class BootModeOption(OVModel):
    manage_mode: bool | None = None
    mode: str | None = None  # "BIOS" | "UEFI" | "UEFIOptimized"
    pxe_boot_policy: str | None = None


class BootManagement(OVModel):
    manage_boot: bool | None = None
    order: list[str] | None = None  # e.g. ["CD", "USB", "HardDisk", "PXE"]


class BiosSettings(OVModel):
    id: str | None = None
    value: str | None = None


class BiosOption(OVModel):
    manage_bios: bool | None = None
    overridden_settings: list[BiosSettings] | None = None


class ConnectionBoot(OVModel):
    priority: str | None = None  # "Primary" | "Secondary" | "NotBootable"
    boot_volume_source: str | None = None

    def clone(self) -> ConnectionBoot:
        return ConnectionBoot(priority=self.priority, boot_volume_source=self.boot_volume_source)


class Connection(OVModel):
    id: int | None = None
    name: str | None = None
    function_type: str | None = None  # "Ethernet" | "FibreChannel"
    network_uri: str | None = None
    port_id: str | None = None
    requested_mbps: str | None = None
    boot: ConnectionBoot | None = None
    # assigned by the appliance per server
    mac: str | None = None
    mac_type: str | None = None
    wwnn: str | None = None
    wwpn: str | None = None
    wwpn_type: str | None = None
    interconnect_uri: str | None = None
    allocated_mbps: int | None = None
    maximum_mbps: int | None = None
    state: str | None = None
    status: str | None = None

    def clone(self) -> Connection:
        return Connection(
            id=self.id,
            name=self.name,
            function_type=self.function_type,
            network_uri=self.network_uri,
            port_id=self.port_id,
            requested_mbps=self.requested_mbps,
            boot=self.boot.clone() if self.boot else None,
        )


class LogicalDrive(OVModel):
    bootable: bool | None = None
    raid_level: str | None = None
    logical_drive_name: str | None = None

    def clone(self) -> LogicalDrive:
        return LogicalDrive(bootable=self.bootable, raid_level=self.raid_level, logical_drive_name=self.logical_drive_name)


class LocalStorageOptions(OVModel):
    manage_local_storage: bool | None = None
    initialize: bool | None = None
    logical_drives: list[LogicalDrive] | None = None

    def clone(self) -> LocalStorageOptions:
        drives = [d.clone() for d in self.logical_drives] if self.logical_drives is not None else None
        return LocalStorageOptions(
            manage_local_storage=self.manage_local_storage,
            initialize=self.initialize,
            logical_drives=drives,
        )


class StoragePath(OVModel):
    connection_id: int | None = None
    is_enabled: bool | None = None
    storage_target_type: str | None = None
    targets: list[dict] | None = None

    def clone(self) -> StoragePath:
        return StoragePath(
            connection_id=self.connection_id,
            is_enabled=self.is_enabled,
            storage_target_type=self.storage_target_type,
            targets=[dict(t) for t in self.targets] if self.targets is not None else None,
        )


class VolumeAttachment(OVModel):
    id: int | None = None
    lun: str | None = None
    lun_type: str | None = None
    volume_uri: str | None = None
    volume_storage_pool_uri: str | None = None
    volume_storage_system_uri: str | None = None
    storage_paths: list[StoragePath] | None = None
    state: str | None = None
    status: str | None = None

    def clone(self) -> VolumeAttachment:
        paths = [p.clone() for p in self.storage_paths] if self.storage_paths is not None else None
        return VolumeAttachment(
            id=self.id,
            lun=self.lun,
            lun_type=self.lun_type,
            volume_uri=self.volume_uri,
            volume_storage_pool_uri=self.volume_storage_pool_uri,
            volume_storage_system_uri=self.volume_storage_system_uri,
            storage_paths=paths,
        )


class SanStorageOptions(OVModel):
    host_os_type: str | None = Field(default=None, alias="hostOSType")
    manage_san_storage: bool | None = None
    volume_attachments: list[VolumeAttachment] | None = None

    def clone(self) -> SanStorageOptions:
        attachments = [v.clone() for v in self.volume_attachments] if self.volume_attachments is not None else None
        return SanStorageOptions(
            host_os_type=self.host_os_type,
            manage_san_storage=self.manage_san_storage,
            volume_attachments=attachments,
        )


class ServerProfile(OVModel):
    affinity: str | None = None  # "Bay" | "BayAndServer"
    associated_server: str | None = None
    bios: BiosOption | None = None
    boot: BootManagement | None = None
    boot_mode: BootModeOption | None = None
    category: str | None = None
    connections: list[Connection] | None = None
    description: str | None = None
    created: str | None = None
    e_tag: str | None = Field(default=None, alias="eTag")
    enclosure_bay: int | None = None
    enclosure_group_uri: str | None = None
    enclosure_uri: str | None = None
    firmware: FirmwareOption | None = None
    hide_unused_flex_nics: bool | None = None
    in_progress: bool | None = None
    local_storage: LocalStorageOptions | None = None
    mac_type: str | None = None
    modified: str | None = None
    name: str = ""
    san_storage: SanStorageOptions | None = None
    serial_number: str | None = None
    serial_number_type: str | None = None
    server_hardware_type_uri: str | None = None
    server_hardware_uri: str | None = None
    server_profile_template_uri: str | None = None
    state: str | None = None
    status: str | None = None
    task_uri: str | None = None
    type: str | None = None
    uri: str | None = None
    uuid: str | None = None
    wwn_type: str | None = None

    def clone(self) -> ServerProfile:
        """Copy of the portable parts of this profile.

        Identity and per-server assignments (uri, eTag, serial number,
        uuid, server hardware, state) are left out so the copy can be
        submitted as a new profile.
        """

        def copy(v):
            return v.model_copy(deep=True) if v is not None else None

        return ServerProfile(
            affinity=self.affinity,
            bios=copy(self.bios),
            boot=copy(self.boot),
            boot_mode=copy(self.boot_mode),
            connections=[c.clone() for c in self.connections] if self.connections is not None else None,
            description=self.description,
            enclosure_bay=self.enclosure_bay,
            enclosure_group_uri=self.enclosure_group_uri,
            enclosure_uri=self.enclosure_uri,
            firmware=copy(self.firmware),
            hide_unused_flex_nics=self.hide_unused_flex_nics,
            local_storage=self.local_storage.clone() if self.local_storage else None,
            mac_type=self.mac_type,
            name=self.name,
            san_storage=self.san_storage.clone() if self.san_storage else None,
            serial_number_type=self.serial_number_type,
            type=self.type,
            wwn_type=self.wwn_type,
        )
