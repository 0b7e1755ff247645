from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OVModel(BaseModel):
    """Snapshot of an appliance resource.

    Unknown fields are kept so a fetched record can be PUT back whole.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


T = TypeVar("T", bound=OVModel)


class ResourceList(OVModel, Generic[T]):
    total: int = 0
    count: int = 0
    start: int = 0
    prev_page_uri: str | None = None
    next_page_uri: str | None = None
    uri: str | None = None
    members: list[T] = Field(default_factory=list)


class Scope(OVModel):
    name: str = ""
    description: str | None = None
    type: str | None = "ScopeV3"
    uri: str | None = None
    e_tag: str | None = Field(default=None, alias="eTag")
    category: str | None = None
    initial_scope_uris: list[str] | None = None
    added_resource_uris: list[str] | None = None
    removed_resource_uris: list[str] | None = None


class ResourceScope(OVModel):
    """Scopes assigned to a single resource."""

    type: str | None = "ScopedResource"
    resource_uri: str = ""
    scope_uris: list[str] = Field(default_factory=list)
    uri: str | None = None


class FCNetwork(OVModel):
    name: str = ""
    description: str | None = None
    type: str | None = "fc-networkV4"
    fabric_type: str | None = None
    link_stability_time: int | None = None
    auto_login_redistribution: bool | None = None
    managed_san_uri: str | None = None
    connection_template_uri: str | None = None
    initial_scope_uris: list[str] | None = None
    scopes_uri: str | None = None
    state: str | None = None
    status: str | None = None
    uri: str | None = None
    e_tag: str | None = Field(default=None, alias="eTag")


class EthernetNetwork(OVModel):
    name: str = ""
    type: str | None = None
    vlan_id: int | None = None
    ethernet_network_type: str | None = None
    purpose: str | None = None
    smart_link: bool | None = None
    private_network: bool | None = None
    uri: str | None = None
    e_tag: str | None = Field(default=None, alias="eTag")


class ApplianceSshAccess(OVModel):
    allow_ssh_access: bool = True
    type: str | None = None
    uri: str | None = None


class ServerHardware(OVModel):
    name: str = ""
    uri: str | None = None
    power_state: str | None = None
    serial_number: str | None = None
    model: str | None = None
    state: str | None = None
    status: str | None = None
    server_profile_uri: str | None = None
    maintenance_mode: bool | None = None
