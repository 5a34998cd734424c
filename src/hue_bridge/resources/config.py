from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import wire
from hue_bridge.resource import BridgeTime, Model, Writable


class User(Model):
    name: str
    last_use_date: BridgeTime = Field(default=None, alias="last use date")
    create_date: BridgeTime = Field(default=None, alias="create date")


class PortalConnection(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"


class InternetServices(Model):
    internet: Optional[str] = None
    remote_access: Optional[str] = Field(default=None, alias="remoteaccess")
    time: Optional[str] = None
    software_update: Optional[str] = Field(default=None, alias="swupdate")


class Backup(Model):
    status: str
    error_code: int = Field(default=0, alias="errorcode")


class Config(Model):
    """Bridge configuration.

    Without a valid username only the identifying fields (name, bridge id, mac,
    versions) are filled in.
    """

    name: str
    bridge_id: str = Field(alias="bridgeid")
    mac: str
    model_id: str = Field(alias="modelid")
    software_version: str = Field(alias="swversion")
    api_version: str = Field(alias="apiversion")
    datastore_version: Optional[str] = Field(default=None, alias="datastoreversion")
    factory_new: bool = Field(default=False, alias="factorynew")
    replaces_bridge_id: Optional[str] = Field(default=None, alias="replacesbridgeid")
    starter_kit_id: Optional[str] = Field(default=None, alias="starterkitid")
    zigbee_channel: Optional[int] = Field(default=None, alias="zigbeechannel")
    dhcp: Optional[bool] = None
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    netmask: Optional[str] = None
    gateway: Optional[str] = None
    proxy_address: Optional[str] = Field(default=None, alias="proxyaddress")
    proxy_port: Optional[int] = Field(default=None, alias="proxyport")
    utc: BridgeTime = Field(default=None, alias="UTC")
    local_time: BridgeTime = Field(default=None, alias="localtime")
    timezone: Optional[str] = None
    link_button: Optional[bool] = Field(default=None, alias="linkbutton")
    portal_services: Optional[bool] = Field(default=None, alias="portalservices")
    portal_connection: Optional[PortalConnection] = Field(default=None, alias="portalconnection")
    internet_services: Optional[InternetServices] = Field(default=None, alias="internetservices")
    backup: Optional[Backup] = None
    whitelist: dict[str, User] = Field(default_factory=dict)


@dataclass(kw_only=True)
class Modifier(Writable):
    name: Optional[str] = wire()
    zigbee_channel: Optional[int] = wire("zigbeechannel")
    ip_address: Optional[str] = wire("ipaddress")
    dhcp: Optional[bool] = wire()
    netmask: Optional[str] = wire()
    gateway: Optional[str] = wire()
    proxy_address: Optional[str] = wire("proxyaddress")
    proxy_port: Optional[int] = wire("proxyport")
    utc: Optional[str] = wire("UTC")
    timezone: Optional[str] = wire()
    link_button: Optional[bool] = wire("linkbutton")
    touchlink: Optional[bool] = wire()
