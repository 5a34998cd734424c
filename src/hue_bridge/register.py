from __future__ import annotations

import ipaddress
from typing import Optional

from pydantic import Field

from hue_bridge.bridge import IPAddress, api_root
from hue_bridge.errors import BridgeError, DecodeError
from hue_bridge.hue_client import HueClient
from hue_bridge.resource import Model
from hue_bridge.response import check_all, decode


LINK_BUTTON_NOT_PRESSED = 101


class Registration(Model):
    username: str
    # Only returned when asked for; used for the entertainment streaming API.
    client_key: Optional[str] = Field(default=None, alias="clientkey")


def is_link_button_error(err: BridgeError) -> bool:
    return err.type == LINK_BUTTON_NOT_PRESSED


def register(
    ip_address: IPAddress | str,
    devicetype: str,
    *,
    generate_client_key: bool = False,
    client: HueClient | None = None,
) -> Registration:
    """Register a new user on the bridge.

    Succeeds only within 30 seconds of the link button being pressed; before that
    the bridge answers with error 101, raised as a :class:`BridgeError`.
    """
    client = client or HueClient()
    body: dict[str, object] = {"devicetype": devicetype}
    if generate_client_key:
        body["generateclientkey"] = True

    raw = client.request_json("POST", api_root(ipaddress.ip_address(ip_address)), json_body=body)
    for record in check_all(raw):
        return decode(record.unwrap(), Registration)
    raise DecodeError("Registration reply contained no records")


def register_user(ip_address: IPAddress | str, devicetype: str, *, client: HueClient | None = None) -> str:
    return register(ip_address, devicetype, client=client).username


def register_user_with_clientkey(
    ip_address: IPAddress | str, devicetype: str, *, client: HueClient | None = None
) -> tuple[str, str]:
    registration = register(ip_address, devicetype, generate_client_key=True, client=client)
    if registration.client_key is None:
        raise DecodeError("Bridge did not return a client key")
    return registration.username, registration.client_key
