from __future__ import annotations

from typing import Optional

from pydantic import Field, IPvAnyAddress

from hue_bridge.bridge import IPAddress
from hue_bridge.hue_client import HueClient
from hue_bridge.resource import Model
from hue_bridge.response import parse_response


DISCOVERY_URL = "https://discovery.meethue.com"


class DiscoveredBridge(Model):
    id: str
    ip_address: IPvAnyAddress = Field(alias="internalipaddress")
    port: Optional[int] = None


def discover_bridges(*, client: HueClient | None = None, url: str = DISCOVERY_URL) -> list[DiscoveredBridge]:
    """Ask the public directory service which bridges share our public address."""
    client = client or HueClient()
    return parse_response(client.request_json("GET", url), list[DiscoveredBridge])


def discover_nupnp(*, client: HueClient | None = None, url: str = DISCOVERY_URL) -> list[IPAddress]:
    return [bridge.ip_address for bridge in discover_bridges(client=client, url=url)]
