from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from hue_bridge.discover import DISCOVERY_URL
from hue_bridge.hue_client import HueClient


@dataclass(frozen=True)
class ClientConfig:
    bridge_host: Optional[str]
    username: Optional[str]
    timeout_seconds: float
    connect_timeout_seconds: float
    discovery_url: str

    @staticmethod
    def from_env() -> "ClientConfig":
        return ClientConfig(
            bridge_host=os.getenv("HUE_BRIDGE_HOST"),
            username=os.getenv("HUE_USERNAME"),
            timeout_seconds=float(os.getenv("HUE_TIMEOUT_SECONDS", "10")),
            connect_timeout_seconds=float(os.getenv("HUE_CONNECT_TIMEOUT_SECONDS", "3")),
            discovery_url=os.getenv("HUE_DISCOVERY_URL", DISCOVERY_URL),
        )

    def client(self) -> HueClient:
        return HueClient(timeout_seconds=self.timeout_seconds, connect_timeout_seconds=self.connect_timeout_seconds)
