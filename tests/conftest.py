import json
from typing import Any, Callable

import httpx
import pytest

from hue_bridge.bridge import Bridge
from hue_bridge.hue_client import HueClient


class FakeBridge:
    """Answers requests from a route table and remembers what it was sent."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, body: Any, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"unexpected": f"{request.method} {request.url.path}"})
        status_code, body = route
        return httpx.Response(status_code, json=body)

    @property
    def last_json(self) -> Any:
        content = self.requests[-1].content
        return json.loads(content) if content else None


@pytest.fixture
def fake() -> FakeBridge:
    return FakeBridge()


@pytest.fixture
def client(fake: FakeBridge) -> HueClient:
    return HueClient(transport=httpx.MockTransport(fake.handler))


@pytest.fixture
def bridge(client: HueClient) -> Bridge:
    return Bridge("192.168.1.2", "user", client=client)


@pytest.fixture
def light_json() -> Callable[..., dict[str, Any]]:
    def make(name: str = "Desk", **state: Any) -> dict[str, Any]:
        base_state = {
            "on": True,
            "bri": 144,
            "hue": 13088,
            "sat": 212,
            "effect": "none",
            "xy": [0.5128, 0.4147],
            "ct": 467,
            "alert": "none",
            "colormode": "xy",
            "mode": "homeautomation",
            "reachable": True,
        }
        base_state.update(state)
        return {
            "state": base_state,
            "swupdate": {"state": "noupdates", "lastinstall": "2019-03-06T12:33:34"},
            "type": "Extended color light",
            "name": name,
            "modelid": "LCT015",
            "manufacturername": "Signify Netherlands B.V.",
            "productname": "Hue color lamp",
            "capabilities": {
                "certified": True,
                "control": {
                    "mindimlevel": 1000,
                    "maxlumen": 806,
                    "colorgamuttype": "C",
                    "colorgamut": [[0.6915, 0.3083], [0.17, 0.7], [0.1532, 0.0475]],
                    "ct": {"min": 153, "max": 500},
                },
                "streaming": {"renderer": True, "proxy": True},
            },
            "config": {
                "archetype": "sultanbulb",
                "function": "mixed",
                "direction": "omnidirectional",
                "startup": {"mode": "safety", "configured": True},
            },
            "uniqueid": "00:17:88:01:03:a1:b2:c3-0b",
            "swversion": "1.46.13_r26312",
        }

    return make
