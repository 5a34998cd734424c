from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from hue_bridge.hue_client import HueClient, RequestMethod
from hue_bridge.resource import Resource, Scan, Scanner, Writable
from hue_bridge.resources import group, light, resourcelink, rule, scene, schedule, sensor
from hue_bridge.resources.capabilities import Capabilities
from hue_bridge.resources.config import Config, Modifier as ConfigModifier
from hue_bridge.response import Failure, Modified, Response, check_all, parse_created_id, parse_modified, parse_response


logger = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
R = TypeVar("R", bound=Resource)


def format_host(ip_address: IPAddress) -> str:
    return f"[{ip_address}]" if ip_address.version == 6 else str(ip_address)


def api_root(ip_address: IPAddress) -> str:
    return f"http://{format_host(ip_address)}/api"


@dataclass(frozen=True)
class Bridge:
    """A bridge and the user the calls are made as.

    Immutable; every method performs exactly one blocking request, so a bridge
    can be shared freely between threads.
    """

    ip_address: IPAddress
    username: str
    api_url: str = field(init=False)
    client: HueClient = field(default_factory=HueClient, compare=False, repr=False)

    def __post_init__(self) -> None:
        ip = ipaddress.ip_address(self.ip_address)
        object.__setattr__(self, "ip_address", ip)
        object.__setattr__(self, "api_url", f"{api_root(ip)}/{self.username}")

    def api_request(self, url_suffix: str, method: RequestMethod, body: Any | None = None) -> Any:
        return self.client.request_json(method, f"{self.api_url}/{url_suffix}", json_body=body)

    def _collection(self, path: str, model: type[R]) -> "_Collection[R]":
        return _Collection(bridge=self, path=path, model=model)

    # Configuration

    def get_config(self) -> Config:
        return parse_response(self.api_request("config", "GET"), Config)

    def set_config(self, modifier: ConfigModifier) -> list[Response[Modified]]:
        return _put(self, "config", modifier)

    def get_capabilities(self) -> Capabilities:
        return parse_response(self.api_request("capabilities", "GET"), Capabilities)

    # Lights

    def get_light(self, id: str) -> light.Light:
        return self._collection("lights", light.Light).get(id)

    def get_all_lights(self) -> list[light.Light]:
        return self._collection("lights", light.Light).get_all()

    def set_light_attribute(self, id: str, modifier: light.AttributeModifier) -> list[Response[Modified]]:
        return self._collection("lights", light.Light).set(id, modifier)

    def set_light_state(self, id: str, modifier: light.StateModifier) -> list[Response[Modified]]:
        return self._collection("lights", light.Light).set(id, modifier, suffix="state")

    def delete_light(self, id: str) -> None:
        self._collection("lights", light.Light).delete(id)

    def search_new_lights(self, scanner: Scanner | None = None) -> None:
        """Start a search for new lights.

        The bridge opens the network for 40 seconds; sending this again during a
        search extends it. Results are read with :meth:`get_new_lights`.
        """
        _scan(self, "lights", scanner)

    def get_new_lights(self) -> Scan:
        return parse_response(self.api_request("lights/new", "GET"), Scan)

    # Groups

    def create_group(self, creator: group.Creator) -> str:
        return self._collection("groups", group.Group).create(creator)

    def get_group(self, id: str) -> group.Group:
        return self._collection("groups", group.Group).get(id)

    def get_all_groups(self) -> list[group.Group]:
        return self._collection("groups", group.Group).get_all()

    def set_group_attribute(self, id: str, modifier: group.AttributeModifier) -> list[Response[Modified]]:
        return self._collection("groups", group.Group).set(id, modifier)

    def set_group_state(self, id: str, modifier: group.StateModifier) -> list[Response[Modified]]:
        return self._collection("groups", group.Group).set(id, modifier, suffix="action")

    def delete_group(self, id: str) -> None:
        self._collection("groups", group.Group).delete(id)

    # Scenes

    def create_scene(self, creator: scene.Creator) -> str:
        return self._collection("scenes", scene.Scene).create(creator)

    def get_scene(self, id: str) -> scene.Scene:
        return self._collection("scenes", scene.Scene).get(id)

    def get_all_scenes(self) -> list[scene.Scene]:
        return self._collection("scenes", scene.Scene).get_all()

    def set_scene(self, id: str, modifier: scene.Modifier) -> list[Response[Modified]]:
        return self._collection("scenes", scene.Scene).set(id, modifier)

    def delete_scene(self, id: str) -> None:
        self._collection("scenes", scene.Scene).delete(id)

    # Schedules

    def create_schedule(self, creator: schedule.Creator) -> str:
        return self._collection("schedules", schedule.Schedule).create(creator)

    def get_schedule(self, id: str) -> schedule.Schedule:
        return self._collection("schedules", schedule.Schedule).get(id)

    def get_all_schedules(self) -> list[schedule.Schedule]:
        return self._collection("schedules", schedule.Schedule).get_all()

    def set_schedule(self, id: str, modifier: schedule.Modifier) -> list[Response[Modified]]:
        return self._collection("schedules", schedule.Schedule).set(id, modifier)

    def delete_schedule(self, id: str) -> None:
        self._collection("schedules", schedule.Schedule).delete(id)

    # Resourcelinks

    def create_resourcelink(self, creator: resourcelink.Creator) -> str:
        return self._collection("resourcelinks", resourcelink.Resourcelink).create(creator)

    def get_resourcelink(self, id: str) -> resourcelink.Resourcelink:
        return self._collection("resourcelinks", resourcelink.Resourcelink).get(id)

    def get_all_resourcelinks(self) -> list[resourcelink.Resourcelink]:
        return self._collection("resourcelinks", resourcelink.Resourcelink).get_all()

    def set_resourcelink(self, id: str, modifier: resourcelink.Modifier) -> list[Response[Modified]]:
        return self._collection("resourcelinks", resourcelink.Resourcelink).set(id, modifier)

    def delete_resourcelink(self, id: str) -> None:
        self._collection("resourcelinks", resourcelink.Resourcelink).delete(id)

    # Sensors

    def get_sensor(self, id: str) -> sensor.Sensor:
        return self._collection("sensors", sensor.Sensor).get(id)

    def get_all_sensors(self) -> list[sensor.Sensor]:
        return self._collection("sensors", sensor.Sensor).get_all()

    def set_sensor_attribute(self, id: str, modifier: sensor.AttributeModifier) -> list[Response[Modified]]:
        return self._collection("sensors", sensor.Sensor).set(id, modifier)

    def set_sensor_state(self, id: str, modifier: sensor.StateModifier) -> list[Response[Modified]]:
        return self._collection("sensors", sensor.Sensor).set(id, modifier, suffix="state")

    def set_sensor_config(self, id: str, modifier: sensor.ConfigModifier) -> list[Response[Modified]]:
        return self._collection("sensors", sensor.Sensor).set(id, modifier, suffix="config")

    def delete_sensor(self, id: str) -> None:
        self._collection("sensors", sensor.Sensor).delete(id)

    def search_new_sensors(self, scanner: Scanner | None = None) -> None:
        """Start a search for new sensors; see :meth:`search_new_lights`."""
        _scan(self, "sensors", scanner)

    def get_new_sensors(self) -> Scan:
        return parse_response(self.api_request("sensors/new", "GET"), Scan)

    # Rules

    def create_rule(self, creator: rule.Creator) -> str:
        return self._collection("rules", rule.Rule).create(creator)

    def get_rule(self, id: str) -> rule.Rule:
        return self._collection("rules", rule.Rule).get(id)

    def get_all_rules(self) -> list[rule.Rule]:
        return self._collection("rules", rule.Rule).get_all()

    def set_rule(self, id: str, modifier: rule.Modifier) -> list[Response[Modified]]:
        return self._collection("rules", rule.Rule).set(id, modifier)

    def delete_rule(self, id: str) -> None:
        self._collection("rules", rule.Rule).delete(id)


@dataclass(frozen=True)
class _Collection(Generic[R]):
    """get/get-all/create/set/delete for one resource collection."""

    bridge: Bridge
    path: str
    model: type[R]

    def get(self, id: str) -> R:
        resource = parse_response(self.bridge.api_request(f"{self.path}/{id}", "GET"), self.model)
        return resource.with_id(id)

    def get_all(self) -> list[R]:
        by_id = parse_response(self.bridge.api_request(self.path, "GET"), dict[str, self.model])
        return [resource.with_id(id) for id, resource in by_id.items()]

    def create(self, creator: Writable) -> str:
        raw = self.bridge.api_request(self.path, "POST", creator.to_body())
        created = parse_created_id(raw)
        logger.debug("Created %s/%s", self.path, created)
        return created

    def set(self, id: str, modifier: Writable, *, suffix: str = "") -> list[Response[Modified]]:
        url_suffix = f"{self.path}/{id}/{suffix}" if suffix else f"{self.path}/{id}"
        return _put(self.bridge, url_suffix, modifier)

    def delete(self, id: str) -> None:
        check_all(self.bridge.api_request(f"{self.path}/{id}", "DELETE"))
        logger.debug("Deleted %s/%s", self.path, id)


def _put(bridge: Bridge, url_suffix: str, modifier: Writable) -> list[Response[Modified]]:
    responses = parse_modified(bridge.api_request(url_suffix, "PUT", modifier.to_body()))
    failed = sum(1 for r in responses if isinstance(r, Failure))
    if failed:
        logger.debug("PUT %s: %d of %d attributes rejected", url_suffix, failed, len(responses))
    return responses


def _scan(bridge: Bridge, path: str, scanner: Scanner | None) -> None:
    body = scanner.to_body() if scanner is not None else None
    check_all(bridge.api_request(path, "POST", body))
