from __future__ import annotations

import ipaddress
import xml.etree.ElementTree as ET
from typing import Optional

from hue_bridge.bridge import IPAddress, format_host
from hue_bridge.errors import DecodeError
from hue_bridge.hue_client import HueClient
from hue_bridge.resource import Model


UPNP_NS = {"upnp": "urn:schemas-upnp-org:device-1-0"}


class DescriptionSpecVersion(Model):
    major: int
    minor: int


class DescriptionIcon(Model):
    mimetype: str
    height: int
    width: int
    depth: int
    url: str


class DescriptionDevice(Model):
    device_type: str
    friendly_name: str
    manufacturer: str
    manufacturer_url: Optional[str] = None
    model_description: Optional[str] = None
    model_name: str
    model_number: Optional[str] = None
    model_url: Optional[str] = None
    serial_number: str
    udn: str
    presentation_url: Optional[str] = None
    icons: list[DescriptionIcon] = []


class Description(Model):
    """UPnP device description served by the bridge at ``/description.xml``."""

    spec_version: DescriptionSpecVersion
    url_base: Optional[str] = None
    device: DescriptionDevice

    @property
    def is_hue_bridge(self) -> bool:
        hay = " ".join([self.device.friendly_name, self.device.manufacturer, self.device.model_name]).lower()
        return "hue" in hay or "philips" in hay or "signify" in hay


def _find(parent: ET.Element, tag: str) -> Optional[ET.Element]:
    el = parent.find(f"upnp:{tag}", UPNP_NS)
    if el is None:
        el = parent.find(tag)
    return el


def _text(parent: ET.Element, tag: str) -> Optional[str]:
    el = _find(parent, tag)
    if el is not None and el.text:
        return el.text.strip()
    return None


def parse_description(xml_text: str) -> Description:
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise DecodeError(f"Invalid description.xml: {exc}") from exc

    device = _find(root, "device")
    spec = _find(root, "specVersion")
    if device is None or spec is None:
        raise DecodeError("description.xml has no device or specVersion element")

    icons = []
    icon_list = _find(device, "iconList")
    if icon_list is not None:
        for icon in icon_list:
            icons.append(
                {
                    "mimetype": _text(icon, "mimetype"),
                    "height": _text(icon, "height"),
                    "width": _text(icon, "width"),
                    "depth": _text(icon, "depth"),
                    "url": _text(icon, "url"),
                }
            )

    payload = {
        "spec_version": {"major": _text(spec, "major"), "minor": _text(spec, "minor")},
        "url_base": _text(root, "URLBase"),
        "device": {
            "device_type": _text(device, "deviceType"),
            "friendly_name": _text(device, "friendlyName"),
            "manufacturer": _text(device, "manufacturer"),
            "manufacturer_url": _text(device, "manufacturerURL"),
            "model_description": _text(device, "modelDescription"),
            "model_name": _text(device, "modelName"),
            "model_number": _text(device, "modelNumber"),
            "model_url": _text(device, "modelURL"),
            "serial_number": _text(device, "serialNumber"),
            "udn": _text(device, "UDN"),
            "presentation_url": _text(device, "presentationURL"),
            "icons": icons,
        },
    }
    try:
        return Description.model_validate(payload)
    except ValueError as exc:
        raise DecodeError(f"Unexpected description.xml content: {exc}") from exc


def description(ip_address: IPAddress | str, *, client: HueClient | None = None) -> Description:
    host = format_host(ipaddress.ip_address(ip_address))
    client = client or HueClient()
    return parse_description(client.get_text(f"http://{host}/description.xml"))
