from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import Any

from hue_bridge.config import ClientConfig
from hue_bridge.description import Description, description
from hue_bridge.discover import DiscoveredBridge, discover_bridges
from hue_bridge.errors import BridgeError, HueError
from hue_bridge.hue_client import HueClient
from hue_bridge.register import is_link_button_error, register


def _describe(bridges: list[DiscoveredBridge], client: HueClient) -> dict[str, Description | None]:
    out: dict[str, Description | None] = {}
    for b in bridges:
        try:
            out[b.id] = description(b.ip_address, client=client)
        except HueError as exc:
            print(f"Could not read description of {b.ip_address}: {exc}", file=sys.stderr)
            out[b.id] = None
    return out


def _print_bridges(
    bridges: list[DiscoveredBridge], descriptions: dict[str, Description | None], *, json_out: bool
) -> None:
    if json_out:
        rows: list[dict[str, Any]] = []
        for b in bridges:
            row: dict[str, Any] = {"id": b.id, "ip": str(b.ip_address), "port": b.port}
            desc = descriptions.get(b.id)
            if desc is not None:
                row["friendlyName"] = desc.device.friendly_name
                row["model"] = desc.device.model_name
                row["udn"] = desc.device.udn
            rows.append(row)
        print(json.dumps(rows, indent=2))
        return

    if not bridges:
        print("No Hue bridges discovered.")
        return

    for i, b in enumerate(bridges, start=1):
        desc = descriptions.get(b.id)
        label = desc.device.friendly_name if desc is not None else "Hue Bridge"
        print(f"{i}) {b.ip_address} - {label} ({b.id})")


def _register_loop(
    *, bridge_ip: str, devicetype: str, client_key: bool, timeout_seconds: int, interval_ms: int, client: HueClient
) -> int:
    print("Registration requires the physical link button on the bridge.")
    print("Press the button now. Attempts will run until success or timeout.")

    deadline = time.time() + timeout_seconds
    attempt = 0
    while time.time() < deadline:
        attempt += 1
        try:
            registration = register(bridge_ip, devicetype, generate_client_key=client_key, client=client)
        except BridgeError as err:
            if is_link_button_error(err):
                remaining = int(deadline - time.time())
                print(f"[{attempt}] Button not pressed yet. Retrying… ({remaining}s left)")
                time.sleep(max(0.1, interval_ms / 1000.0))
                continue
            print(f"Registration failed: {err}", file=sys.stderr)
            return 1
        except HueError as err:
            print(f"Registration failed: {err}", file=sys.stderr)
            return 1

        print(f"Username: {registration.username}")
        if registration.client_key:
            print(f"Client key: {registration.client_key}")
        return 0

    print("Timed out waiting for the link button.", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> None:
    config = ClientConfig.from_env()

    parser = argparse.ArgumentParser(prog="hue-bridge-discover")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--describe", action="store_true", help="Fetch and parse description.xml for metadata")
    parser.add_argument("--discovery-url", default=config.discovery_url)
    parser.add_argument("--register", metavar="DEVICETYPE", help="Register a user, e.g. 'my_app#laptop'")
    parser.add_argument("--bridge-host", default=config.bridge_host, help="Bridge to register on (default: first found)")
    parser.add_argument("--client-key", action="store_true", help="Also generate an entertainment client key")
    parser.add_argument("--force", action="store_true", help="Register even if HUE_USERNAME is already set")
    parser.add_argument("--timeout-seconds", type=int, default=60)
    parser.add_argument("--interval-ms", type=int, default=1500)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    client = config.client()

    bridges: list[DiscoveredBridge] = []
    if not args.bridge_host or not args.register:
        try:
            bridges = discover_bridges(client=client, url=args.discovery_url)
        except HueError as exc:
            print(f"Discovery failed: {exc}", file=sys.stderr)
            raise SystemExit(1)

        descriptions = _describe(bridges, client) if args.describe else {}
        _print_bridges(bridges, descriptions, json_out=args.json)

    if args.register:
        if config.username and not args.force:
            print("A username is already configured (HUE_USERNAME); pass --force to register another.")
            raise SystemExit(0)
        bridge_ip = args.bridge_host or (str(bridges[0].ip_address) if bridges else None)
        if not bridge_ip:
            print("No bridge to register on: pass --bridge-host or make sure discovery finds one.", file=sys.stderr)
            raise SystemExit(2)
        raise SystemExit(
            _register_loop(
                bridge_ip=bridge_ip,
                devicetype=args.register,
                client_key=args.client_key,
                timeout_seconds=args.timeout_seconds,
                interval_ms=args.interval_ms,
                client=client,
            )
        )


if __name__ == "__main__":
    main()
