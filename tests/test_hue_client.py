import json
import logging

import httpx
import pytest

from hue_bridge.errors import DecodeError, HueTransportError, HueUpstreamError
from hue_bridge.hue_client import HueClient


def test_hue_client_returns_json_body_on_success():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        return httpx.Response(200, json={"name": "Philips hue"})

    client = HueClient(transport=httpx.MockTransport(handler))
    assert client.request_json("GET", "http://bridge.test/api/user/config") == {"name": "Philips hue"}


def test_hue_client_sends_json_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["content"] = request.content
        seen["content_type"] = request.headers.get("content-type")
        return httpx.Response(200, json=[])

    client = HueClient(transport=httpx.MockTransport(handler))
    client.request_json("PUT", "http://bridge.test/api/user/lights/1/state", json_body={"on": True})
    assert json.loads(seen["content"]) == {"on": True}
    assert seen["content_type"] == "application/json"


def test_hue_client_raises_upstream_error_and_exposes_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"errors": [{"description": "nope"}]})

    client = HueClient(transport=httpx.MockTransport(handler))
    with pytest.raises(HueUpstreamError) as exc:
        client.request_json("GET", "http://bridge.test/api/user/lights")
    assert exc.value.status_code == 404
    assert exc.value.body == {"errors": [{"description": "nope"}]}


def test_hue_client_does_not_retry():
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        return httpx.Response(503, text="busy")

    client = HueClient(transport=httpx.MockTransport(handler))
    with pytest.raises(HueUpstreamError) as exc:
        client.request_json("GET", "http://bridge.test/api/user/lights")
    assert exc.value.body == "busy"
    assert calls["n"] == 1


def test_hue_client_raises_transport_error_on_connect_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    client = HueClient(transport=httpx.MockTransport(handler))
    with pytest.raises(HueTransportError):
        client.request_json("GET", "http://bridge.test/api/user/config")


@pytest.mark.parametrize(
    "exc_type",
    [httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.PoolTimeout, httpx.ReadError],
)
def test_hue_client_wraps_every_transport_failure(exc_type):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("connection dropped", request=request)

    client = HueClient(transport=httpx.MockTransport(handler))
    with pytest.raises(HueTransportError):
        client.request_json("GET", "http://bridge.test/api/user/lights")
    with pytest.raises(HueTransportError):
        client.get_text("http://bridge.test/description.xml")


def test_hue_client_rejects_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    client = HueClient(transport=httpx.MockTransport(handler))
    with pytest.raises(DecodeError):
        client.request_json("GET", "http://bridge.test/api/user/config")


def test_hue_client_logs_requests_without_username(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    client = HueClient(transport=httpx.MockTransport(handler))
    with caplog.at_level(logging.DEBUG, logger="hue_bridge.hue_client"):
        client.request_json("GET", "http://bridge.test/api/secret-user/lights")

    assert "bridge.test/api/***/lights" in caplog.text
    assert "secret-user" not in caplog.text


def test_hue_client_get_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<root/>")

    client = HueClient(transport=httpx.MockTransport(handler))
    assert client.get_text("http://bridge.test/description.xml") == "<root/>"
