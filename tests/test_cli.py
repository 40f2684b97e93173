"""Tests for the zone lighting CLI."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from zone_lighting_manager import cli
from zone_lighting_manager.service import create_app
from zone_lighting_manager.zone_store import ZoneStore

runner = CliRunner()


@pytest.fixture
def seen_urls() -> list[str]:
    """Collect the base URLs the CLI connects to."""
    return []


@pytest.fixture
def store(
    monkeypatch: pytest.MonkeyPatch, seen_urls: list[str]
) -> ZoneStore:
    """Route CLI requests to an in-process app backed by a fresh store."""
    store = ZoneStore()
    app = create_app(store=store, serve_static=False)

    def _client(base_url: str) -> TestClient:
        seen_urls.append(base_url)
        return TestClient(app)

    monkeypatch.setattr(cli, "_client", _client)
    return store


def test_list_renders_every_zone(store: ZoneStore) -> None:
    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 0
    assert "off" in result.output
    for zone_id in range(8):
        assert str(zone_id) in result.output


def test_get_single_zone(store: ZoneStore) -> None:
    store.patch(2, {"mode": "blink"})
    result = runner.invoke(cli.app, ["get", "2"])
    assert result.exit_code == 0
    assert "blink" in result.output


def test_set_patches_only_given_options(store: ZoneStore) -> None:
    result = runner.invoke(
        cli.app, ["set", "4", "--mode", "fade", "--r", "10"]
    )
    assert result.exit_code == 0
    zone = store.get(4)
    assert (zone.mode, zone.r, zone.g, zone.b) == ("fade", 10, 255, 255)


def test_set_without_options_changes_nothing(store: ZoneStore) -> None:
    result = runner.invoke(cli.app, ["set", "1"])
    assert result.exit_code == 0
    assert store.get(1).to_dict() == {
        "id": 1,
        "mode": "off",
        "r": 255,
        "g": 255,
        "b": 255,
    }


def test_invalid_zone_exits_with_error(store: ZoneStore) -> None:
    result = runner.invoke(cli.app, ["get", "12"])
    assert result.exit_code == 1
    assert "Invalid zone id" in result.output


def test_url_option_is_passed_to_client(
    store: ZoneStore, seen_urls: list[str]
) -> None:
    result = runner.invoke(
        cli.app, ["--url", "http://lights.local:3000/", "list"]
    )
    assert result.exit_code == 0
    assert seen_urls == ["http://lights.local:3000"]


def test_unreachable_service_exits_with_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        cli,
        "_client",
        lambda base_url: httpx.Client(
            base_url=base_url, transport=httpx.MockTransport(_refuse)
        ),
    )
    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 1
    assert "Unable to reach" in result.output


def _static_client(status_code: int, **response_kwargs):
    """Return a client factory answering every request with one response."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **response_kwargs)

    return lambda base_url: httpx.Client(
        base_url=base_url, transport=httpx.MockTransport(_handler)
    )


def test_error_with_non_object_json_body_exits_cleanly(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(cli, "_client", _static_client(404, json=["missing"]))
    result = runner.invoke(cli.app, ["get", "1"])
    assert result.exit_code == 1
    assert "Error 404" in result.output
    assert not isinstance(result.exception, AttributeError)


def test_non_json_success_response_exits_cleanly(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A plain HTML page instead of the API reports an error, not a traceback."""
    monkeypatch.setattr(
        cli, "_client", _static_client(200, text="<html>hello</html>")
    )
    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 1
    assert "non-JSON" in result.output
    assert not isinstance(result.exception, ValueError)
