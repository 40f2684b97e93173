"""Zone lighting CLI entrypoint.

A thin HTTP client for a running service plus a ``serve`` command that
starts one.
"""

from typing import Any, Optional

import httpx
import typer
from rich import print
from rich.table import Table
from typing_extensions import Annotated

from . import config

app = typer.Typer(no_args_is_help=True)

CLIENT_TIMEOUT = httpx.Timeout(5.0)


def _client(base_url: str) -> httpx.Client:
    """Return an HTTP client bound to the service at ``base_url``."""
    return httpx.Client(base_url=base_url, timeout=CLIENT_TIMEOUT)


def _request(ctx: typer.Context, method: str, path: str, **kwargs: Any) -> Any:
    """Send a request and return the decoded JSON, exiting on failure."""
    base_url = ctx.obj["url"]
    try:
        with _client(base_url) as client:
            response = client.request(method, path, **kwargs)
    except httpx.HTTPError as exc:
        print(f"[red]Unable to reach {base_url}: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if response.status_code >= 400:
        message = response.text
        if isinstance(payload, dict) and "error" in payload:
            message = payload["error"]
        print(f"[red]Error {response.status_code}: {message}[/red]")
        raise typer.Exit(code=1)
    if payload is None:
        print(f"[red]Unexpected non-JSON response from {base_url}{path}[/red]")
        raise typer.Exit(code=1)
    return payload


def _render_zones(zones: list[dict[str, Any]]) -> None:
    table = Table("Zone", "Mode", "R", "G", "B")
    for zone in zones:
        table.add_row(
            str(zone.get("id")),
            str(zone.get("mode")),
            str(zone.get("r")),
            str(zone.get("g")),
            str(zone.get("b")),
        )
    print(table)


@app.callback()
def main(
    ctx: typer.Context,
    url: Annotated[
        Optional[str], typer.Option(help="Base URL of the zone service")
    ] = None,
) -> None:
    """Inspect and change zone lighting state."""
    ctx.obj = {"url": (url or config.service_url()).rstrip("/")}


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option()] = None,
    port: Annotated[Optional[int], typer.Option(min=1, max=65535)] = None,
) -> None:
    """Run the zone lighting service."""
    from .service import run

    run(host or config.service_host(), port or config.service_port())


@app.command("list")
def list_zones(ctx: typer.Context) -> None:
    """List every zone."""
    _render_zones(_request(ctx, "GET", "/api/zones"))


@app.command()
def get(ctx: typer.Context, zone_id: str) -> None:
    """Show a single zone."""
    _render_zones([_request(ctx, "GET", f"/api/zones/{zone_id}")])


@app.command("set")
def set_zone(
    ctx: typer.Context,
    zone_id: str,
    mode: Annotated[Optional[str], typer.Option()] = None,
    r: Annotated[Optional[int], typer.Option()] = None,
    g: Annotated[Optional[int], typer.Option()] = None,
    b: Annotated[Optional[int], typer.Option()] = None,
) -> None:
    """Update the mode and/or color channels of a zone."""
    changes = {
        name: value
        for name, value in (("mode", mode), ("r", r), ("g", g), ("b", b))
        if value is not None
    }
    _render_zones(
        [_request(ctx, "PATCH", f"/api/zones/{zone_id}", json=changes)]
    )


if __name__ == "__main__":  # pragma: no cover
    app()
