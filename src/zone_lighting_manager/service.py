"""FastAPI service module for the zone lighting manager.

``create_app`` wires a ``ZoneStore`` into a fresh FastAPI application so
every app instance (and every test) owns its own zone state. The module
level ``app`` is what uvicorn serves.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from . import __version__, config
from .api.errors import register_exception_handlers
from .api.routes_zones import router as zones_router
from .static import mount_static
from .zone_store import ZoneStore

logger = logging.getLogger("zone_lighting_manager.service")


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"DEBUG"`` to its number, INFO otherwise."""
    level = getattr(logging, name.upper(), None)
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    return logging.INFO


_default_level = resolve_log_level(config.log_level())
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=_default_level,
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    )
logger.setLevel(_default_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the zone layout on startup and shutdown."""
    store: ZoneStore = app.state.store
    logger.info(f"Zone store ready with {len(store)} zones")
    try:
        yield
    finally:
        logger.info("Zone lighting service stopped")


def create_app(
    store: ZoneStore | None = None,
    static_dir: Path | None = None,
    serve_static: bool | None = None,
) -> FastAPI:
    """Build the application around ``store`` (a new one by default)."""
    app = FastAPI(
        title="Zone Lighting Service", version=__version__, lifespan=lifespan
    )
    app.state.store = store if store is not None else ZoneStore()

    register_exception_handlers(app)
    app.include_router(zones_router)

    if serve_static is None:
        serve_static = config.serve_static()
    if serve_static:
        mount_static(
            app, static_dir if static_dir is not None else config.static_dir()
        )
    return app


app = create_app()


def main() -> None:  # pragma: no cover - thin CLI wrapper
    """Run the FastAPI service under Uvicorn."""
    run(config.service_host(), config.service_port())


def run(host: str, port: int) -> None:  # pragma: no cover - blocks
    import uvicorn

    logger.info(f"Zone lighting service listening on http://{host}:{port}")
    uvicorn.run(
        "zone_lighting_manager.service:app",
        host=host,
        port=port,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
