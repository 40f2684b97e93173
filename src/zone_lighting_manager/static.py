"""Helpers to mount and serve the browser control panel."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def mount_static(app: FastAPI, directory: Path) -> bool:
    """Mount ``directory`` at '/' if it exists.

    Must run after the API routers are included; a mount at the root
    matches every path not claimed by an earlier route.
    """
    if not directory.is_dir():
        logger.info(
            f"Static directory {directory} not found; control panel disabled"
        )
        return False
    app.mount(
        "/",
        StaticFiles(directory=str(directory), html=True),
        name="control-panel",
    )
    logger.debug(f"Serving control panel from {directory}")
    return True
