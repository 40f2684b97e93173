"""
API routes for reading and patching zone lighting state.

Zone ids arrive as raw path strings and are validated by the store, so an
out-of-range or non-numeric id is answered with the store's ``InvalidZoneId``
error rather than FastAPI's generic 422.
"""

import json
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ..exception import MalformedPayload
from ..schemas import ErrorResponse, ZonePatchRequest, ZoneResponse
from ..zone_store import ZoneStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/zones", tags=["zones"])

_INVALID_ID_RESPONSE: Dict[int | str, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid zone id"}
}


def get_store(request: Request) -> ZoneStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    return media_type.startswith("application/") and media_type.endswith(
        "+json"
    )


async def _read_patch_body(request: Request) -> Dict[str, Any]:
    """Decode the PATCH body into a dict of changes.

    An empty body, a non-JSON content type, or a JSON document that is not
    an object all count as "no changes". Strict JSON parsers reject top-level
    scalars outright; here they are accepted as an empty patch.
    ``NaN`` and ``Infinity`` are not JSON and make the body malformed.
    """
    if not _is_json_media_type(request.headers.get("content-type", "")):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MalformedPayload(str(exc)) from exc

    if not isinstance(document, dict):
        return {}
    try:
        return ZonePatchRequest.model_validate(document).changes()
    except ValidationError as exc:  # pragma: no cover - all fields accept Any
        raise MalformedPayload(str(exc)) from exc


@router.get("", response_model=List[ZoneResponse])
async def list_zones(store: ZoneStore = Depends(get_store)):
    """
    Get every zone, ordered by id.

    Always returns exactly as many records as the store holds.
    """
    return [zone.to_dict() for zone in store.list_zones()]


@router.get(
    "/{zone_id}",
    response_model=ZoneResponse,
    responses=_INVALID_ID_RESPONSE,
)
async def get_zone(zone_id: str, store: ZoneStore = Depends(get_store)):
    """
    Get the current state of a single zone.

    Args:
        zone_id: Zone index, 0 to 7

    Raises:
        400: If the id is not an integer in range
    """
    return store.get(zone_id).to_dict()


@router.patch(
    "/{zone_id}",
    response_model=ZoneResponse,
    responses=_INVALID_ID_RESPONSE,
)
async def patch_zone(
    zone_id: str,
    request: Request,
    store: ZoneStore = Depends(get_store),
):
    """
    Partially update a zone.

    Any of ``mode``, ``r``, ``g`` and ``b`` present in the body replace the
    stored values verbatim; omitted fields are left alone.

    Raises:
        400: If the id is invalid (checked before the body is read) or the
            body is not valid JSON
    """
    index = store.parse_zone_id(zone_id)
    changes = await _read_patch_body(request)
    return store.patch(index, changes).to_dict()
