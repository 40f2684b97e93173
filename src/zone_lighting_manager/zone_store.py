"""In-memory store holding the lighting state of every zone.

A ``ZoneStore`` owns exactly ``ZONE_COUNT`` records, created once with the
default state and mutated in place by patches. Nothing is persisted; a new
store (or a process restart) starts from the defaults again.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .const import (
    DEFAULT_CHANNEL_VALUE,
    DEFAULT_MODE,
    PATCHABLE_FIELDS,
    ZONE_COUNT,
)
from .exception import InvalidZoneId

logger = logging.getLogger(__name__)

# Leading integer, the rest of the string is ignored ("3abc" -> 3).
_ZONE_ID_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(slots=True)
class Zone:
    """Lighting state of a single zone.

    ``mode`` and the color channels are stored exactly as received; no type
    or range checks are applied. ``extra`` carries free-form attributes such
    as a blink interval and is flattened into the serialized record.
    """

    id: int
    mode: Any = DEFAULT_MODE
    r: Any = DEFAULT_CHANNEL_VALUE
    g: Any = DEFAULT_CHANNEL_VALUE
    b: Any = DEFAULT_CHANNEL_VALUE
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "mode": self.mode,
            "r": self.r,
            "g": self.g,
            "b": self.b,
        }
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data


class ZoneStore:
    """Owns the fixed set of zones and applies partial updates to them."""

    def __init__(self, zone_count: int = ZONE_COUNT) -> None:
        """Create ``zone_count`` zones in their default state."""
        self._zones: List[Zone] = [Zone(id=i) for i in range(zone_count)]

    def __len__(self) -> int:
        return len(self._zones)

    def parse_zone_id(self, raw: str | int) -> int:
        """Convert a path parameter into a valid zone index.

        Strings are read up to the end of their leading integer, so ``"2.9"``
        is zone 2. Raises ``InvalidZoneId`` when no integer can be read or it
        falls outside the zone range.
        """
        if isinstance(raw, bool):
            raise InvalidZoneId(raw)
        if isinstance(raw, int):
            zone_id = raw
        else:
            match = _ZONE_ID_PATTERN.match(str(raw))
            if match is None:
                raise InvalidZoneId(raw)
            zone_id = int(match.group(1))
        if zone_id < 0 or zone_id >= len(self._zones):
            raise InvalidZoneId(raw)
        return zone_id

    def get(self, zone_id: str | int) -> Zone:
        """Return the live record for ``zone_id``."""
        return self._zones[self.parse_zone_id(zone_id)]

    def list_zones(self) -> List[Zone]:
        """Return every zone ordered by id."""
        return list(self._zones)

    def patch(self, zone_id: str | int, changes: Mapping[str, Any]) -> Zone:
        """Overwrite the patchable fields present in ``changes``.

        Keys outside ``PATCHABLE_FIELDS`` are ignored. A key mapped to
        ``None`` is still present and overwrites the stored value. The zone
        id is validated before anything is touched.
        """
        zone = self.get(zone_id)
        applied = {
            name: changes[name] for name in PATCHABLE_FIELDS if name in changes
        }
        for name, value in applied.items():
            setattr(zone, name, value)
        if applied:
            logger.info(f"Zone {zone.id} updated: {applied}")
        return zone
