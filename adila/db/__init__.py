"""Device database: a read-only mapping from lookup key to device record.

The bundled table ships with the package. An optional JSON overlay file
(``{"key": "manufacturer|name|series"}``) can add or override entries
without a new release.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from .devices import DEVICES

logger = logging.getLogger(__name__)


class DeviceDatabase:
    """Immutable key -> record store queried by the resolver."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DeviceDatabase(entries={len(self._entries)})"


def _read_overlay(path: Path) -> dict[str, str]:
    if not path.exists():
        logger.info("No device database overlay found at %s; using bundled table", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning(
            "Failed to load device database overlay from %s: %s; using bundled table",
            path,
            exc,
        )
        return {}
    except Exception as exc:  # pragma: no cover - unexpected errors
        logger.error(
            "Unexpected error loading device database overlay from %s: %s; using bundled table",
            path,
            exc,
        )
        return {}

    if not isinstance(data, dict):
        logger.warning(
            "Device database overlay %s is not a JSON object; using bundled table", path
        )
        return {}

    entries: dict[str, str] = {}
    for key, record in data.items():
        if not isinstance(record, str):
            logger.warning("Skipping overlay entry %r: record must be a string", key)
            continue
        entries[key] = record
    logger.info("Loaded %d device overlay entries from %s", len(entries), path)
    return entries


def load_database(path: Path | str | None = None) -> DeviceDatabase:
    """Return the bundled database, merged with the overlay at ``path`` if given.

    Overlay entries take precedence. Problems with the overlay are logged and
    the bundled table is used on its own.
    """

    entries = dict(DEVICES)
    if path is not None:
        entries.update(_read_overlay(Path(path)))
    return DeviceDatabase(entries)


__all__ = ["DeviceDatabase", "DEVICES", "load_database"]
