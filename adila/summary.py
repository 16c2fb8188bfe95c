from __future__ import annotations

import logging

from pydantic import BaseModel, ValidationError

from .types import DeviceInfo

logger = logging.getLogger(__name__)

EMPTY_SUMMARY = "{}"


class DeviceSummary(BaseModel):
    """Compact device description; empty fields are left out."""

    manufacturer: str | None = None
    name: str | None = None
    series: str | None = None

    @classmethod
    def from_info(cls, info: DeviceInfo) -> "DeviceSummary":
        return cls(
            manufacturer=info.manufacturer or None,
            name=info.name or None,
            series=info.series or None,
        )


def to_json(info: DeviceInfo) -> str:
    """Return the non-empty manufacturer/name/series fields as a JSON object.

    Falls back to ``"{}"`` when nothing is set or serialization fails.
    """

    try:
        return DeviceSummary.from_info(info).model_dump_json(exclude_none=True)
    except ValidationError as exc:
        logger.debug("Device summary failed validation: %s", exc)
        return EMPTY_SUMMARY
    except Exception as exc:  # pragma: no cover - unexpected errors
        logger.warning("Unexpected error serialising device summary: %s", exc)
        return EMPTY_SUMMARY


__all__ = ["DeviceSummary", "to_json", "EMPTY_SUMMARY"]
