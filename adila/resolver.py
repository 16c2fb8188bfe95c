from __future__ import annotations

import logging

from .keys import composite_key, device_key
from .types import NOT_FOUND, RECORD_DELIMITER, DeviceInfo, DeviceLookup

logger = logging.getLogger(__name__)


def parse_record(record: str) -> DeviceInfo:
    """Split a ``manufacturer|name|series`` record into a found DeviceInfo.

    Missing trailing fields default to empty strings; extra fields are ignored.
    """

    fields = record.split(RECORD_DELIMITER)
    manufacturer = fields[0] if len(fields) > 0 else ""
    name = fields[1] if len(fields) > 1 else ""
    series = fields[2] if len(fields) > 2 else ""
    return DeviceInfo(found=True, manufacturer=manufacturer, name=name, series=series)


def find_record(
    device: str | None, model: str | None, database: DeviceLookup
) -> tuple[str, str] | None:
    """Return ``(key, record)`` for the first candidate key present in ``database``."""

    for key in (device_key(device), composite_key(device, model)):
        record = database.get(key)
        if record is None:
            logger.debug("No record for key=%s", key)
            continue
        if not isinstance(record, str):
            logger.debug("Ignoring non-string record for key=%s: %r", key, record)
            continue
        return key, record
    return None


def resolve(device: str | None, model: str | None, database: DeviceLookup) -> DeviceInfo:
    match = find_record(device, model, database)
    if match is None:
        return NOT_FOUND
    key, record = match
    logger.debug("Matched key=%s record=%r", key, record)
    return parse_record(record)


__all__ = ["resolve", "find_record", "parse_record"]
