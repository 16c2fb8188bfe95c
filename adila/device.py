"""Process-wide device information.

The host identifiers do not change while the process runs, so the device is
resolved once, on first access, and the result is shared by every caller.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .config import load_config
from .db import load_database
from .identifiers import read_identifiers
from .resolver import resolve
from .summary import to_json
from .types import DeviceInfo

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_device_info: Optional[DeviceInfo] = None


def _compute() -> DeviceInfo:
    config = load_config()
    identifiers = read_identifiers(config)
    database = load_database(config.database_path)
    info = resolve(identifiers.device, identifiers.model, database)
    if info.found:
        logger.info(
            "Identified device=%r model=%r as %s",
            identifiers.device,
            identifiers.model,
            info.full_name,
        )
    else:
        logger.info(
            "Device device=%r model=%r not found in database (%d entries)",
            identifiers.device,
            identifiers.model,
            len(database),
        )
    return info


_resolver: Callable[[], DeviceInfo] = _compute


def get_device_info() -> DeviceInfo:
    global _device_info
    info = _device_info
    if info is not None:
        return info
    with _lock:
        if _device_info is None:
            _device_info = _resolver()
        return _device_info


def info() -> str:
    """Return the device summary as a JSON string."""
    return to_json(get_device_info())


__all__ = ["get_device_info", "info"]
