from __future__ import annotations

from .keys import composite_key, device_key, sanitize
from .resolver import resolve
from .summary import to_json
from .types import DeviceInfo, DeviceLookup

__all__ = [
    "DeviceInfo",
    "DeviceLookup",
    "composite_key",
    "device_key",
    "sanitize",
    "resolve",
    "to_json",
    "get_device_info",
    "info",
    "FOUND",
    "MANUFACTURER",
    "NAME",
    "FULL_NAME",
    "SERIES",
]

_INFO_FIELDS = {
    "FOUND": "found",
    "MANUFACTURER": "manufacturer",
    "NAME": "name",
    "FULL_NAME": "full_name",
    "SERIES": "series",
}


def __getattr__(name: str):
    if name == "get_device_info":
        from .device import get_device_info

        return get_device_info
    if name == "info":
        from .device import info

        return info
    if name in _INFO_FIELDS:
        from .device import get_device_info

        return getattr(get_device_info(), _INFO_FIELDS[name])
    raise AttributeError(f"module 'adila' has no attribute {name!r}")
