from __future__ import annotations

from .schemas import DeviceInfoResponse, TelemetryPayload

__all__ = ["DeviceInfoResponse", "TelemetryPayload", "TelemetryHttpClient", "create_app"]


def __getattr__(name: str):
    if name == "TelemetryHttpClient":
        from .client import TelemetryHttpClient

        return TelemetryHttpClient
    if name == "create_app":
        from .server import create_app

        return create_app
    raise AttributeError(f"module 'adila.api' has no attribute {name!r}")
