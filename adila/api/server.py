from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict

from fastapi import FastAPI

from .schemas import DeviceInfoResponse
from ..device import get_device_info
from ..summary import to_json
from ..types import DeviceInfo

logger = logging.getLogger(__name__)


def create_app(info_provider: Callable[[], DeviceInfo] | None = None) -> FastAPI:
    provider = info_provider or get_device_info

    app = FastAPI(title="Adila Device Info API", version="0.1.0")
    app.state.info_provider = provider

    logger.info("Device info API initialised provider=%s", getattr(provider, "__name__", provider))

    @app.get("/health", response_model=dict[str, str])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/v1/device", response_model=DeviceInfoResponse)
    def device_info() -> DeviceInfoResponse:
        return DeviceInfoResponse.from_info(app.state.info_provider())

    @app.get("/v1/device/summary", response_model=Dict[str, Any])
    def device_summary() -> Dict[str, Any]:
        return json.loads(to_json(app.state.info_provider()))

    return app


__all__ = ["create_app"]
