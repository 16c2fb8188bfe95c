from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from .schemas import TelemetryPayload
from ..summary import to_json
from ..types import DeviceInfo

logger = logging.getLogger(__name__)


@dataclass
class TelemetryHttpClient:
    base_url: str
    timeout: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    def report(self, info: DeviceInfo, extra: Dict[str, Any] | None = None) -> Dict[str, Any]:
        payload = TelemetryPayload(
            device=json.loads(to_json(info)),
            found=info.found,
            metadata=dict(extra or {}),
        )
        url = f"{self.base_url.rstrip('/')}/v1/telemetry"
        logger.debug("Reporting device found=%s to %s", info.found, url)
        try:
            response = self.session.post(
                url,
                json=payload.model_dump(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as exc:  # pragma: no cover - network conditions
            raise RuntimeError("Timed out sending device telemetry") from exc
        except requests.RequestException as exc:
            raise RuntimeError(f"Failed to send device telemetry: {exc}") from exc
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}


__all__ = ["TelemetryHttpClient"]
