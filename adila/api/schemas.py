from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field

from ..types import DeviceInfo


class DeviceInfoResponse(BaseModel):
    found: bool
    manufacturer: str = ""
    name: str = ""
    series: str = ""
    full_name: str = " "

    @classmethod
    def from_info(cls, info: DeviceInfo) -> "DeviceInfoResponse":
        return cls(**info.to_dict())


class TelemetryPayload(BaseModel):
    device: Dict[str, str] = Field(
        default_factory=dict, description="Non-empty manufacturer/name/series fields"
    )
    found: bool = Field(..., description="Whether the device is in the database")
    metadata: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["DeviceInfoResponse", "TelemetryPayload"]
