from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# Delimiter between fields of a raw device record.
RECORD_DELIMITER: str = "|"


class DeviceLookup(Protocol):
    def get(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class DeviceInfo:
    found: bool = False
    manufacturer: str = ""
    name: str = ""
    series: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.manufacturer} {self.name}"

    def to_dict(self) -> dict[str, str | bool]:
        return {
            "found": self.found,
            "manufacturer": self.manufacturer,
            "name": self.name,
            "series": self.series,
            "full_name": self.full_name,
        }

    def to_json(self) -> str:
        from .summary import to_json

        return to_json(self)


NOT_FOUND = DeviceInfo()


__all__ = ["DeviceInfo", "DeviceLookup", "NOT_FOUND", "RECORD_DELIMITER"]
