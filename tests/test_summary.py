from __future__ import annotations

import json
import logging

from adila.summary import to_json
from adila.types import DeviceInfo


def test_empty_info_serialises_to_empty_object() -> None:
    assert to_json(DeviceInfo()) == "{}"
    assert to_json(DeviceInfo(found=True)) == "{}"


def test_only_non_empty_fields_are_emitted() -> None:
    assert to_json(DeviceInfo(found=True, manufacturer="Acme")) == '{"manufacturer":"Acme"}'
    assert json.loads(to_json(DeviceInfo(found=True, name="Widget"))) == {"name": "Widget"}


def test_fields_keep_fixed_order() -> None:
    info = DeviceInfo(found=True, manufacturer="Acme", name="Widget", series="X")
    assert list(json.loads(to_json(info))) == ["manufacturer", "name", "series"]


def test_unencodable_content_falls_back_to_empty_object() -> None:
    info = DeviceInfo(found=True, manufacturer="bad\ud800")
    assert to_json(info) == "{}"


def test_info_method_delegates_to_summary() -> None:
    info = DeviceInfo(found=True, manufacturer="Acme", series="X")
    assert info.to_json() == '{"manufacturer":"Acme","series":"X"}'


def test_validation_failure_is_logged_at_debug(caplog) -> None:
    info = DeviceInfo(found=True, name="\udcff")

    with caplog.at_level(logging.DEBUG, logger="adila.summary"):
        assert to_json(info) == "{}"

    assert any("failed validation" in r.message for r in caplog.records)
