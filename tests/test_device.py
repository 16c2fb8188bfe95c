from __future__ import annotations

import threading
import time

import pytest

import adila
from adila import device
from adila.types import DeviceInfo


@pytest.fixture
def fresh_device(monkeypatch):
    monkeypatch.setattr(device, "_device_info", None)
    return monkeypatch


def test_resolves_once_under_concurrent_access(fresh_device) -> None:
    calls: list[int] = []

    def slow_resolver() -> DeviceInfo:
        calls.append(1)
        time.sleep(0.05)
        return DeviceInfo(found=True, manufacturer="Acme", name="Widget")

    fresh_device.setattr(device, "_resolver", slow_resolver)

    results: list[DeviceInfo] = []
    start = threading.Barrier(8)

    def worker() -> None:
        start.wait()
        results.append(device.get_device_info())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_module_constants_expose_resolved_fields(fresh_device) -> None:
    fresh_device.setattr(
        device,
        "_resolver",
        lambda: DeviceInfo(found=True, manufacturer="Acme", name="Widget", series="X"),
    )

    assert adila.FOUND is True
    assert adila.MANUFACTURER == "Acme"
    assert adila.NAME == "Widget"
    assert adila.SERIES == "X"
    assert adila.FULL_NAME == "Acme Widget"
    assert adila.info() == '{"manufacturer":"Acme","name":"Widget","series":"X"}'


def test_resolution_from_environment(fresh_device) -> None:
    fresh_device.setenv("ADILA_DEVICE", "klte")
    fresh_device.setenv("ADILA_MODEL", "SM-G900F")
    fresh_device.delenv("ADILA_DATABASE_PATH", raising=False)

    info = device.get_device_info()

    assert info.found
    assert info.full_name == "Samsung Galaxy S5"
    assert device.get_device_info() is info


def test_unknown_device_defaults(fresh_device) -> None:
    fresh_device.setenv("ADILA_DEVICE", "not-a-real-device")
    fresh_device.setenv("ADILA_MODEL", "nothing")
    fresh_device.delenv("ADILA_DATABASE_PATH", raising=False)

    assert device.info() == "{}"
    assert adila.FOUND is False
    assert adila.FULL_NAME == " "


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        adila.NOT_A_FIELD


def test_undecodable_overlay_does_not_break_accessors(fresh_device, tmp_path) -> None:
    overlay = tmp_path / "devices.json"
    overlay.write_bytes(b'{"acme": "\xff\xfe"}')
    fresh_device.setenv("ADILA_DEVICE", "hammerhead")
    fresh_device.setenv("ADILA_MODEL", "Nexus 5")
    fresh_device.setenv("ADILA_DATABASE_PATH", str(overlay))

    assert adila.FOUND is True
    assert adila.FULL_NAME == "LGE Nexus 5"
