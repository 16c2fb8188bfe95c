from __future__ import annotations

from pathlib import Path

from adila.config import DEFAULT_GETPROP_TIMEOUT, AdilaConfig, load_config


def test_defaults_when_environment_is_empty() -> None:
    assert load_config({}) == AdilaConfig()


def test_reads_adila_variables() -> None:
    cfg = load_config(
        {
            "ADILA_DEVICE": "klte",
            "ADILA_MODEL": " SM-G900F ",
            "ADILA_DATABASE_PATH": "/tmp/devices.json",
            "ADILA_GETPROP": "/system/bin/getprop",
            "ADILA_GETPROP_TIMEOUT": "0.5",
            "ADILA_LOG_LEVEL": "debug",
            "ADILA_TELEMETRY_URL": "https://telemetry.example",
        }
    )

    assert cfg.device == "klte"
    assert cfg.model == "SM-G900F"
    assert cfg.database_path == Path("/tmp/devices.json")
    assert cfg.getprop_command == "/system/bin/getprop"
    assert cfg.getprop_timeout == 0.5
    assert cfg.log_level == "DEBUG"
    assert cfg.telemetry_url == "https://telemetry.example"


def test_blank_values_are_treated_as_unset() -> None:
    cfg = load_config({"ADILA_DEVICE": "   ", "ADILA_DATABASE_PATH": ""})
    assert cfg.device is None
    assert cfg.database_path is None


def test_invalid_timeouts_fall_back_to_defaults() -> None:
    assert load_config({"ADILA_GETPROP_TIMEOUT": "soon"}).getprop_timeout == DEFAULT_GETPROP_TIMEOUT
    assert load_config({"ADILA_GETPROP_TIMEOUT": "-1"}).getprop_timeout == DEFAULT_GETPROP_TIMEOUT


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("ADILA_DEVICE", "hammerhead")
    assert load_config().device == "hammerhead"
