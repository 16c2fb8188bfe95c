from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass

from .config import AdilaConfig

logger = logging.getLogger(__name__)

DEVICE_PROPERTY = "ro.product.device"
MODEL_PROPERTY = "ro.product.model"


@dataclass(frozen=True)
class RawIdentifiers:
    device: str = ""
    model: str = ""


def read_system_property(name: str, command: str = "getprop", timeout: float = 2.0) -> str:
    """Return an Android system property, or ``""`` when it cannot be read."""

    executable = shutil.which(command)
    if executable is None:
        logger.debug("%s not available; cannot read %s", command, name)
        return ""
    try:
        result = subprocess.run(
            [executable, name],
            check=True,
            text=True,
            errors="replace",
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Timed out reading system property %s", name)
        return ""
    except subprocess.CalledProcessError as exc:
        stderr = exc.stderr.strip() if exc.stderr else str(exc)
        logger.warning("Failed to read system property %s: %s", name, stderr)
        return ""
    except OSError as exc:
        logger.warning("Failed to run %s for %s: %s", command, name, exc)
        return ""
    return result.stdout.strip()


def read_identifiers(config: AdilaConfig | None = None) -> RawIdentifiers:
    """Collect the host's device and model identifiers.

    Explicit overrides in ``config`` win; otherwise the Android system
    properties are queried. Anything unavailable becomes an empty string.
    """

    cfg = config or AdilaConfig()

    def _lookup(override: str | None, prop: str) -> str:
        if override is not None:
            return override
        return read_system_property(
            prop, command=cfg.getprop_command, timeout=cfg.getprop_timeout
        )

    identifiers = RawIdentifiers(
        device=_lookup(cfg.device, DEVICE_PROPERTY),
        model=_lookup(cfg.model, MODEL_PROPERTY),
    )
    logger.debug(
        "Host identifiers device=%r model=%r", identifiers.device, identifiers.model
    )
    return identifiers


__all__ = ["RawIdentifiers", "read_identifiers", "read_system_property"]
