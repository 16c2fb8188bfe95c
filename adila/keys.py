from __future__ import annotations

"""Utilities for turning raw hardware identifiers into database lookup keys."""

UNKNOWN_KEY = "UNKNOWN"
SEPARATOR = "_"


def _is_ascii_alnum(character: str) -> bool:
    return character.isascii() and character.isalnum()


def sanitize_continue(raw: str | None) -> str:
    """Escape ``raw`` character by character.

    ASCII letters and digits are kept (lowercased). Every other character is
    replaced by its code point written as lowercase hex, e.g. ``-`` -> ``2d``.
    """

    if not raw:
        return ""
    parts: list[str] = []
    for character in raw:
        if _is_ascii_alnum(character):
            parts.append(character.lower())
        else:
            parts.append(format(ord(character), "x"))
    return "".join(parts)


def sanitize(raw: str | None) -> str:
    """Convert a raw identifier into a key usable as a bare identifier.

    Empty input maps to the ``UNKNOWN`` sentinel. Input starting with a
    decimal digit gets a leading underscore.
    """

    if not raw:
        return UNKNOWN_KEY
    prefix = SEPARATOR if raw[0].isdecimal() else ""
    return prefix + sanitize_continue(raw)


def device_key(device: str | None) -> str:
    return sanitize(device)


def composite_key(device: str | None, model: str | None) -> str:
    """Key used when the device identifier alone is shared by several models."""

    return sanitize(device) + SEPARATOR + sanitize_continue(model)


def candidate_keys(device: str | None, model: str | None) -> tuple[str, str]:
    return device_key(device), composite_key(device, model)


__all__ = [
    "UNKNOWN_KEY",
    "sanitize",
    "sanitize_continue",
    "device_key",
    "composite_key",
    "candidate_keys",
]
