"""Bundled table of known devices.

Keys are built with :func:`adila.keys.sanitize` from the hardware ``device``
identifier, or ``<device>_<model>`` when several models share one device
identifier. Values are ``manufacturer|name|series`` records.
"""

from __future__ import annotations

from typing import Dict

DEVICES: Dict[str, str] = {
    # Nexus
    "mako": "LGE|Nexus 4|Nexus",
    "hammerhead": "LGE|Nexus 5|Nexus",
    "bullhead": "LGE|Nexus 5X|Nexus",
    "shamu": "Motorola|Nexus 6|Nexus",
    "angler": "Huawei|Nexus 6P|Nexus",
    "grouper": "Asus|Nexus 7|Nexus",
    "flo": "Asus|Nexus 7 (2013)|Nexus",
    "flounder": "HTC|Nexus 9|Nexus",
    "manta": "Samsung|Nexus 10|Nexus",
    # Pixel
    "sailfish": "Google|Pixel|Pixel",
    "marlin": "Google|Pixel XL|Pixel",
    "walleye": "Google|Pixel 2|Pixel",
    "taimen": "Google|Pixel 2 XL|Pixel",
    "blueline": "Google|Pixel 3|Pixel",
    "crosshatch": "Google|Pixel 3 XL|Pixel",
    # Shared device identifiers, disambiguated by model
    "klte_sm2dg900f": "Samsung|Galaxy S5|Galaxy S",
    "klte_sm2dg900v": "Samsung|Galaxy S5 (Verizon)|Galaxy S",
    "klte_sm2dg900t": "Samsung|Galaxy S5 (T-Mobile)|Galaxy S",
    # Single-field records
    "a0001": "OnePlus|One",
    "c6903": "Sony|Xperia Z1|Xperia Z",
}


__all__ = ["DEVICES"]
