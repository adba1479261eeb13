#  SPDX-License-Identifier: Apache-2.0
"""Anti-automation stamps required by the device registration and vehicle endpoints.

The vendor app sends a `Stamp` header that the backend checks against a set of
pre-generated values. The pools ship as package data, one stamp per line, and
are read once at import.
"""

from __future__ import annotations

import logging
import random
from importlib import resources

from .const import Brand
from .exceptions import BluelinkUnknownBrandError

_LOGGER = logging.getLogger(__name__)


def _load_pool(brand: Brand) -> tuple[str, ...]:
    source = (resources.files(__package__) / "data" / f"stamps_{brand.value}.txt").read_text(encoding="utf-8")
    pool = tuple(line.strip() for line in source.splitlines() if line.strip())
    _LOGGER.debug("Loaded %d stamps for %s", len(pool), brand.value)
    return pool


STAMPS: dict[Brand, tuple[str, ...]] = {brand: _load_pool(brand) for brand in Brand}


def get_stamp(brand: Brand | str) -> str:
    """Draw a random stamp for the brand."""
    try:
        brand = Brand(brand)
    except ValueError as exc:
        raise BluelinkUnknownBrandError from exc

    pool = STAMPS.get(brand)
    if not pool:
        msg = f"No stamps bundled for brand {brand.value}"
        raise LookupError(msg)
    return random.choice(pool)
