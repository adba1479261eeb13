#  SPDX-License-Identifier: Apache-2.0
"""Helpers for digging values out of nested vendor payloads."""

from __future__ import annotations

from typing import Any


def get_child_value(data: Any, key: str, default: Any = None) -> Any:
    """Return the value at a dotted path, or `default` if any part is missing.

    Integer parts index into lists, so `"drvDistance.0.type"` works.
    """
    value = data
    for part in key.split("."):
        if isinstance(value, dict):
            if part not in value:
                return default
            value = value[part]
        elif isinstance(value, list) and part.isdigit():
            index = int(part)
            if index >= len(value):
                return default
            value = value[index]
        else:
            return default
    if value is None:
        return default
    return value
