# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Parsing of Prometheus-style duration strings such as ``5m``, ``1h30m`` or ``250ms``."""

import re

from promrate.common.constants import MILLIS_PER_SECOND
from promrate.common.exceptions import DurationParseError

_UNIT_MILLIS = {
    "ms": 1,
    "s": MILLIS_PER_SECOND,
    "m": 60 * MILLIS_PER_SECOND,
    "h": 60 * 60 * MILLIS_PER_SECOND,
    "d": 24 * 60 * 60 * MILLIS_PER_SECOND,
    "w": 7 * 24 * 60 * 60 * MILLIS_PER_SECOND,
    "y": 365 * 24 * 60 * 60 * MILLIS_PER_SECOND,
}

# Units must appear largest first, each at most once.
_UNIT_ORDER = ["y", "w", "d", "h", "m", "s", "ms"]

_COMPONENT = re.compile(r"(\d+)(ms|[ywdhms])")
_PLAIN_SECONDS = re.compile(r"\d+(\.\d+)?")


def parse_duration_ms(text: str) -> int:
    """Parse ``text`` as a duration in milliseconds.

    Accepted formats are a sequence of ``<integer><unit>`` components with
    units ``y, w, d, h, m, s, ms`` in decreasing order (``1h30m``), or a plain
    number of seconds (``90``, ``1.5``).

    Raises:
        DurationParseError: If ``text`` is empty or malformed.
    """
    stripped = text.strip()
    if not stripped:
        raise DurationParseError(text, "empty duration")

    if _PLAIN_SECONDS.fullmatch(stripped):
        return round(float(stripped) * MILLIS_PER_SECOND)

    total_ms = 0
    pos = 0
    last_unit_idx = -1
    for match in _COMPONENT.finditer(stripped):
        if match.start() != pos:
            break
        amount, unit = match.groups()
        unit_idx = _UNIT_ORDER.index(unit)
        if unit_idx <= last_unit_idx:
            raise DurationParseError(text, f"unit '{unit}' out of order")
        last_unit_idx = unit_idx
        total_ms += int(amount) * _UNIT_MILLIS[unit]
        pos = match.end()

    if pos != len(stripped):
        raise DurationParseError(text, f"unexpected characters at position {pos}")
    return total_ms
