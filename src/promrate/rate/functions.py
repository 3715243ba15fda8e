# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from promrate.common.enums import RangeFunction
from promrate.common.models import RateResult, SampleWindow, WindowBounds
from promrate.rate.extrapolation import extrapolated_rate
from promrate.rate.instant import instant_value


def rate(samples: SampleWindow, bounds: WindowBounds) -> RateResult:
    """Per-second rate of increase of a counter over the window."""
    return extrapolated_rate(samples, bounds, is_counter=True, is_rate=True)


def increase(samples: SampleWindow, bounds: WindowBounds) -> RateResult:
    """Increase of a counter over the window."""
    return extrapolated_rate(samples, bounds, is_counter=True, is_rate=False)


def delta(samples: SampleWindow, bounds: WindowBounds) -> RateResult:
    """Change of a gauge over the window."""
    return extrapolated_rate(samples, bounds, is_counter=False, is_rate=False)


def irate(samples: SampleWindow, bounds: WindowBounds) -> RateResult:
    """Per-second rate of a counter from the last two samples."""
    return instant_value(samples, bounds, is_rate=True)


def idelta(samples: SampleWindow, bounds: WindowBounds) -> RateResult:
    """Change of a gauge between the last two samples."""
    return instant_value(samples, bounds, is_rate=False)


def evaluate_range_function(
    function: RangeFunction | str, samples: SampleWindow, bounds: WindowBounds
) -> RateResult:
    """Evaluate a range function given by enum member or (case-insensitive) name.

    Raises:
        ValueError: If ``function`` does not name a range function.
    """
    function = RangeFunction(function)
    if function.is_instant:
        return instant_value(samples, bounds, is_rate=function.is_rate)
    return extrapolated_rate(
        samples, bounds, is_counter=function.is_counter, is_rate=function.is_rate
    )
