# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Change between the last two samples of a window, without extrapolation."""

from __future__ import annotations

from promrate.common.constants import MILLIS_PER_SECOND
from promrate.common.enums import NoResultReason
from promrate.common.models import HistogramData, RateResult, SampleWindow, WindowBounds
from promrate.rate.extrapolation import no_result


def instant_value(
    samples: SampleWindow, bounds: WindowBounds, is_rate: bool
) -> RateResult:
    """Compute ``irate`` (``is_rate``) or ``idelta`` from the last two samples.

    For ``irate`` a decrease is a counter reset, so the change is the last
    value itself, and the result is divided by the gap between the samples.
    """
    timestamp_ms = bounds.result_timestamp_ms
    if len(samples) < 2:
        return no_result(timestamp_ms, NoResultReason.INSUFFICIENT_SAMPLES)

    previous, last = samples[-2], samples[-1]
    if previous.is_histogram != last.is_histogram:
        return no_result(timestamp_ms, NoResultReason.MIXED_SAMPLE_TYPES)

    interval_seconds = (last.timestamp_ms - previous.timestamp_ms) / MILLIS_PER_SECOND
    if interval_seconds <= 0:
        return no_result(timestamp_ms, NoResultReason.ZERO_SAMPLED_INTERVAL)

    if last.is_histogram:
        histogram, reason = HistogramData.rate_delta(
            [previous.histogram, last.histogram], is_counter=is_rate
        )
        if histogram is None:
            return no_result(timestamp_ms, reason)
        if is_rate:
            histogram.scale(1 / interval_seconds)
        return RateResult(timestamp_ms=timestamp_ms, histogram=histogram)

    result = last.value - previous.value
    if is_rate:
        if last.value < previous.value:
            result = last.value
        result /= interval_seconds
    return RateResult(timestamp_ms=timestamp_ms, value=result)
