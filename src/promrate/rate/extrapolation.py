# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Extrapolated change of a series over a range window.

This is the computation behind ``rate``, ``increase`` and ``delta``. The
samples of a window rarely sit exactly on its bounds, so the change measured
between the first and last sample is extrapolated towards the bounds:

1. Raw delta between the first and last sample, with counter resets
   compensated by adding back the value seen before each reset.
2. Gaps between the window bounds and the first/last sample.
3. For counters, the start gap is clamped to where the counter would have
   reached zero, so a counter is never extrapolated below zero.
4. A gap shorter than 1.1x the average sample spacing is assumed to be
   sampling jitter and extrapolated over fully. A longer gap means the series
   started or ended inside the window, so only half an average spacing is
   extrapolated.
5. The raw delta is scaled by the extrapolated/sampled ratio, and converted
   to per-second when a rate is requested.

All data conditions that prevent a result are reported through
:attr:`RateResult.reason` rather than raised.
"""

from __future__ import annotations

import numpy as np

from promrate.common.constants import (
    EXTRAPOLATION_THRESHOLD_FACTOR,
    MILLIS_PER_SECOND,
)
from promrate.common.enums import NoResultReason
from promrate.common.models import (
    HistogramData,
    RateResult,
    SampleWindow,
    WindowBounds,
)
from promrate.common.promrate_logger import PromRateLogger

_logger = PromRateLogger(__name__)


def no_result(timestamp_ms: int, reason: NoResultReason) -> RateResult:
    """Build an empty result, logging why it is empty."""
    _logger.trace(lambda: f"No result at {timestamp_ms}: {reason}")
    return RateResult.empty(timestamp_ms, reason)


def counter_corrected_delta(values: np.ndarray, is_counter: bool) -> float:
    """Difference between the last and first value of ``values``.

    With ``is_counter``, each decrease between adjacent values is a reset, and
    the value before the reset is added back to recover the lost height.
    """
    raw_delta = float(values[-1] - values[0])
    if is_counter:
        previous = values[:-1]
        resets = values[1:] < previous
        if np.any(resets):
            raw_delta += float(np.sum(previous[resets]))
    return raw_delta


def extrapolation_factor(
    duration_to_start: float,
    duration_to_end: float,
    sampled_interval: float,
    num_samples: int,
) -> float:
    """Ratio of the extrapolated interval to the sampled interval (all in seconds)."""
    average_gap = sampled_interval / (num_samples - 1)
    threshold = average_gap * EXTRAPOLATION_THRESHOLD_FACTOR

    extrapolate_to = sampled_interval
    extrapolate_to += (
        duration_to_start if duration_to_start < threshold else average_gap / 2
    )
    extrapolate_to += duration_to_end if duration_to_end < threshold else average_gap / 2
    return extrapolate_to / sampled_interval


def extrapolated_rate(
    samples: SampleWindow,
    bounds: WindowBounds,
    is_counter: bool,
    is_rate: bool,
) -> RateResult:
    """Compute the extrapolated change of ``samples`` over ``bounds``.

    Args:
        samples: Samples of one series inside the window, ordered by timestamp.
            Either all scalar or all histogram samples.
        bounds: The nominal window bounds and the evaluation timestamp.
        is_counter: Treat decreases as counter resets, and clamp extrapolation
            at the counter's estimated zero crossing.
        is_rate: Divide the result by the window length in seconds.

    Returns:
        A RateResult holding a value (scalar samples) or a histogram
        (histogram samples), or no result with the reason why.
    """
    timestamp_ms = bounds.result_timestamp_ms
    if len(samples) < 2:
        return no_result(timestamp_ms, NoResultReason.INSUFFICIENT_SAMPLES)

    first, last = samples[0], samples[-1]
    histogram: HistogramData | None = None
    raw_delta = 0.0

    if first.is_histogram:
        if not all(sample.is_histogram for sample in samples):
            return no_result(timestamp_ms, NoResultReason.MIXED_SAMPLE_TYPES)
        histogram, reason = HistogramData.rate_delta(
            [sample.histogram for sample in samples], is_counter
        )
        if histogram is None:
            return no_result(timestamp_ms, reason)
    else:
        if any(sample.is_histogram for sample in samples):
            return no_result(timestamp_ms, NoResultReason.MIXED_SAMPLE_TYPES)
        values = np.fromiter(
            (sample.value for sample in samples), dtype=np.float64, count=len(samples)
        )
        raw_delta = counter_corrected_delta(values, is_counter)

    duration_to_start = (first.timestamp_ms - bounds.range_start_ms) / MILLIS_PER_SECOND
    duration_to_end = (bounds.range_end_ms - last.timestamp_ms) / MILLIS_PER_SECOND
    sampled_interval = (last.timestamp_ms - first.timestamp_ms) / MILLIS_PER_SECOND
    if sampled_interval <= 0:
        return no_result(timestamp_ms, NoResultReason.ZERO_SAMPLED_INTERVAL)

    if histogram is None and is_counter and raw_delta > 0 and first.value >= 0:
        duration_to_zero = sampled_interval * (first.value / raw_delta)
        if duration_to_zero < duration_to_start:
            duration_to_start = duration_to_zero

    factor = extrapolation_factor(
        duration_to_start, duration_to_end, sampled_interval, len(samples)
    )
    if is_rate:
        factor /= bounds.range_seconds

    _logger.trace(
        lambda: f"Extrapolating {len(samples)} samples: to_start={duration_to_start}s "
        f"to_end={duration_to_end}s sampled={sampled_interval}s factor={factor}"
    )

    if histogram is not None:
        return RateResult(timestamp_ms=timestamp_ms, histogram=histogram.scale(factor))
    return RateResult(timestamp_ms=timestamp_ms, value=raw_delta * factor)
