# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Test helpers for building sample windows."""

from promrate.common.constants import MILLIS_PER_SECOND
from promrate.common.models import HistogramData, Sample, WindowBounds


def scalar_window(
    values: list[float],
    start_ms: int = 0,
    interval_ms: int = MILLIS_PER_SECOND,
) -> list[Sample]:
    """Create scalar samples at regular intervals."""
    return [
        Sample(timestamp_ms=start_ms + i * interval_ms, value=value)
        for i, value in enumerate(values)
    ]


def histogram_window(
    snapshots: list[HistogramData],
    start_ms: int = 0,
    interval_ms: int = MILLIS_PER_SECOND,
) -> list[Sample]:
    """Create histogram samples at regular intervals."""
    return [
        Sample(timestamp_ms=start_ms + i * interval_ms, histogram=snapshot)
        for i, snapshot in enumerate(snapshots)
    ]


def hist(buckets: dict[str, float], sum_: float, count: float) -> HistogramData:
    """Shorthand for creating HistogramData."""
    return HistogramData(buckets=buckets, sum=sum_, count=count)


def bounds_s(start_s: float, end_s: float) -> WindowBounds:
    """WindowBounds from second offsets."""
    return WindowBounds(
        range_start_ms=int(start_s * MILLIS_PER_SECOND),
        range_end_ms=int(end_s * MILLIS_PER_SECOND),
    )
