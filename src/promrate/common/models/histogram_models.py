# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Classic Prometheus histogram data and the arithmetic used by range functions.

A histogram here is a snapshot of cumulative bucket counts keyed by the bucket
upper bound (the ``le`` label), plus the running ``sum`` and ``count`` of all
observations. Range functions need two operations on it:

- ``rate_delta``: the change between the first and last snapshot of a window,
  with counter resets inside the window compensated for
- ``scale``: in-place multiplication by the extrapolation factor
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from pydantic import Field, field_validator

from promrate.common.constants import INF_BUCKET
from promrate.common.enums import NoResultReason
from promrate.common.models.base_models import PromRateBaseModel


def bucket_sort_key(le: str) -> float:
    """Sort key for bucket upper bounds, placing +Inf last."""
    return float("inf") if le == INF_BUCKET else float(le)


def _combine_optional(
    lhs: float | None, rhs: float | None, sign: float
) -> float | None:
    """``lhs + sign * rhs``, treating a missing side as 0. Missing if both are."""
    if lhs is None and rhs is None:
        return None
    return (lhs or 0.0) + sign * (rhs or 0.0)


class HistogramData(PromRateBaseModel):
    """Structured histogram data with buckets, sum, and count."""

    buckets: dict[str, float] = Field(
        description='Bucket upper bounds (le="less than or equal") to cumulative counts. Keys are strings like "0.01", "0.1", "+Inf"'
    )
    sum: float | None = Field(default=None, description="Sum of all observed values")
    count: float | None = Field(
        default=None, description="Total number of observations"
    )

    @field_validator("buckets")
    @classmethod
    def validate_bucket_bounds(cls, buckets: dict[str, float]) -> dict[str, float]:
        for le in buckets:
            if le == INF_BUCKET:
                continue
            try:
                bound = float(le)
            except ValueError as e:
                raise ValueError(f"Invalid bucket upper bound: {le!r}") from e
            if not math.isfinite(bound):
                raise ValueError(
                    f"Invalid bucket upper bound: {le!r}, only {INF_BUCKET!r} may be non-finite"
                )
        return buckets

    @property
    def observation_count(self) -> float:
        """Total observations, falling back to the +Inf bucket when count is absent."""
        if self.count is not None:
            return self.count
        return self.buckets.get(INF_BUCKET, 0.0)

    def has_same_layout(self, other: HistogramData) -> bool:
        """Whether both histograms define exactly the same bucket bounds."""
        return self.buckets.keys() == other.buckets.keys()

    def sorted_buckets(self) -> list[tuple[str, float]]:
        """Buckets ordered by ascending upper bound."""
        return sorted(self.buckets.items(), key=lambda item: bucket_sort_key(item[0]))

    def add(self, other: HistogramData) -> HistogramData:
        """Add another histogram with the same layout into this one, in place."""
        for le, value in other.buckets.items():
            self.buckets[le] += value
        self.sum = _combine_optional(self.sum, other.sum, 1.0)
        self.count = _combine_optional(self.count, other.count, 1.0)
        return self

    def sub(self, other: HistogramData) -> HistogramData:
        """Subtract another histogram with the same layout from this one, in place."""
        for le, value in other.buckets.items():
            self.buckets[le] -= value
        self.sum = _combine_optional(self.sum, other.sum, -1.0)
        self.count = _combine_optional(self.count, other.count, -1.0)
        return self

    def scale(self, factor: float) -> HistogramData:
        """Multiply all buckets, sum and count by ``factor``, in place."""
        for le in self.buckets:
            self.buckets[le] *= factor
        if self.sum is not None:
            self.sum *= factor
        if self.count is not None:
            self.count *= factor
        return self

    def detect_reset(self, previous: HistogramData) -> tuple[bool, bool]:
        """Compare against the previous snapshot of the same series.

        Returns:
            ``(is_reset, is_ambiguous)``. A drop in the observation count is a
            reset. A bucket dropping while the observation count did not is
            ambiguous: it is neither monotonic growth nor a clean restart.
        """
        count_dropped = self.observation_count < previous.observation_count
        bucket_dropped = any(
            value < previous.buckets[le] for le, value in self.buckets.items()
        )
        if bucket_dropped and not count_dropped:
            return False, True
        return count_dropped, False

    @classmethod
    def rate_delta(
        cls, points: Sequence[HistogramData], is_counter: bool
    ) -> tuple[HistogramData | None, NoResultReason | None]:
        """Change between the first and last histogram of ``points``.

        With ``is_counter``, every reset between adjacent points adds the
        pre-reset histogram back into the result. The result is a new
        histogram that never shares state with the inputs.

        Returns:
            ``(histogram, None)`` on success, or ``(None, reason)`` when the
            points cannot be combined.
        """
        first, last = points[0], points[-1]
        for point in points[1:]:
            if not point.has_same_layout(first):
                return None, NoResultReason.INCOMPATIBLE_BUCKET_LAYOUT

        result = last.model_copy(deep=True).sub(first)
        if not is_counter:
            return result, None

        for prev, curr in zip(points, points[1:]):
            is_reset, is_ambiguous = curr.detect_reset(prev)
            if is_ambiguous:
                return None, NoResultReason.AMBIGUOUS_COUNTER_RESET
            if is_reset:
                result.add(prev)
        return result, None
