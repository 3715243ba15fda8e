# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from promrate.common.enums import NoResultReason
from promrate.common.models.base_models import PromRateFrozenModel
from promrate.common.models.histogram_models import HistogramData


class RateResult(PromRateFrozenModel):
    """Outcome of evaluating a range function over one window.

    Either ``value`` or ``histogram`` is set, or neither is and ``reason``
    explains why the series contributes nothing at this evaluation step.
    """

    timestamp_ms: int = Field(description="Evaluation timestamp of the result")
    value: float | None = Field(default=None, description="Scalar result")
    histogram: HistogramData | None = Field(
        default=None, description="Histogram result for histogram series"
    )
    reason: NoResultReason | None = Field(
        default=None, description="Why no result was produced, if none was"
    )

    @classmethod
    def empty(cls, timestamp_ms: int, reason: NoResultReason) -> RateResult:
        return cls(timestamp_ms=timestamp_ms, reason=reason)

    @property
    def ok(self) -> bool:
        return self.value is not None or self.histogram is not None
