# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field, model_validator
from typing_extensions import Self

from promrate.common.constants import MILLIS_PER_SECOND
from promrate.common.models.base_models import PromRateFrozenModel
from promrate.common.models.histogram_models import HistogramData


class Sample(PromRateFrozenModel):
    """A single observation of a series: either a float value or a histogram."""

    timestamp_ms: int = Field(description="Timestamp in milliseconds since epoch")
    value: float | None = Field(
        default=None, description="Scalar value (counter/gauge)"
    )
    histogram: HistogramData | None = Field(
        default=None, description="Histogram data if the series is a histogram"
    )

    @model_validator(mode="after")
    def validate_single_value(self) -> Self:
        """Exactly one of value and histogram must be set."""
        if (self.value is None) == (self.histogram is None):
            raise ValueError(
                "Sample must have exactly one of 'value' or 'histogram' set"
            )
        return self

    @property
    def is_histogram(self) -> bool:
        return self.histogram is not None


SampleWindow = Sequence[Sample]
"""Samples selected for one evaluation, ordered by strictly increasing timestamp."""


class WindowBounds(PromRateFrozenModel):
    """Nominal time boundaries of a range query window.

    The samples of the window do not have to coincide with these bounds;
    the difference is what boundary extrapolation accounts for.
    """

    range_start_ms: int = Field(description="Start of the window in milliseconds")
    range_end_ms: int = Field(description="End of the window in milliseconds")
    eval_timestamp_ms: int | None = Field(
        default=None,
        description="Evaluation timestamp the result is emitted at. None means range_end_ms.",
    )

    @model_validator(mode="after")
    def validate_range(self) -> Self:
        """Validate that range_start_ms < range_end_ms."""
        if self.range_start_ms >= self.range_end_ms:
            raise ValueError(
                f"range_start_ms ({self.range_start_ms}) must be less than range_end_ms ({self.range_end_ms})"
            )
        return self

    @classmethod
    def from_evaluation(
        cls, eval_timestamp_ms: int, range_ms: int, offset_ms: int = 0
    ) -> WindowBounds:
        """Build the bounds of a ``[range] offset`` selector evaluated at ``eval_timestamp_ms``."""
        range_end_ms = eval_timestamp_ms - offset_ms
        return cls(
            range_start_ms=range_end_ms - range_ms,
            range_end_ms=range_end_ms,
            eval_timestamp_ms=eval_timestamp_ms,
        )

    @property
    def result_timestamp_ms(self) -> int:
        if self.eval_timestamp_ms is None:
            return self.range_end_ms
        return self.eval_timestamp_ms

    @property
    def range_seconds(self) -> float:
        return (self.range_end_ms - self.range_start_ms) / MILLIS_PER_SECOND
