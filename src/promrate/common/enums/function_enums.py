# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from functools import cached_property

from pydantic import Field

from promrate.common.enums.base_enums import (
    BasePydanticBackedStrEnum,
    BasePydanticEnumInfo,
    CaseInsensitiveStrEnum,
)


class RangeFunctionInfo(BasePydanticEnumInfo):
    """Evaluation flags for a range function."""

    is_counter: bool = Field(
        ...,
        description="Whether decreases between samples are treated as counter resets.",
    )
    is_rate: bool = Field(
        ...,
        description="Whether the result is converted to a per-second rate.",
    )
    is_instant: bool = Field(
        default=False,
        description="Whether only the last two samples of the window are used, without extrapolation.",
    )


class RangeFunction(BasePydanticBackedStrEnum):
    """Range functions computing a change over a window of samples."""

    RATE = RangeFunctionInfo(tag="rate", is_counter=True, is_rate=True)
    """Per-second average rate of increase of a counter, extrapolated to the window bounds."""

    INCREASE = RangeFunctionInfo(tag="increase", is_counter=True, is_rate=False)
    """Absolute increase of a counter, extrapolated to the window bounds."""

    DELTA = RangeFunctionInfo(tag="delta", is_counter=False, is_rate=False)
    """Absolute change of a gauge, extrapolated to the window bounds."""

    IRATE = RangeFunctionInfo(
        tag="irate", is_counter=True, is_rate=True, is_instant=True
    )
    """Per-second rate of a counter from the last two samples."""

    IDELTA = RangeFunctionInfo(
        tag="idelta", is_counter=False, is_rate=False, is_instant=True
    )
    """Change of a gauge between the last two samples."""

    @cached_property
    def info(self) -> RangeFunctionInfo:
        """Get the evaluation flags for the range function."""
        return self._info  # type: ignore

    @property
    def is_counter(self) -> bool:
        return self.info.is_counter

    @property
    def is_rate(self) -> bool:
        return self.info.is_rate

    @property
    def is_instant(self) -> bool:
        return self.info.is_instant


class NoResultReason(CaseInsensitiveStrEnum):
    """Why an evaluation produced no result for a series."""

    INSUFFICIENT_SAMPLES = "insufficient_samples"
    """Fewer than two samples in the window."""

    MIXED_SAMPLE_TYPES = "mixed_sample_types"
    """The window mixes scalar samples and histogram samples."""

    INCOMPATIBLE_BUCKET_LAYOUT = "incompatible_bucket_layout"
    """Histogram samples in the window do not share the same bucket bounds."""

    AMBIGUOUS_COUNTER_RESET = "ambiguous_counter_reset"
    """A histogram bucket decreased while the total count did not."""

    ZERO_SAMPLED_INTERVAL = "zero_sampled_interval"
    """The samples used for the computation do not span any time."""
