# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promrate.common.enums import NoResultReason, RangeFunction
from promrate.common.models import HistogramData, RateResult, Sample, WindowBounds
from promrate.rate import (
    delta,
    evaluate_range_function,
    extrapolated_rate,
    idelta,
    increase,
    irate,
    rate,
)

__all__ = [
    "HistogramData",
    "NoResultReason",
    "RangeFunction",
    "RateResult",
    "Sample",
    "WindowBounds",
    "delta",
    "evaluate_range_function",
    "extrapolated_rate",
    "idelta",
    "increase",
    "irate",
    "rate",
]
