# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promrate.rate.extrapolation import extrapolated_rate
from promrate.rate.functions import (
    delta,
    evaluate_range_function,
    idelta,
    increase,
    irate,
    rate,
)
from promrate.rate.instant import instant_value

__all__ = [
    "delta",
    "evaluate_range_function",
    "extrapolated_rate",
    "idelta",
    "increase",
    "instant_value",
    "irate",
    "rate",
]
