# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promrate.common.models.base_models import PromRateBaseModel, PromRateFrozenModel
from promrate.common.models.histogram_models import HistogramData, bucket_sort_key
from promrate.common.models.result_models import RateResult
from promrate.common.models.sample_models import Sample, SampleWindow, WindowBounds

__all__ = [
    "HistogramData",
    "PromRateBaseModel",
    "PromRateFrozenModel",
    "RateResult",
    "Sample",
    "SampleWindow",
    "WindowBounds",
    "bucket_sort_key",
]
