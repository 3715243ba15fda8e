# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promrate.common.enums.base_enums import (
    BasePydanticBackedStrEnum,
    BasePydanticEnumInfo,
    CaseInsensitiveStrEnum,
)
from promrate.common.enums.function_enums import (
    NoResultReason,
    RangeFunction,
    RangeFunctionInfo,
)

__all__ = [
    "BasePydanticBackedStrEnum",
    "BasePydanticEnumInfo",
    "CaseInsensitiveStrEnum",
    "NoResultReason",
    "RangeFunction",
    "RangeFunctionInfo",
]
