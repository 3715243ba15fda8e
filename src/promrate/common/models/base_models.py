# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class PromRateBaseModel(BaseModel):
    """Base model for all promrate models."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class PromRateFrozenModel(PromRateBaseModel):
    """Base model for immutable value objects."""

    model_config = ConfigDict(frozen=True)
