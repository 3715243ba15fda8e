# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for rate tests."""

import pytest

from tests.unit.rate.helpers import hist


@pytest.fixture
def growing_histograms():
    """Three histogram snapshots of a steadily growing series."""
    return [
        hist({"0.1": 1.0, "1": 2.0, "+Inf": 3.0}, 1.0, 3.0),
        hist({"0.1": 2.0, "1": 4.0, "+Inf": 6.0}, 2.0, 6.0),
        hist({"0.1": 4.0, "1": 8.0, "+Inf": 12.0}, 5.0, 12.0),
    ]


@pytest.fixture
def resetting_histograms():
    """Three histogram snapshots with a counter reset after the first."""
    return [
        hist({"0.1": 5.0, "1": 10.0, "+Inf": 10.0}, 10.0, 10.0),
        hist({"0.1": 1.0, "1": 2.0, "+Inf": 2.0}, 2.0, 2.0),
        hist({"0.1": 3.0, "1": 4.0, "+Inf": 4.0}, 3.0, 4.0),
    ]
