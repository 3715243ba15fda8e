# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from promrate.common.duration import parse_duration_ms
from promrate.common.exceptions import DurationParseError, ValidationError


class TestParseDurationMs:
    """Test parsing of Prometheus-style duration strings."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("250ms", 250),
            ("30s", 30_000),
            ("5m", 300_000),
            ("1h30m", 5_400_000),
            ("1m30s500ms", 90_500),
            ("2d", 172_800_000),
            ("1w", 604_800_000),
            ("1y", 31_536_000_000),
            ("0s", 0),
            ("90", 90_000),
            ("1.5", 1_500),
            ("  5m ", 300_000),
        ],
    )  # fmt: skip
    def test_valid_durations(self, text: str, expected: int):
        assert parse_duration_ms(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "5x", "m5", "5 m", "30m1h", "5m5m", "1.5m", "-5m", "5m!"],
    )  # fmt: skip
    def test_invalid_durations(self, text: str):
        with pytest.raises(DurationParseError):
            parse_duration_ms(text)

    def test_error_is_validation_error(self):
        with pytest.raises(ValidationError, match="Invalid duration '5x'"):
            parse_duration_ms("5x")
