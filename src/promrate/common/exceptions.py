# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class PromRateError(Exception):
    """Base class for all exceptions raised by promrate."""


class ValidationError(PromRateError):
    """Exception raised when something fails validation."""


class DurationParseError(ValidationError):
    """Exception raised when a duration string cannot be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid duration {text!r}: {reason}")


class SampleFileError(ValidationError):
    """Exception raised when a sample file cannot be read or decoded."""
