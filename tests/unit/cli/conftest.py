# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import io
import json
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """Console rendering to a buffer, wide enough for tables not to wrap."""
    return Console(file=console_buffer, width=200, color_system=None)


@pytest.fixture
def write_samples(tmp_path: Path):
    """Write a list of sample dicts to a JSON file and return its path."""

    def _write(samples: list[dict], name: str = "samples.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(samples))
        return path

    return _write


@pytest.fixture
def counter_file(write_samples) -> Path:
    """Counter samples every 15s from 0s to 60s, increasing by 30 per step."""
    return write_samples(
        [{"timestamp_ms": i * 15_000, "value": 100.0 + 30.0 * i} for i in range(5)]
    )
