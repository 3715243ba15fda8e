# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Runs the ``promrate eval`` command: load samples, evaluate, render."""

from __future__ import annotations

from pathlib import Path

import pydantic
from pydantic import TypeAdapter
from rich.console import Console
from rich.table import Table

from promrate.common.duration import parse_duration_ms
from promrate.common.enums import RangeFunction
from promrate.common.exceptions import SampleFileError
from promrate.common.models import RateResult, Sample, WindowBounds
from promrate.common.promrate_logger import PromRateLogger
from promrate.rate import evaluate_range_function

_logger = PromRateLogger(__name__)

_SAMPLES_ADAPTER = TypeAdapter(list[Sample])


def load_samples(path: Path) -> list[Sample]:
    """Read a JSON list of samples from ``path``, sorted by timestamp.

    Raises:
        SampleFileError: If the file cannot be read or does not hold valid samples.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise SampleFileError(f"Unable to read sample file {path}: {e}") from e

    try:
        samples = _SAMPLES_ADAPTER.validate_json(raw)
    except pydantic.ValidationError as e:
        raise SampleFileError(f"Invalid sample file {path}: {e}") from e

    _logger.debug(lambda: f"Loaded {len(samples)} samples from {path}")
    return sorted(samples, key=lambda sample: sample.timestamp_ms)


def run_evaluation(
    function: RangeFunction | str,
    samples_file: Path,
    range_duration: str,
    offset_duration: str = "0s",
    eval_timestamp_ms: int | None = None,
    json_output: bool = False,
    console: Console | None = None,
) -> RateResult:
    """Evaluate ``function`` over the samples in ``samples_file`` and print the result."""
    console = console or Console()
    function = RangeFunction(function)
    samples = load_samples(samples_file)
    if eval_timestamp_ms is None:
        if not samples:
            raise SampleFileError(
                f"Sample file {samples_file} is empty; pass an evaluation timestamp"
            )
        eval_timestamp_ms = samples[-1].timestamp_ms

    bounds = WindowBounds.from_evaluation(
        eval_timestamp_ms,
        range_ms=parse_duration_ms(range_duration),
        offset_ms=parse_duration_ms(offset_duration),
    )
    window = [
        sample
        for sample in samples
        if bounds.range_start_ms < sample.timestamp_ms <= bounds.range_end_ms
    ]
    _logger.info(
        lambda: f"Evaluating {function} over {len(window)} of {len(samples)} samples "
        f"in ({bounds.range_start_ms}, {bounds.range_end_ms}]"
    )

    result = evaluate_range_function(function, window, bounds)
    if json_output:
        console.print_json(result.model_dump_json(exclude_none=True))
    else:
        console.print(render_result_table(function, result))
    return result


def render_result_table(function: RangeFunction, result: RateResult) -> Table:
    """Build a Rich table describing ``result``."""
    table = Table(title=f"{function} @ {result.timestamp_ms}")
    if not result.ok:
        table.add_column("Result")
        table.add_column("Reason", style="yellow")
        table.add_row("no result", str(result.reason))
        return table

    if result.histogram is None:
        table.add_column("Value", justify="right", style="cyan")
        table.add_row(f"{result.value:.6g}")
        return table

    table.add_column("le", justify="right")
    table.add_column("Value", justify="right", style="cyan")
    for le, value in result.histogram.sorted_buckets():
        table.add_row(le, f"{value:.6g}")
    table.add_row("sum", f"{result.histogram.sum or 0.0:.6g}", style="dim")
    table.add_row("count", f"{result.histogram.count or 0.0:.6g}", style="dim")
    return table
