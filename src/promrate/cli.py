# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for promrate."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from promrate.cli_utils import exit_on_error

app = App(name="promrate", help="Extrapolated rate evaluation over Prometheus-style samples")


@app.command(name="eval")
def evaluate(
    function: str,
    samples_file: Path,
    *,
    range_: Annotated[str, Parameter(name="--range")] = "5m",
    offset: str = "0s",
    at: int | None = None,
    json_output: Annotated[bool, Parameter(name="--json")] = False,
    log_level: str | None = None,
) -> None:
    """Evaluate a range function over the samples of a single series.

    Args:
        function: Range function to evaluate: rate, increase, delta, irate or idelta.
        samples_file: JSON file holding a list of samples, each with "timestamp_ms"
            and either "value" or "histogram".
        range_: Window length as a duration, e.g. 5m or 1h30m.
        offset: Offset of the window before the evaluation time, e.g. 1m.
        at: Evaluation timestamp in milliseconds. Defaults to the last sample.
        json_output: Print the result as JSON instead of a table.
        log_level: Log level for console logging. Defaults to PROMRATE_LOGGING_LEVEL.
    """
    with exit_on_error(title="Error Evaluating Range Function"):
        from promrate.cli_runner import run_evaluation
        from promrate.common.logging import setup_rich_logging

        setup_rich_logging(log_level)
        run_evaluation(
            function,
            samples_file,
            range_duration=range_,
            offset_duration=offset,
            eval_timestamp_ms=at,
            json_output=json_output,
        )
