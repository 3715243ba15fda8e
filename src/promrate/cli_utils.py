# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


@contextmanager
def exit_on_error(title: str = "Error", console: Console | None = None) -> Iterator[None]:
    """Print any exception raised in the block as a Rich panel and exit with status 1.

    ``SystemExit`` and ``KeyboardInterrupt`` propagate unchanged.
    """
    try:
        yield
    except Exception as e:
        console = console or Console(stderr=True)
        console.print(
            Panel(
                Text(f"{type(e).__name__}: {e}"),
                title=title,
                border_style="bold red",
                title_align="left",
                expand=False,
            )
        )
        console.file.flush()
        sys.exit(1)
