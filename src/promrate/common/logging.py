# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging for the promrate command line.

Library code only creates loggers (see :mod:`promrate.common.promrate_logger`)
and never installs handlers. The command line calls :func:`setup_rich_logging`
once at startup to render records as::

    HH:MM:SS.mmm LEVEL    message content (logger_name:lineno)
"""

import logging
import re
from datetime import datetime

from rich.console import Console, ConsoleRenderable, Group
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.text import Span, Text
from rich.traceback import Traceback

from promrate.common.environment import Environment
from promrate.common.promrate_logger import PromRateLogger

_logger = PromRateLogger(__name__)


def setup_rich_logging(level: str | int | None = None, console: Console | None = None) -> None:
    """Install the Rich console handler on the root logger.

    Existing handlers are removed so repeated calls do not duplicate output.

    Args:
        level: Log level name or number. Defaults to ``Environment.LOGGING.LEVEL``.
        console: Console to render to. Defaults to stderr.
    """
    level = level or Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.root.setLevel(level)

    for existing_handler in logging.root.handlers[:]:
        logging.root.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console or Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    logging.root.addHandler(rich_handler)

    _logger.debug(lambda: f"Logging initialized with level: {level}")


class LogHighlighter(RegexHighlighter):
    """Highlighter for log messages: file names, numbers, quoted strings, key=value."""

    base_style = "repr."

    _PATTERN = re.compile(
        r"(?P<filename>\b[\w.-]+\.(?:jsonl?|ya?ml|csv|txt)\b)"  # Filenames
        r"|(?P<number>(?<![.\w])-?\d+\.?\d*(?:(?:e[+-]?\d+)|(?:ms|s|m|h))?\b)"  # Numbers
        r"|(?P<str>\"[^\"]*\"|'[^']*')"  # Quoted strings
        r"|\b(?P<bool_true>True)\b|\b(?P<bool_false>False)\b|\b(?P<none>None)\b"
        r"|\b(?P<attrib_name>\w+)=(?P<attrib_value>[^\s,=\[\](){}]+)?"  # key=value
    )  # fmt: skip

    highlights = [_PATTERN]

    def highlight(self, text: Text) -> None:
        """Append a Span to ``text`` for every matched group, in place."""
        plain = text.plain
        append_span = text._spans.append
        prefix = self.base_style

        for match in self._PATTERN.finditer(plain):
            for name, value in match.groupdict().items():
                if value is not None:
                    start, end = match.span(name)
                    if start != -1:
                        append_span(Span(start, end, f"{prefix}{name}"))


class CustomRichHandler(RichHandler):
    """Rich logging handler rendering a compact, width-aware log line.

    Each record is rendered as a millisecond timestamp, a colored level, the
    highlighted message, and a dim ``(logger_name:lineno)`` suffix. Messages
    longer than the console wrap at character boundaries, and on wide consoles
    continuation lines are indented to align with the message column.
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "NOTICE": "blue",
        "WARNING": "yellow",
        "SUCCESS": "green",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    ABSOLUTE_MIN_CONSOLE_WIDTH = 40
    PREFIX_LENGTH = 22  # "HH:MM:SS.mmm LEVEL    " is fixed at 22 chars

    _NEWLINE = Text("\n")
    _INDENT = Text(" " * PREFIX_LENGTH)

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.highlighter = LogHighlighter()

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Render a log record into a styled Rich renderable.

        The message is re-rendered from ``record``; ``message_renderable`` is unused.
        """
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = record.getMessage()[: Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH]
        suffix = f"({record.name}:{record.lineno})"

        console_width = (
            self.console.size.width
            if self.console
            else Environment.LOGGING.DEFAULT_CONSOLE_WIDTH
        )
        target_width = max(console_width - 2, self.ABSOLUTE_MIN_CONSOLE_WIDTH)
        content_width = target_width - self.PREFIX_LENGTH
        indent_continuations = (
            console_width >= Environment.LOGGING.MIN_CONSOLE_INDENT_WRAP_WIDTH
        )
        continuation_width = content_width if indent_continuations else target_width

        body = Text(f"{message} ")
        self.highlighter.highlight(body)
        body.append(suffix, style="dim italic")

        parts: list[Text] = [
            Text(f"{timestamp} ", style="log.time"),
            Text(f"{record.levelname:<8} ", style=level_style),
        ]
        char_pos = 0
        line_width = content_width
        while True:
            line_end = min(char_pos + line_width, len(body))
            parts.append(body[char_pos:line_end])
            char_pos = line_end
            if char_pos >= len(body):
                break
            parts.append(self._NEWLINE)
            if indent_continuations:
                parts.append(self._INDENT)
            line_width = continuation_width

        formatted_log = Text.assemble(*parts)
        formatted_log.no_wrap = True

        return Group(formatted_log, traceback) if traceback else formatted_log

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record with character-level wrapping instead of Rich's word wrapping."""
        traceback = None
        if (
            self.rich_tracebacks
            and record.exc_info
            and record.exc_info != (None, None, None)
        ):
            traceback = Traceback.from_exception(*record.exc_info)

        log_renderable = self.render(
            record=record, traceback=traceback, message_renderable=Text("")
        )
        self.console.print(log_renderable, soft_wrap=False)
