"""Structured command logging utilities.

Responsibilities:
- Emit concise, deterministic command-level runtime logs through `loguru`.
- Keep logs on stderr so command results on stdout stay machine-readable.
"""

from __future__ import annotations

import json
import re
import sys
from typing import TextIO

from loguru import logger


_BARE_TOKEN_RE = re.compile(r"[\w.:/-]+")
_MAX_CONTEXT_CHARS = 40


def _render_context_value(value: object) -> str:
    """Render a context value as one token: JSON literals, or a quoted short string."""

    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    text = str(value)
    if len(text) > _MAX_CONTEXT_CHARS:
        text = f"{text[:_MAX_CONTEXT_CHARS]}..."
    if _BARE_TOKEN_RE.fullmatch(text):
        return text
    return json.dumps(text, ensure_ascii=False)


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs sorted by key."""

    return "".join(
        f" {key}={_render_context_value(value)}" for key, value in sorted(context.items())
    )


class RunLogger:
    """Emit deterministic command logs for CLI-observable activity."""

    def __init__(self, sink: TextIO | None = None, enabled: bool = True) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._enabled = enabled
        logger.remove()
        if enabled:
            logger.add(sink or sys.stderr, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, command: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        if not self._enabled:
            return
        line = f"[op] level={level} command={command} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_command_start(self, command: str, **context: object) -> None:
        """Emit a command-start runtime event."""

        self._emit("INFO", "start", command, **context)

    def log_command_complete(self, command: str, **context: object) -> None:
        """Emit a command-complete runtime event."""

        self._emit("INFO", "complete", command, **context)

    def log_command_failure(self, command: str, error_type: str) -> None:
        """Emit a command-failure runtime event without input payload details."""

        self._emit("ERROR", "failure", command, error_type=error_type)
