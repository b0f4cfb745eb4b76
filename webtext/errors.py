"""Domain exceptions for codec contracts and CLI diagnostics."""

from __future__ import annotations


class PriceTypeError(TypeError):
    """Raised when the price codec receives a value of the wrong type."""


class PriceParseError(ValueError):
    """Raised when a price string holds no usable numeral."""


class CommandError(RuntimeError):
    """Raised when a CLI command fails at a specific stage."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
