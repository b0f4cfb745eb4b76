"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and typed values.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import CommandError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_typed_value(value: object) -> None:
    """Print a typecast result as JSON so its type stays visible."""

    typer.echo(json.dumps(value))


def echo_query_matches(candidates: list[str], matched: list[bool]) -> None:
    """Print candidates that matched a query, one per line."""

    for candidate, is_match in zip(candidates, matched):
        if is_match:
            typer.echo(candidate)
