"""Command-line interface for webtext.

Responsibilities:
- Expose every text transformation as a user-facing command.
- Merge YAML/environment defaults with explicit CLI options.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_query_matches, echo_typed_value, exit_with_command_error
from .config import ConfigLoader, WebTextConfig
from .errors import CommandError
from .price import format_price, parse_price
from .query import build_query_pattern
from .telemetry.logger import RunLogger
from .text.morphology import pluralize, singularize
from .text.richtext import linkify, truncate
from .text.slug import slugify
from .typecast import typecast

app = typer.Typer(
    name="webtext",
    no_args_is_help=True,
    help="Text normalization and format conversion for web applications.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log command events to stderr."),
]


def _load_config(config_path: Path | None) -> WebTextConfig:
    """Load command defaults from YAML, or from `WEBTEXT_*` variables when no file is given."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the offending `WEBTEXT_*` variable.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise CommandError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _read_text(text: str) -> str:
    """Return `text`, or the whole of stdin when `text` is `-`."""

    if text == "-":
        return typer.get_text_stream("stdin").read()
    return text


@app.command("slugify")
def slugify_command(
    text: Annotated[str, typer.Argument(help="Text to convert, or `-` for stdin.")],
    lowercase: Annotated[
        bool | None,
        typer.Option(
            "--lowercase/--keep-case",
            help="Fold the slug to lowercase (overrides config file value).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print a URL-friendly slug for TEXT."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("slugify")
    try:
        config = _load_config(config_file)
        resolved_lowercase = lowercase if lowercase is not None else config.slug_lowercase
        slug = slugify(_read_text(text), resolved_lowercase)
    except Exception as exc:
        run_logger.log_command_failure("slugify", type(exc).__name__)
        exit_with_command_error("slugify", exc)

    typer.echo(slug)
    run_logger.log_command_complete("slugify")


@app.command("pluralize")
def pluralize_command(
    word: Annotated[str, typer.Argument(help="Singular English noun.")],
) -> None:
    """Print the plural form of WORD."""

    typer.echo(pluralize(word))


@app.command("singularize")
def singularize_command(
    word: Annotated[str, typer.Argument(help="Plural English noun.")],
) -> None:
    """Print the singular form of WORD."""

    typer.echo(singularize(word))


@app.command("format-price")
def format_price_command(
    cents: Annotated[int, typer.Argument(help="Price in cents/pence.")],
    verbose: VerboseOption = False,
) -> None:
    """Print CENTS as a display price, e.g. `1,400` or `45.95`."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("format-price")
    try:
        display = format_price(cents)
    except Exception as exc:
        run_logger.log_command_failure("format-price", type(exc).__name__)
        exit_with_command_error("format-price", exc)

    typer.echo(display)
    run_logger.log_command_complete("format-price")


@app.command("parse-price")
def parse_price_command(
    text: Annotated[str, typer.Argument(help="Price as typed by a user, e.g. `£12,50`.")],
    decimal_mark: Annotated[
        str | None,
        typer.Option(
            "--decimal-mark",
            help="Force `.` or `,` as decimal mark instead of detecting it.",
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the amount in TEXT as integer cents/pence."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("parse-price")
    try:
        cents = parse_price(text, decimal_mark=decimal_mark)
    except Exception as exc:
        run_logger.log_command_failure("parse-price", type(exc).__name__)
        exit_with_command_error("parse-price", exc)

    typer.echo(str(cents))
    run_logger.log_command_complete("parse-price")


@app.command("typecast")
def typecast_command(
    value: Annotated[str, typer.Argument(help="Raw string value.")],
    kinds: Annotated[
        list[str] | None,
        typer.Option(
            "--kind",
            help="Kind to recognize (`boolean`, `null`, `integer`, `float`); repeatable.",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the typed value VALUE represents, as JSON."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("typecast")
    try:
        config = _load_config(config_file)
        resolved_kinds = kinds if kinds else config.typecast_kinds
        result = typecast(value, resolved_kinds)
    except Exception as exc:
        run_logger.log_command_failure("typecast", type(exc).__name__)
        exit_with_command_error("typecast", exc)

    echo_typed_value(result)
    run_logger.log_command_complete("typecast", kind=type(result).__name__)


@app.command("query")
def query_command(
    query: Annotated[str, typer.Argument(help="Free-text search query.")],
    candidates: Annotated[list[str], typer.Argument(help="Texts to match against.")],
    exhaustive: Annotated[
        bool | None,
        typer.Option(
            "--all/--any",
            help="Require every query word, or at least one (overrides config file value).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the CANDIDATES matching QUERY."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("query")
    try:
        config = _load_config(config_file)
        resolved_exhaustive = exhaustive if exhaustive is not None else config.query_exhaustive
        pattern = build_query_pattern(query, resolved_exhaustive)
        matched = [pattern.search(candidate) is not None for candidate in candidates]
    except Exception as exc:
        run_logger.log_command_failure("query", type(exc).__name__)
        exit_with_command_error("query", exc)

    echo_query_matches(candidates, matched)
    run_logger.log_command_complete("query", matches=sum(matched))


@app.command("linkify")
def linkify_command(
    text: Annotated[str, typer.Argument(help="Plain text to convert, or `-` for stdin.")],
    br_tag: Annotated[
        str | None,
        typer.Option("--br", help="Line-break markup (overrides config file value)."),
    ] = None,
    obfuscate_at: Annotated[
        bool | None,
        typer.Option(
            "--obfuscate-at/--no-obfuscate-at",
            help="Replace `@` with `&#64;` in the output (overrides config file value).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print TEXT as HTML with clickable links and line breaks."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("linkify")
    try:
        config = _load_config(config_file)
        html = linkify(
            _read_text(text),
            br_tag=br_tag if br_tag is not None else config.br_tag,
            obfuscate_at=obfuscate_at if obfuscate_at is not None else config.obfuscate_at,
        )
    except Exception as exc:
        run_logger.log_command_failure("linkify", type(exc).__name__)
        exit_with_command_error("linkify", exc)

    typer.echo(html)
    run_logger.log_command_complete("linkify")


@app.command("truncate")
def truncate_command(
    text: Annotated[str, typer.Argument(help="Text or HTML to shorten, or `-` for stdin.")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", min=1, help="Character budget (overrides config file value)."),
    ] = None,
    ellipsis: Annotated[
        str | None,
        typer.Option("--ellipsis", help="Suffix for shortened text (overrides config file value)."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print a plain-text teaser of TEXT."""

    run_logger = RunLogger(enabled=verbose)
    run_logger.log_command_start("truncate")
    try:
        config = _load_config(config_file)
        teaser = truncate(
            _read_text(text),
            limit=limit if limit is not None else config.truncate_limit,
            ellipsis=ellipsis if ellipsis is not None else config.ellipsis,
        )
    except Exception as exc:
        run_logger.log_command_failure("truncate", type(exc).__name__)
        exit_with_command_error("truncate", exc)

    typer.echo(teaser)
    run_logger.log_command_complete("truncate")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
