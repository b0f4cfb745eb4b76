"""End-to-end tests for the `webtext` command-line interface."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from webtext.cli import app


def test_slugify_command_prints_slug() -> None:
    """Slugify should print the lowercase slug by default and keep case on request."""

    runner = CliRunner()

    result = runner.invoke(app, ["slugify", "Crème Brûlée & Co"])
    kept = runner.invoke(app, ["slugify", "Crème Brûlée & Co", "--keep-case"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "creme-brulee-and-co\n"
    assert kept.stdout == "Creme-Brulee-and-Co\n"


def test_slugify_command_reads_stdin() -> None:
    """A `-` argument should read the text from stdin."""

    runner = CliRunner()

    result = runner.invoke(app, ["slugify", "-"], input="Hello World\n")

    assert result.exit_code == 0, result.output
    assert result.stdout == "hello-world\n"


def test_morphology_commands() -> None:
    """Pluralize and singularize should print the converted word."""

    runner = CliRunner()

    assert runner.invoke(app, ["pluralize", "copy"]).stdout == "copies\n"
    assert runner.invoke(app, ["singularize", "foxes"]).stdout == "fox\n"


def test_price_commands() -> None:
    """Price commands should convert between cents and display strings."""

    runner = CliRunner()

    formatted = runner.invoke(app, ["format-price", "--", "-140000"])
    parsed = runner.invoke(app, ["parse-price", "£12.345,90"])
    hinted = runner.invoke(app, ["parse-price", "20.000", "--decimal-mark", "."])

    assert formatted.exit_code == 0, formatted.output
    assert formatted.stdout == "-1,400\n"
    assert parsed.stdout == "1234590\n"
    assert hinted.stdout == "2000\n"


def test_typecast_command_prints_json() -> None:
    """Typecast should print JSON and honour repeated `--kind` options."""

    runner = CliRunner()

    assert runner.invoke(app, ["typecast", "42"]).stdout == "42\n"
    assert runner.invoke(app, ["typecast", "true"]).stdout == "true\n"
    assert runner.invoke(app, ["typecast", "42", "--kind", "bool"]).stdout == '"42"\n'


def test_query_command_prints_matching_candidates() -> None:
    """Query should print matching candidates for exhaustive and any-word modes."""

    runner = CliRunner()
    candidates = ["the world says hello", "say hello to me", "say aloha"]

    exhaustive = runner.invoke(app, ["query", "hello world", *candidates])
    any_word = runner.invoke(app, ["query", "hello world", *candidates, "--any"])

    assert exhaustive.exit_code == 0, exhaustive.output
    assert exhaustive.stdout == "the world says hello\n"
    assert any_word.stdout == "the world says hello\nsay hello to me\n"


def test_linkify_and_truncate_commands() -> None:
    """Rich-text commands should apply their options."""

    runner = CliRunner()

    linked = runner.invoke(app, ["linkify", "Visit www.site.co.uk\nnow", "--br", "<br/>"])
    teaser = runner.invoke(app, ["truncate", "abc defg hijk", "--limit", "3"])

    assert linked.stdout == (
        "Visit <a href='//www.site.co.uk' target='_blank'>www.site.co.uk</a><br/>now\n"
    )
    assert teaser.stdout == "abc...\n"


def test_commands_apply_yaml_config_defaults(tmp_path: Path) -> None:
    """Config file values should apply unless an explicit option overrides them."""

    config_path = tmp_path / "webtext.yml"
    config_path.write_text(
        "ellipsis: ' [more]'\ntruncate_limit: 3\nslug_lowercase: false\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    teaser = runner.invoke(app, ["truncate", "abc defg", "--config", str(config_path)])
    overridden = runner.invoke(
        app, ["truncate", "abc defg", "--config", str(config_path), "--ellipsis", "!"]
    )
    slug = runner.invoke(app, ["slugify", "Hello World", "--config", str(config_path)])

    assert teaser.stdout == "abc [more]\n"
    assert overridden.stdout == "abc!\n"
    assert slug.stdout == "Hello-World\n"


def test_verbose_flag_logs_command_events() -> None:
    """`--verbose` should log start and complete events next to the result."""

    runner = CliRunner()

    result = runner.invoke(app, ["slugify", "Hi", "--verbose"])

    assert result.exit_code == 0, result.output
    assert "[op] level=INFO command=slugify event=start" in result.output
    assert "[op] level=INFO command=slugify event=complete" in result.output
