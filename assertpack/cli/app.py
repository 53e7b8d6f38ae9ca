import json
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Any, NoReturn

import typer

from assertpack.assertions import (
    AssertionResult,
    check_contains,
    check_equals,
    check_items_equals,
)
from assertpack.compare import (
    ComparisonConfigError,
    ComparisonOptions,
    ComparisonTypeError,
)
from assertpack.report import pretty_print
from assertpack.settings import AssertionSettings, SettingsConfigError, get_settings

app = typer.Typer(help="assertkit CLI: structural comparison of JSON documents.")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


class _InputError(Exception):
    """A CLI input file or literal could not be loaded."""


def _resolve_cli_version() -> str:
    try:
        return package_version("assertkit")
    except PackageNotFoundError:
        from assertkit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show assertkit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err)


def _echo_json(payload: dict[str, Any]) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(payload, ensure_ascii=True, sort_keys=True, separators=(",", ":"))
    else:
        rendered = json.dumps(payload, ensure_ascii=True, sort_keys=True, indent=2)
    typer.echo(rendered)


def _load_json_file(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise _InputError(f"input not found: {path}") from error
    except json.JSONDecodeError as error:
        raise _InputError(f"invalid JSON in {path}: {error}") from error


def _load_json_literal(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as error:
        raise _InputError(f"invalid JSON literal {raw!r}: {error}") from error


def _fail_input(command: str, error: Exception, *, json_output: bool) -> NoReturn:
    message = f"{command} failed: {error}"
    if json_output:
        _echo_json({"status": "error", "exit_code": 2, "message": message})
    else:
        _echo(message, err=True)
    raise typer.Exit(code=2) from error


def _finish(
    result: AssertionResult,
    *,
    json_output: bool,
    settings: AssertionSettings,
    extra: dict[str, Any],
) -> None:
    if json_output:
        _echo_json({**result.to_dict(show_refs=settings.show_refs), **extra})
    elif result.passed:
        _echo(f"{result.assertion} passed")
    else:
        _echo(f"{result.assertion} failed", force=True)
        _echo(result.message, force=True)

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


@app.command()
def compare(
    actual: Path = typer.Argument(..., help="Path to the actual JSON document."),
    expected: Path = typer.Argument(..., help="Path to the expected JSON document."),
    margin: float | None = typer.Option(
        None,
        "--margin",
        help="Compare numbers approximately with this absolute margin.",
    ),
    approx: bool = typer.Option(
        False,
        "--approx",
        help="Compare numbers approximately with machine epsilon (unless --margin is set).",
    ),
    show_refs: bool = typer.Option(
        False,
        "--show-refs",
        help="Include object references when rendering values.",
    ),
    list_diff_threshold: int | None = typer.Option(
        None,
        "--list-diff-threshold",
        min=0,
        help="Minimum list length for the list difference analysis.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
) -> None:
    """Structurally compare two JSON documents and explain the first difference."""
    try:
        settings = _command_settings(show_refs=show_refs, list_diff_threshold=list_diff_threshold)
        options = (
            ComparisonOptions.approximate(margin) if approx or margin is not None else None
        )
        actual_value = _load_json_file(actual)
        expected_value = _load_json_file(expected)
    except (_InputError, ComparisonConfigError, SettingsConfigError) as error:
        _fail_input("compare", error, json_output=json_output)

    result = check_equals(actual_value, expected_value, options=options, settings=settings)
    _finish(
        result,
        json_output=json_output,
        settings=settings,
        extra={"actual_path": str(actual), "expected_path": str(expected)},
    )


@app.command()
def items(
    actual: Path = typer.Argument(..., help="Path to the actual JSON document."),
    expected: Path = typer.Argument(..., help="Path to the expected JSON document."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
) -> None:
    """Compare the items of two JSON containers irrespective of order."""
    try:
        settings = get_settings()
        result = check_items_equals(
            _load_json_file(actual),
            _load_json_file(expected),
            settings=settings,
        )
    except (_InputError, ComparisonTypeError, SettingsConfigError) as error:
        _fail_input("items", error, json_output=json_output)

    _finish(
        result,
        json_output=json_output,
        settings=settings,
        extra={"actual_path": str(actual), "expected_path": str(expected)},
    )


@app.command()
def contains(
    container: Path = typer.Argument(..., help="Path to the JSON container document."),
    element: str = typer.Argument(..., help="JSON literal of the element to look for."),
    negate: bool = typer.Option(
        False,
        "--negate",
        help="Fail when the element is present instead of absent.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable membership output.",
    ),
) -> None:
    """Check that a JSON container holds a structurally equal element."""
    try:
        settings = get_settings()
        result = check_contains(
            _load_json_file(container),
            _load_json_literal(element),
            negate=negate,
            settings=settings,
        )
    except (_InputError, ComparisonTypeError, SettingsConfigError) as error:
        _fail_input("contains", error, json_output=json_output)

    _finish(
        result,
        json_output=json_output,
        settings=settings,
        extra={"container_path": str(container)},
    )


@app.command()
def pretty(
    source: Path = typer.Argument(..., help="Path to a JSON document."),
) -> None:
    """Render a JSON document with the assertkit pretty printer."""
    try:
        value = _load_json_file(source)
        settings = get_settings()
    except (_InputError, SettingsConfigError) as error:
        _fail_input("pretty", error, json_output=False)

    _echo(pretty_print(value, show_refs=settings.show_refs))


def _command_settings(
    *,
    show_refs: bool,
    list_diff_threshold: int | None,
) -> AssertionSettings:
    settings = get_settings()
    return AssertionSettings(
        order_actual_expected=settings.order_actual_expected,
        show_refs=settings.show_refs or show_refs,
        list_diff_threshold=(
            settings.list_diff_threshold if list_diff_threshold is None else list_diff_threshold
        ),
    )


def main() -> None:
    app()
