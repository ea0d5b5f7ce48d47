"""Airspace settings CLI.

This module provides a command-line front-end to the settings core: it
restores a saved snapshot, applies textual actions to it and prints the
resulting snapshot.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer

from asselect.errors import ActionSyntaxError, SettingsDecodeError
from asselect.settings import dumps, load_settings
from asselect.settings.codec import TextFormat
from asselect.state import SettingsStore, parse_action

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Airspace export settings CLI", add_completion=False)
config_app = typer.Typer(help="Settings file helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "asselect.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="Saved settings file")
FORMAT_OPTION = typer.Option("yaml", "--format", "-f", help="Output format [yaml|json]")
STRICT_OPTION = typer.Option(False, "--strict", help="Exit with an error on rejected input")
TOKENS_ARGUMENT = typer.Argument(
    ..., help="Actions: key=value, +group:name, ~group:name or !group"
)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _output_format(value: str) -> TextFormat:
    if value not in ("yaml", "json"):
        raise typer.BadParameter("format must be 'yaml' or 'json'")
    return "yaml" if value == "yaml" else "json"


def _load(config: Path | None) -> SettingsStore:
    try:
        return SettingsStore(load_settings(config))
    except (FileNotFoundError, SettingsDecodeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def show(config: Path | None = CONFIG_OPTION, fmt: str = FORMAT_OPTION) -> None:
    """Print the current settings snapshot."""
    store = _load(config)
    typer.echo(dumps(store.current, _output_format(fmt)))


@app.command()
def apply(
    tokens: list[str] = TOKENS_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    fmt: str = FORMAT_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Apply actions to the current snapshot and print the result."""
    output = _output_format(fmt)
    store = _load(config)

    try:
        actions = [parse_action(token) for token in tokens]
    except ActionSyntaxError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    rejected = 0
    for action in actions:
        error = store.dispatch(action)
        if error is not None:
            rejected += 1
            typer.secho(f"Rejected: {error}", fg=typer.colors.YELLOW, err=True)

    typer.echo(dumps(store.current, output))
    if strict and rejected:
        raise typer.Exit(code=1)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a saved settings file."""
    try:
        load_settings(file)
        typer.echo("✅ Settings valid")
    except (FileNotFoundError, SettingsDecodeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
