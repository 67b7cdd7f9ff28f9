"""CLI main module for smallsh."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import typer

from smallsh.cli.render import create_cli_renderer
from smallsh.config import get_settings
from smallsh.shell import Shell

# Undecodable bytes pass through to file names and arguments unchanged.
INPUT_ERRORS = "surrogateescape"

app = typer.Typer(
    name="smallsh",
    help="A small interactive command interpreter.",
    add_completion=False,
)


@app.command()
def main(
    script: Path | None = typer.Argument(None, help="Read commands from this file instead of standard input"),  # noqa: B008
) -> None:
    """Run the interpreter interactively or over a script file."""

    settings = get_settings()
    renderer = create_cli_renderer()

    if script is None:
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors=INPUT_ERRORS)
        shell = Shell(settings, interactive=True, renderer=renderer)
        raise typer.Exit(shell.run(sys.stdin))

    try:
        stream = script.open(encoding="utf-8", errors=INPUT_ERRORS)
    except OSError as exc:
        renderer.error(f"{script}: {exc.strerror}")
        raise typer.Exit(1) from exc

    with stream:
        shell = Shell(settings, interactive=False, renderer=renderer)
        status = shell.run(stream)
    raise typer.Exit(status)


if __name__ == "__main__":
    app()
