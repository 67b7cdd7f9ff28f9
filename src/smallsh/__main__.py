"""smallsh command-line entry point."""

from __future__ import annotations

from smallsh.cli.app import app

if __name__ == "__main__":
    app()
