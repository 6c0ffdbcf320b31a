"""Turning qwsite errors into CLI exits."""

import sys
from typing import NoReturn

import typer

from qwsite.exceptions import QwsiteError


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Print a red `Error:` line to stderr and exit."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Exit cleanly on a QwsiteError; anything else is reported as unexpected."""
    if isinstance(error, QwsiteError):
        exit_with_error(str(error))
    typer.secho(
        f"Unexpected {type(error).__name__}: {error}", err=True, fg=typer.colors.RED
    )
    sys.exit(1)
