"""Output helpers for CLI commands with clear intent.

user_output goes to stderr for messages aimed at the person running the
command; machine_output goes to stdout for lines other tools may consume.
"""

import click


def user_output(message: str) -> None:
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    click.echo(message)


def error_output(message: str) -> None:
    """Write an error with a red "Error:" prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
