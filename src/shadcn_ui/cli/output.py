"""Output utilities for CLI commands with clear intent.

user_output is for status messages and errors (stderr); machine_output is
for the data a command reports (stdout), so it can be piped.
"""

import click


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    click.echo(message)
