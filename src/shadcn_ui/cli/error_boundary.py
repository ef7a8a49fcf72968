"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from shadcn_ui.cli.output import user_output
from shadcn_ui.core.errors import ExitCode, ShadcnError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - ShadcnError: exits with the error category's code
          (resolve 2, install 3, diff 4, manifest 5, registry 6)
        - PermissionError: exits with 1

    All other exceptions bubble up normally with full stack traces. With
    --debug, the traceback of a caught error is logged as well.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ShadcnError as e:
            logger.debug("Command failed", exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            for note in getattr(e, "__notes__", ()):
                user_output(f"  {note}")
            raise SystemExit(int(e.exit_code)) from None
        except PermissionError as e:
            logger.debug("Command failed", exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(int(ExitCode.FAILURE)) from None

    return wrapper  # type: ignore[return-value]
