"""Base decorators for CLI commands."""

import sys

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import click

from src.application.exceptions import ConfigurationError, UnknownToolError
from src.domain.exceptions import KokkaiMcpException
from src.infrastructure.external.kokkai_api.client import KokkaiApiError


P = ParamSpec("P")
T = TypeVar("T")


def with_error_handling(f: Callable[P, T]) -> Callable[P, T]:  # noqa: UP047
    """Decorator to handle common errors in CLI commands."""

    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return f(*args, **kwargs)
        except click.ClickException:
            raise
        except ConfigurationError as e:
            click.echo(f"Configuration Error: {str(e)}", err=True)
            click.echo("Please check your configuration settings.", err=True)
            sys.exit(2)
        except KokkaiApiError as e:
            click.echo(f"Kokkai API Error: {str(e)}", err=True)
            sys.exit(3)
        except UnknownToolError as e:
            click.echo(f"Unknown Tool: {str(e)}", err=True)
            click.echo(
                f"Available tools: {', '.join(e.details['available_tools'])}",
                err=True,
            )
            sys.exit(4)
        except KokkaiMcpException as e:
            click.echo(f"Error: {str(e)}", err=True)
            sys.exit(1)
        except KeyboardInterrupt:
            click.echo("\nOperation cancelled by user", err=True)
            sys.exit(0)
        except Exception as e:
            click.echo(f"Unexpected Error: {str(e)}", err=True)
            click.echo(
                "This is an unexpected error. Please report it.",
                err=True,
            )
            sys.exit(99)

    return wrapper
