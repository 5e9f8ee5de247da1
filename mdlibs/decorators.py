"""Decorators for mdlibs commands."""

import functools
import logging
from typing import Callable, Any
import typer
from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


def handle_library_errors(func: Callable) -> Callable:
    """
    Decorator to report library operation errors once and exit non-zero.

    Handles:
    - FileNotFoundError: missing document or configuration
    - PermissionError: no access to files
    - OSError: any other read/write failure
    - ValueError: undecodable file contents or invalid arguments
    - General exceptions: unexpected errors, logged with traceback
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except FileNotFoundError as e:
            err_console.print(f"[bold red]Error:[/bold red] Not found: {escape(str(e))}")
            raise typer.Exit(code=1)
        except PermissionError as e:
            err_console.print(f"[bold red]Error:[/bold red] Permission denied: {escape(str(e))}")
            err_console.print("[yellow]Tip: Check file permissions or run with appropriate privileges[/yellow]")
            raise typer.Exit(code=1)
        except OSError as e:
            err_console.print(f"[bold red]Error:[/bold red] I/O error: {escape(str(e))}")
            raise typer.Exit(code=1)
        except ValueError as e:
            err_console.print(f"[bold red]Error:[/bold red] Invalid input: {escape(str(e))}")
            raise typer.Exit(code=1)
        except KeyboardInterrupt:
            err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(code=130)
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            err_console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(e))}")
            raise typer.Exit(code=1)

    return wrapper
