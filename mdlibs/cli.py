import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

from . import __version__
from .config import CONFIG_FILE_NAME, LibraryConfig, resolve_library_root
from .decorators import err_console, handle_library_errors
from .library import collect_documents, filter_documents, find_document, init_library
from .search import search_documents
from .update import document_info, set_document_title
from .utils import truncate_display

# Initialize Rich Traceback for better error messages
install(show_locals=True)

# Initialize Rich Console
console = Console()

# Configure logging to use Rich's RichHandler
logging.basicConfig(
    level=logging.INFO,  # DEBUG with --verbose
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, console=err_console)]
)
logger = logging.getLogger("mdlibs")

PREVIEW_LENGTH = 60

app = typer.Typer(help="Manage a directory-based library of markdown documents.")


def _version_callback(value: bool):
    if value:
        console.print(f"mdlibs {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose mode"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit"
    ),
):
    """
    mdlibs - manage a library of markdown documents.

    A library is a directory containing a .mdlibs.toml file, a docs/
    directory and a templates/ directory. Commands run against the nearest
    library above the current directory.
    """
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if verbose:
        console.print("[bold green]Verbose mode enabled.[/bold green]")


@app.command()
def about():
    """Display information about mdlibs."""
    console.print("[bold cyan]mdlibs - Markdown Library Manager[/bold cyan]")
    console.print("")
    console.print("[bold]Commands:[/bold]")
    console.print("  mdlibs init [path]                Initialize a new library")
    console.print("  mdlibs list [--filter text]       List documents")
    console.print("  mdlibs search <query>             Search document text")
    console.print("  mdlibs update <doc> [--title t]   Show or change a document title")
    console.print("")
    console.print("[bold]Getting Started:[/bold]")
    console.print("  1. Initialize: mdlibs init ~/notes")
    console.print("  2. Add files:  put .md files in ~/notes/docs")
    console.print("  3. Search:     cd ~/notes && mdlibs search 'python'")


@app.command()
@handle_library_errors
def init(
    path: Path = typer.Argument(Path("."), help="Path where to initialize the library"),
):
    """
    Initialize a new markdown library.

    Creates the configuration file, docs/ and templates/ directories and a
    sample README. Running it on an existing library does nothing.

    Example:
        mdlibs init ~/notes
    """
    result = init_library(path)

    if result.already_initialized:
        console.print(f"[yellow]Library already initialized at: {escape(str(result.path))}[/yellow]")
        return

    for created in result.created:
        console.print(f"  Created: {escape(str(created))}")

    console.print(f"[green]✓ Markdown library initialized at: {escape(str(result.path))}[/green]")


@app.command(name="list")
@handle_library_errors
def list_documents(
    filter_text: Optional[str] = typer.Option(None, "--filter", "-f", help="Filter by title or path"),
):
    """
    List all markdown documents in the library.

    Examples:
        mdlibs list
        mdlibs list --filter guide
    """
    lib_root = resolve_library_root()
    documents = collect_documents(lib_root)

    if not documents:
        console.print("[yellow]No markdown documents found.[/yellow]")
        console.print(
            "Hint: Run 'mdlibs init' to initialize a library, "
            "or add .md files to the docs/ directory."
        )
        return

    filtered = filter_documents(documents, filter_text)
    if not filtered:
        console.print(f"[yellow]No documents match filter: {escape(filter_text or '')}[/yellow]")
        return

    title = f"Documents ({len(filtered)})"
    if (lib_root / CONFIG_FILE_NAME).exists():
        config = LibraryConfig.load(lib_root)
        title = f"{config.name} v{config.version}: {title}"

    table = Table(title=escape(title))
    table.add_column("Type", style="magenta")
    table.add_column("Title", style="green")
    table.add_column("Path", style="cyan")

    for doc in filtered:
        table.add_row(str(doc.doc_type), escape(doc.title), escape(doc.path))

    console.print(table)
    console.print(f"\n[dim]Found {len(filtered)} document(s)[/dim]")


@app.command()
@handle_library_errors
def search(
    query: str = typer.Argument(..., help="Search query"),
    title_only: bool = typer.Option(False, "--title-only", "-t", help="Search only in titles"),
):
    """
    Search through markdown documents.

    Matching is a case-insensitive substring match against each line, or
    against the document title with --title-only.

    Examples:
        mdlibs search "install"
        mdlibs search guide --title-only
    """
    lib_root = resolve_library_root()
    results = search_documents(lib_root, query, title_only=title_only)

    if not results:
        console.print(f"[yellow]No results found for: {escape(query)}[/yellow]")
        return

    console.print(f"Found {len(results)} result(s) for '{escape(query)}':\n")

    for result in results:
        console.print(f"📄 [bold]{escape(result.title)}[/bold] ([cyan]{escape(result.path)}[/cyan])")
        if not title_only:
            for match in result.matches:
                preview = truncate_display(match.line_content, PREVIEW_LENGTH)
                console.print(f"   Line {match.line_number}: {escape(preview)}")
        console.print("")


@app.command()
@handle_library_errors
def update(
    document: str = typer.Argument(..., help="Document name or path"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title for the document"),
):
    """
    Show or update a document's title.

    Without --title, prints the document's title, line count and word count.

    Examples:
        mdlibs update README
        mdlibs update docs/guide.md --title "User Guide"
    """
    lib_root = resolve_library_root()
    doc_path = find_document(lib_root, document)

    if title is None:
        info = document_info(doc_path)
        console.print(f"[bold]Document:[/bold] {escape(str(info.path))}")
        console.print(f"  Title: {escape(info.title)}")
        console.print(f"  Lines: {info.line_count}")
        console.print(f"  Words: {info.word_count}")
        return

    set_document_title(doc_path, title)
    console.print(f"[green]✓ Updated document: {escape(str(doc_path))}[/green]")
    console.print(f"  New title: {escape(title)}")


if __name__ == "__main__":
    app()
