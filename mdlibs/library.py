"""
Markdown library layout: initialization, document discovery and lookup.

A library root holds three zones that are scanned for markdown files:

- ``docs/``, recursively, entries tagged as documents
- ``templates/``, recursively, entries tagged as templates
- the root itself, non-recursively, entries tagged as documents

Within a directory, entries are visited in sorted name order.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import CONFIG_FILE_NAME, DOCS_DIR, TEMPLATES_DIR, DEFAULT_NAME, LibraryConfig
from .utils import extract_title_from_file, is_markdown_file

logger = logging.getLogger(__name__)

README_TEMPLATE = """# {name}

Welcome to your markdown library!

## Getting Started

This library was initialized with mdlibs. You can:

- Add markdown documents to the `docs/` directory
- Create templates in the `templates/` directory
- Use `mdlibs list` to see all documents
- Use `mdlibs search <query>` to search documents

## Structure

- `docs/` - Your markdown documents
- `templates/` - Reusable document templates
- `.mdlibs.toml` - Library configuration
"""


class DocumentNotFoundError(FileNotFoundError):
    """No file matches a document identifier."""
    pass


class DocumentType(Enum):
    DOCUMENT = "doc"
    TEMPLATE = "template"

    def __str__(self) -> str:
        return self.value


@dataclass
class DocumentEntry:
    """A markdown file found in the library."""
    path: str  # relative to the library root
    title: str
    doc_type: DocumentType


@dataclass
class InitResult:
    """Outcome of initializing a library directory."""
    path: Path
    already_initialized: bool = False
    created: List[Path] = field(default_factory=list)


def iter_markdown_files(directory: Path, recursive: bool = True) -> Iterator[Path]:
    """
    Yield markdown files under a directory.

    Args:
        directory: Directory to scan; a missing directory yields nothing
        recursive: Descend into subdirectories, skipping symlinked ones

    Yields:
        Paths of regular files with a markdown extension
    """
    if not directory.is_dir():
        return

    for path in sorted(directory.iterdir()):
        if path.is_dir():
            if recursive and not path.is_symlink():
                yield from iter_markdown_files(path, recursive=True)
        elif path.is_file() and is_markdown_file(path):
            yield path


def iter_library_files(lib_root: Path) -> Iterator[Tuple[Path, DocumentType]]:
    """Yield (path, type) for every markdown file in the three library zones."""
    lib_root = Path(lib_root)
    for path in iter_markdown_files(lib_root / DOCS_DIR):
        yield path, DocumentType.DOCUMENT
    for path in iter_markdown_files(lib_root / TEMPLATES_DIR):
        yield path, DocumentType.TEMPLATE
    for path in iter_markdown_files(lib_root, recursive=False):
        yield path, DocumentType.DOCUMENT


def relative_path(path: Path, lib_root: Path) -> str:
    """Path relative to the library root, or the path itself when outside it."""
    try:
        return Path(path).relative_to(lib_root).as_posix()
    except ValueError:
        return Path(path).as_posix()


def create_document_entry(path: Path, lib_root: Path, doc_type: DocumentType) -> DocumentEntry:
    title = extract_title_from_file(path) or path.stem or "Untitled"
    return DocumentEntry(
        path=relative_path(path, lib_root),
        title=title,
        doc_type=doc_type,
    )


def collect_documents(lib_root: Path) -> List[DocumentEntry]:
    """
    Collect all markdown documents from the library.

    Args:
        lib_root: Resolved library root

    Returns:
        Document entries in discovery order (docs, templates, root)
    """
    lib_root = Path(lib_root)
    documents = [
        create_document_entry(path, lib_root, doc_type)
        for path, doc_type in iter_library_files(lib_root)
    ]
    logger.debug(f"Collected {len(documents)} document(s) under {lib_root}")
    return documents


def filter_documents(documents: List[DocumentEntry], text: Optional[str]) -> List[DocumentEntry]:
    """Keep documents whose title or path contains text (case-insensitive)."""
    if not text:
        return list(documents)

    needle = text.lower()
    return [
        doc for doc in documents
        if needle in doc.title.lower() or needle in doc.path.lower()
    ]


def find_document(lib_root: Path, document: str) -> Path:
    """
    Find a document by name or path.

    Tries, in order: the identifier relative to the root, under ``docs/``,
    under ``templates/``; then the same three with ``.md`` appended when the
    identifier doesn't already end in ``.md``.

    Raises:
        DocumentNotFoundError: If no candidate is an existing file
    """
    lib_root = Path(lib_root)
    bases = [lib_root, lib_root / DOCS_DIR, lib_root / TEMPLATES_DIR]

    names = [document]
    if not document.lower().endswith(".md"):
        names.append(f"{document}.md")

    for name in names:
        for base in bases:
            candidate = base / name
            if candidate.is_file():
                logger.debug(f"Resolved '{document}' to {candidate}")
                return candidate

    raise DocumentNotFoundError(f"Document not found: {document}")


def init_library(path: Path) -> InitResult:
    """
    Initialize a new markdown library at path.

    Creates the directory if needed, the config file, ``templates/``,
    ``docs/`` and a sample ``docs/README.md``. An existing library is left
    untouched.
    """
    lib_path = Path(path)
    result = InitResult(path=lib_path)

    config_path = lib_path / CONFIG_FILE_NAME
    if config_path.exists():
        logger.debug(f"Library already initialized at {lib_path}")
        result.already_initialized = True
        return result

    if not lib_path.exists():
        lib_path.mkdir(parents=True)
        result.created.append(lib_path)

    name = lib_path.name or DEFAULT_NAME
    config = LibraryConfig(name=name, path=lib_path)
    config_path.write_text(config.to_toml(), encoding="utf-8")
    result.created.append(config_path)

    for dirname in (TEMPLATES_DIR, DOCS_DIR):
        directory = lib_path / dirname
        if not directory.exists():
            directory.mkdir(parents=True)
            result.created.append(directory)

    readme_path = lib_path / DOCS_DIR / "README.md"
    if not readme_path.exists():
        readme_path.write_text(README_TEMPLATE.format(name=name), encoding="utf-8")
        result.created.append(readme_path)

    logger.debug(f"Initialized library '{name}' at {lib_path}")
    return result
