"""
mdlibs - manage a directory-based library of markdown documents.

Main API:
    from pathlib import Path
    from mdlibs import (
        collect_documents, resolve_library_root, search_documents, update_document_title,
    )

    # Find the library containing the current directory
    root = resolve_library_root(Path.cwd())

    # List documents and their titles
    for doc in collect_documents(root):
        print(doc.doc_type, doc.title, doc.path)

    # Case-insensitive text search
    results = search_documents(root, "python")

    # Rewrite the first H1 heading
    text = update_document_title("# Old\\n\\nBody", "New")
"""

__version__ = "0.1.0"

from .config import LibraryConfig, resolve_library_root
from .library import (
    DocumentEntry,
    DocumentNotFoundError,
    DocumentType,
    collect_documents,
    find_document,
    init_library,
)
from .search import SearchMatch, SearchResult, search_documents
from .update import update_document_title

__all__ = [
    "LibraryConfig",
    "resolve_library_root",
    "DocumentEntry",
    "DocumentNotFoundError",
    "DocumentType",
    "collect_documents",
    "find_document",
    "init_library",
    "SearchMatch",
    "SearchResult",
    "search_documents",
    "update_document_title",
]
