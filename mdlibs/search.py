"""Case-insensitive substring search over library documents."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .library import iter_library_files, relative_path
from .utils import extract_title_from_content, split_lines

logger = logging.getLogger(__name__)


@dataclass
class SearchMatch:
    """A matching line within a document."""
    line_number: int  # 1-based
    line_content: str


@dataclass
class SearchResult:
    """A document that matched a query."""
    path: str
    title: str
    matches: List[SearchMatch] = field(default_factory=list)


def search_file(
    path: Path,
    lib_root: Path,
    query: str,
    title_only: bool = False,
) -> Optional[SearchResult]:
    """
    Search within a single file.

    Args:
        path: Markdown file to search
        lib_root: Library root used for the reported path
        query: Text to look for, compared case-insensitively
        title_only: Only match against the document title

    Returns:
        SearchResult if the file matched, otherwise None

    Raises:
        OSError: If the file can't be read
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    title = extract_title_from_content(content) or path.stem or "Untitled"
    query_lower = query.lower()
    rel_path = relative_path(path, lib_root)

    if title_only:
        if query_lower in title.lower():
            return SearchResult(path=rel_path, title=title)
        return None

    matches = [
        SearchMatch(line_number=number, line_content=line)
        for number, line in enumerate(split_lines(content), start=1)
        if query_lower in line.lower()
    ]
    if not matches:
        return None

    return SearchResult(path=rel_path, title=title, matches=matches)


def search_documents(lib_root: Path, query: str, title_only: bool = False) -> List[SearchResult]:
    """
    Search every markdown file in the library.

    Candidates come from the same zones as document listing; results are in
    discovery order.
    """
    lib_root = Path(lib_root)
    results = []

    for path, _ in iter_library_files(lib_root):
        result = search_file(path, lib_root, query, title_only)
        if result is not None:
            results.append(result)

    logger.debug(f"Search for '{query}' matched {len(results)} document(s)")
    return results
