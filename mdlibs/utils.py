"""Text and path helpers shared by the mdlibs commands."""

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ("md", "markdown")
HEADING_PREFIX = "# "


def is_markdown_file(path: Path) -> bool:
    """Return True if the path has a markdown extension (case-insensitive)."""
    suffix = Path(path).suffix
    if not suffix:
        return False
    return suffix[1:].lower() in MARKDOWN_EXTENSIONS


def split_lines(content: str) -> List[str]:
    """
    Split text into lines.

    Splits on ``\\n`` only and drops a trailing ``\\r`` from each line. A final
    newline does not produce an empty last line, so ``"a\\nb\\n"`` and
    ``"a\\nb"`` both give ``["a", "b"]``.
    """
    if not content:
        return []

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def extract_title_from_content(content: str) -> Optional[str]:
    """
    Extract the title (first H1 heading) from markdown content.

    Args:
        content: Raw markdown text

    Returns:
        The heading text, or None if no non-empty H1 heading exists
    """
    for line in split_lines(content):
        line = line.strip()
        if line.startswith(HEADING_PREFIX):
            title = line[len(HEADING_PREFIX):].strip()
            if title:
                return title
    return None


def extract_title_from_file(path: Path) -> Optional[str]:
    """Extract the H1 title from a markdown file, or None if it can't be read."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return None
    return extract_title_from_content(content)


def count_words(content: str) -> int:
    return len(content.split())


def truncate_display(text: str, max_len: int) -> str:
    """Strip and truncate text for display, appending '...' when cut."""
    trimmed = text.strip()
    if len(trimmed) <= max_len:
        return trimmed
    return f"{trimmed[:max_len]}..."
