"""Reading document statistics and rewriting document titles."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .utils import HEADING_PREFIX, count_words, extract_title_from_content, split_lines

logger = logging.getLogger(__name__)


@dataclass
class DocumentInfo:
    path: Path
    title: str
    line_count: int
    word_count: int


def update_document_title(content: str, new_title: str) -> str:
    """
    Set the first H1 heading of markdown content to new_title.

    The first line that starts with ``# `` once stripped is replaced. If there
    is no such line, the heading and a blank line are prepended. The result
    always ends with a newline.

    Raises:
        ValueError: If new_title is blank or spans more than one line
    """
    if not new_title.strip():
        raise ValueError("Title must not be empty")
    if "\n" in new_title or "\r" in new_title:
        raise ValueError("Title must be a single line")

    lines = split_lines(content)
    heading = f"{HEADING_PREFIX}{new_title}"

    for i, line in enumerate(lines):
        if line.strip().startswith(HEADING_PREFIX):
            lines[i] = heading
            break
    else:
        lines[:0] = [heading, ""]

    return "\n".join(lines) + "\n"


def document_info(path: Path) -> DocumentInfo:
    """Read a document and return its title, line count and word count."""
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    return DocumentInfo(
        path=path,
        title=extract_title_from_content(content) or "Untitled",
        line_count=len(split_lines(content)),
        word_count=count_words(content),
    )


def set_document_title(path: Path, new_title: str) -> str:
    """
    Rewrite the title of a document in place.

    Returns:
        The updated content that was written
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    updated = update_document_title(content, new_title)
    path.write_text(updated, encoding="utf-8")
    logger.debug(f"Updated title of {path} to '{new_title}'")
    return updated
