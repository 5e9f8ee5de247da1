"""Shared fixtures for mdlibs tests."""

import pytest

from mdlibs.config import CONFIG_FILE_NAME, DOCS_DIR, TEMPLATES_DIR, LibraryConfig


@pytest.fixture
def library(tmp_path):
    """A library with documents in docs/, templates/ and the root."""
    root = tmp_path / "notes"
    (root / DOCS_DIR / "guides").mkdir(parents=True)
    (root / TEMPLATES_DIR).mkdir()
    (root / CONFIG_FILE_NAME).write_text(LibraryConfig(name="notes", version="1.0.0").to_toml())

    (root / DOCS_DIR / "intro.md").write_text("# Introduction\n\nWelcome to Rust.\nSecond line.\n")
    (root / DOCS_DIR / "guides" / "setup.markdown").write_text("Install steps\nrun cargo build\n")
    (root / DOCS_DIR / "notes.txt").write_text("# Not Markdown\nrust\n")
    (root / TEMPLATES_DIR / "meeting.MD").write_text("# Meeting Notes\n\n- attendees\n")
    (root / "CHANGELOG.md").write_text("# Changelog\n\n- RUST support\n")
    nested_root = root / "other"
    nested_root.mkdir()
    (nested_root / "ignored.md").write_text("# Ignored\n")

    return root
