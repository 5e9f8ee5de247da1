"""
Tests for the mdlibs command-line interface.
"""

import pytest
from typer.testing import CliRunner

from mdlibs import __version__
from mdlibs.cli import app
from mdlibs.config import CONFIG_FILE_NAME, DOCS_DIR, TEMPLATES_DIR


runner = CliRunner()


@pytest.fixture
def in_library(library, monkeypatch):
    """Run commands from inside the test library's docs directory."""
    monkeypatch.chdir(library / DOCS_DIR)
    return library


class TestInitCommand:
    """Tests for the init command."""

    def test_init_creates_library(self, tmp_path):
        target = tmp_path / "kb"
        result = runner.invoke(app, ["init", str(target)])

        assert result.exit_code == 0
        assert "initialized" in result.stdout
        assert (target / CONFIG_FILE_NAME).exists()
        assert (target / TEMPLATES_DIR).is_dir()
        assert (target / DOCS_DIR / "README.md").exists()

    def test_init_twice(self, tmp_path):
        target = tmp_path / "kb"
        runner.invoke(app, ["init", str(target)])
        result = runner.invoke(app, ["init", str(target)])

        assert result.exit_code == 0
        assert "already initialized" in result.stdout

    def test_init_default_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert (tmp_path / CONFIG_FILE_NAME).exists()
        assert 'name = "mdlibs"' in (tmp_path / CONFIG_FILE_NAME).read_text()
        assert "initialized at: ." in result.stdout


class TestListCommand:
    """Tests for the list command."""

    def test_list_all(self, in_library):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Introduction" in result.stdout
        assert "Meeting Notes" in result.stdout
        assert "template" in result.stdout
        assert "Found 4 document(s)" in result.stdout

    def test_list_shows_library_name(self, in_library):
        result = runner.invoke(app, ["list"])
        assert "notes v1.0.0" in result.stdout

    def test_list_filter(self, in_library):
        result = runner.invoke(app, ["list", "--filter", "MEETING"])

        assert result.exit_code == 0
        assert "Meeting Notes" in result.stdout
        assert "Introduction" not in result.stdout
        assert "Found 1 document(s)" in result.stdout

    def test_list_filter_no_match(self, in_library):
        result = runner.invoke(app, ["list", "-f", "zzz"])

        assert result.exit_code == 0
        assert "No documents match filter: zzz" in result.stdout

    def test_list_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "No markdown documents found." in result.stdout


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_lines(self, in_library):
        result = runner.invoke(app, ["search", "rust"])

        assert result.exit_code == 0
        assert "Found 2 result(s)" in result.stdout
        assert "Line 3: Welcome to Rust." in result.stdout
        assert "CHANGELOG.md" in result.stdout

    def test_search_title_only(self, in_library):
        result = runner.invoke(app, ["search", "meeting", "--title-only"])

        assert result.exit_code == 0
        assert "Meeting Notes" in result.stdout
        assert "Line" not in result.stdout

    def test_search_no_results(self, in_library):
        result = runner.invoke(app, ["search", "no-such-text"])

        assert result.exit_code == 0
        assert "No results found for: no-such-text" in result.stdout

    def test_search_truncates_long_lines(self, in_library):
        (in_library / DOCS_DIR / "long.md").write_text("needle " + "x" * 100 + "\n")
        result = runner.invoke(app, ["search", "needle"])

        assert result.exit_code == 0
        assert "x" * 53 + "..." in result.stdout


class TestUpdateCommand:
    """Tests for the update command."""

    def test_update_shows_info(self, in_library):
        result = runner.invoke(app, ["update", "intro"])

        assert result.exit_code == 0
        assert "Title: Introduction" in result.stdout
        assert "Lines: 4" in result.stdout
        assert "Words: 7" in result.stdout

    def test_update_title(self, in_library):
        result = runner.invoke(app, ["update", "intro.md", "--title", "Getting Started"])

        assert result.exit_code == 0
        content = (in_library / DOCS_DIR / "intro.md").read_text()
        assert content.startswith("# Getting Started\n\nWelcome to Rust.")
        assert "Introduction" not in content

    def test_update_adds_missing_title(self, in_library):
        result = runner.invoke(app, ["update", "guides/setup.markdown", "-t", "Setup"])

        assert result.exit_code == 0
        content = (in_library / DOCS_DIR / "guides" / "setup.markdown").read_text()
        assert content == "# Setup\n\nInstall steps\nrun cargo build\n"

    def test_update_missing_document(self, in_library):
        result = runner.invoke(app, ["update", "missing"])

        assert result.exit_code == 1
        assert "Document not found: missing" in result.output

    @pytest.mark.parametrize("title", ["", "   ", "A\nB"])
    def test_update_rejects_invalid_title(self, in_library, title):
        before = (in_library / DOCS_DIR / "intro.md").read_text()
        result = runner.invoke(app, ["update", "intro", "--title", title])

        assert result.exit_code == 1
        assert "Invalid input" in result.output
        assert (in_library / DOCS_DIR / "intro.md").read_text() == before


class TestGlobalOptions:
    """Tests for the app callback and about command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_about(self):
        result = runner.invoke(app, ["about"])
        assert result.exit_code == 0
        assert "mdlibs" in result.stdout

    def test_verbose(self, in_library):
        result = runner.invoke(app, ["--verbose", "list"])
        assert result.exit_code == 0
        assert "Verbose mode enabled." in result.stdout
