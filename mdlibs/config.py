"""
Library configuration for mdlibs.

A library is any directory holding a ``.mdlibs.toml`` marker file. The file
uses a flat two-key format:

    # mdlibs configuration file
    [library]
    name = "my-notes"
    version = "0.1.0"

Only ``name`` and ``version`` are read; every other line is ignored.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".mdlibs.toml"
TEMPLATES_DIR = "templates"
DOCS_DIR = "docs"

DEFAULT_NAME = "mdlibs"
DEFAULT_VERSION = "0.1.0"


@dataclass
class LibraryConfig:
    """Library name and version, plus the directory they were loaded from."""
    name: str = DEFAULT_NAME
    version: str = DEFAULT_VERSION
    path: Path = field(default_factory=lambda: Path("."))

    def to_toml(self) -> str:
        """Render the configuration file content."""
        return (
            "# mdlibs configuration file\n"
            "[library]\n"
            f'name = "{self.name}"\n'
            f'version = "{self.version}"\n'
        )

    @classmethod
    def load(cls, path: Path) -> 'LibraryConfig':
        """
        Load configuration from a library directory.

        Args:
            path: Library root directory

        Returns:
            LibraryConfig instance

        Raises:
            FileNotFoundError: If the directory has no config file
        """
        path = Path(path)
        config_path = path / CONFIG_FILE_NAME
        if not config_path.exists():
            raise FileNotFoundError(
                "Configuration file not found. Run 'mdlibs init' first."
            )

        content = config_path.read_text(encoding="utf-8")
        return cls.parse_toml(content, path)

    @classmethod
    def parse_toml(cls, content: str, path: Path) -> 'LibraryConfig':
        """Parse the flat config format; unknown lines are skipped."""
        name = DEFAULT_NAME
        version = DEFAULT_VERSION

        for line in content.splitlines():
            line = line.strip()
            if line.startswith("name"):
                value = extract_toml_value(line)
                if value is not None:
                    name = value
            elif line.startswith("version"):
                value = extract_toml_value(line)
                if value is not None:
                    version = value

        return cls(name=name, version=version, path=Path(path))

    @staticmethod
    def find_library_root(start_path: Path) -> Optional[Path]:
        """
        Find the library root by walking up from start_path.

        The start directory itself is checked first, then each ancestor.

        Returns:
            The first directory containing the config file, or None
        """
        current = Path(start_path)
        for candidate in [current, *current.parents]:
            if (candidate / CONFIG_FILE_NAME).exists():
                logger.debug(f"Found library root at {candidate}")
                return candidate
        return None


def extract_toml_value(line: str) -> Optional[str]:
    """Return the value of a ``key = "value"`` line, or None without '='."""
    if "=" not in line:
        return None
    _, value = line.split("=", 1)
    return value.strip().strip('"')


def resolve_library_root(start_path: Optional[Path] = None) -> Path:
    """Find the library root from start_path (default: cwd), falling back to start_path."""
    start = Path(start_path) if start_path is not None else Path.cwd()
    root = LibraryConfig.find_library_root(start)
    if root is None:
        logger.debug(f"No {CONFIG_FILE_NAME} found above {start}, using it as root")
        return start
    return root
