"""Book source-root configuration.

Loaded once at the CLI entry point, before any chapter is processed, and
passed into the pipeline as an immutable value.
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BOOK_CONFIG_FILENAME = "book.toml"
DEFAULT_SRC_DIR = "src"


@dataclass(frozen=True)
class CmdRunConfig:
    """Immutable preprocessor configuration.

    Attributes:
        src_dir: Directory holding the book's markdown sources. Chapter paths
            are relative to it.
    """

    src_dir: Path


def read_src_dir(book_root: Path) -> str:
    """Return `book.src` from book.toml, or "src" if it cannot be determined.

    A missing, unreadable or malformed book.toml, or one without a string
    `book.src`, all fall back to the default.
    """
    config_path = book_root / BOOK_CONFIG_FILENAME
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.debug("Could not read %s (%s), using '%s'", config_path, e, DEFAULT_SRC_DIR)
        return DEFAULT_SRC_DIR

    book = data.get("book")
    if not isinstance(book, dict):
        return DEFAULT_SRC_DIR
    src = book.get("src")
    if not isinstance(src, str):
        return DEFAULT_SRC_DIR
    return src


def load_config(book_root: Path) -> CmdRunConfig:
    """Load configuration for the book rooted at `book_root`."""
    return CmdRunConfig(src_dir=book_root / read_src_dir(book_root))
