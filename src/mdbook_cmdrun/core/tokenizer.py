"""Shell-word splitting and re-joining for directive command text."""

import shlex
from collections.abc import Iterable, Sequence

from mdbook_cmdrun.core.errors import TokenizationError


def _has_whitespace(word: str) -> bool:
    return any(ch.isspace() for ch in word)


def quote_whitespace_words(words: Iterable[str]) -> list[str]:
    """Wrap every word containing whitespace in single quotes.

    Keeps a quoted argument such as `"hello world"` visibly a single word while
    the flags are separated from the command payload.
    """
    return [f"'{word}'" if _has_whitespace(word) else word for word in words]


def split_command(raw: str) -> list[str]:
    """Split raw directive text into shell words using POSIX rules.

    Args:
        raw: Command text as captured from the directive (may carry
            surrounding whitespace)

    Returns:
        Shell words, with whitespace-bearing words wrapped in single quotes

    Raises:
        TokenizationError: If quoting or escaping is malformed
    """
    try:
        words = shlex.split(raw, posix=True)
    except ValueError as e:
        raise TokenizationError(raw, str(e)) from e
    return quote_whitespace_words(words)


def _unwrap(word: str) -> str:
    if len(word) >= 2 and word[0] == word[-1] == "'" and _has_whitespace(word):
        return word[1:-1]
    return word


def join_command(words: Sequence[str]) -> str:
    """Rejoin payload words into one shell-safe command string.

    Every word is quoted, so `|`, `>` or `$HOME` reach the program as literal
    arguments; shell syntax needs an explicit `sh -c '...'`. Words wrapped by
    quote_whitespace_words() are unwrapped first so the wrapping quotes never
    reach the shell as literal characters.
    """
    return shlex.join(_unwrap(word) for word in words)
