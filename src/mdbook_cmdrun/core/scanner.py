"""Locate cmdrun directives in chapter text and substitute replacements.

Two patterns are applied in two separate passes:

- Line-consuming: `<!-- cmdrun CMD -->` immediately followed by a line
  terminator. The marker and its terminator are replaced together, so the
  directive's line disappears into the command output.
- Inline: any remaining `<!-- cmdrun CMD -->`. Only the marker is replaced.

The line-consuming pass must run over the whole text first: every
line-consuming marker also matches the inline pattern.
"""

import re
from collections.abc import Callable, Iterator

from mdbook_cmdrun.core.types import Directive, DirectiveMode

# Command text is a single line and never contains the closing "-->".
_MARKER = r"<!--[ ]*cmdrun ((?:(?!-->).)*?)-->"

LINE_CONSUMING_PATTERN = re.compile(_MARKER + r"\r?\n")
INLINE_PATTERN = re.compile(_MARKER)

_PATTERNS = {
    DirectiveMode.LINE_CONSUMING: LINE_CONSUMING_PATTERN,
    DirectiveMode.INLINE: INLINE_PATTERN,
}

# Scan order; each pass completes before the next begins.
PASSES = (DirectiveMode.LINE_CONSUMING, DirectiveMode.INLINE)


def find_directives(text: str, mode: DirectiveMode) -> Iterator[Directive]:
    """Yield non-overlapping directives matching the pattern for `mode`, in order."""
    for match in _PATTERNS[mode].finditer(text):
        yield Directive(command=match.group(1), start=match.start(), end=match.end(), mode=mode)


def substitute(text: str, mode: DirectiveMode, replace: Callable[[Directive], str]) -> str:
    """Replace every directive of one mode with the text returned by `replace`.

    The result is assembled in a fresh buffer. If `replace` raises, the
    exception propagates and no partially substituted text is returned.
    """
    parts: list[str] = []
    position = 0
    for directive in find_directives(text, mode):
        parts.append(text[position : directive.start])
        parts.append(replace(directive))
        position = directive.end
    parts.append(text[position:])
    return "".join(parts)


def substitute_all(text: str, replace: Callable[[Directive], str]) -> str:
    """Run the line-consuming pass, then the inline pass, over `text`."""
    for mode in PASSES:
        text = substitute(text, mode, replace)
    return text
