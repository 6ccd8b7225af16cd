"""Data line text handling: escaping, prefix markers and greedy wrapping."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

KEY_PREFIX: Final = "~~:"
ESCAPE_MARKER: Final = "\\"

# Source character -> escaped representation written on a data line
_ESCAPES: Final = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\f": "\\f",
}
_UNESCAPES: Final = {
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "f": "\f",
    "s": " ",
}
_ESCAPED_SPACE: Final = "\\s"
# Characters a data line may consist of and still count as blank filler
BLANK_CHARS: Final = " \t\n\r\v\f"


def tokenize(s: str) -> list[str]:
    """Splits a string into escaped tokens, one per source character.

    Each token is one or two output characters. A space at the very end of
    the string is written as ``\\s`` so that trailing whitespace trimming on
    decode cannot lose it.
    """
    tokens = [_ESCAPES.get(char, char) for char in s]
    if tokens and tokens[-1] == " ":
        tokens[-1] = _ESCAPED_SPACE
    return tokens


def is_blank(line: str) -> bool:
    """Checks whether a line holds nothing but blank filler."""
    return not line.strip(BLANK_CHARS)


def escape_string(s: str) -> str:
    """Escapes a string without wrapping it."""
    return "".join(tokenize(s))


def unescape_string(text: str) -> str:
    """Reverses ``escape_string``; unknown sequences are kept verbatim."""
    if ESCAPE_MARKER not in text:
        return text

    result = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\" and i + 1 < length and text[i + 1] in _UNESCAPES:
            result.append(_UNESCAPES[text[i + 1]])
            i += 2
        else:
            result.append(char)
            i += 1
    return "".join(result)


def mark_prefix(content: str) -> str:
    """Inserts the escape marker when content would read as a sentinel."""
    lead = len(content) - len(content.lstrip(" "))
    if content.startswith(KEY_PREFIX, lead):
        cut = lead + len(KEY_PREFIX)
        return content[:cut] + ESCAPE_MARKER + content[cut:]
    return content


def unmark_prefix(content: str) -> str:
    """Removes the escape marker written by ``mark_prefix``."""
    lead = len(content) - len(content.lstrip(" "))
    if content.startswith(KEY_PREFIX + ESCAPE_MARKER, lead):
        cut = lead + len(KEY_PREFIX)
        return content[:cut] + content[cut + len(ESCAPE_MARKER) :]
    return content


def _starts_with_prefix(tokens: list[str], pos: int) -> bool:
    """Checks whether tokens from pos read as spaces followed by the prefix."""
    total = len(tokens)
    while pos < total and tokens[pos] == " ":
        pos += 1
    return "".join(tokens[pos : pos + len(KEY_PREFIX)]) == KEY_PREFIX


def _is_break(token: str) -> bool:
    return len(token) == 1 and token.isspace()


def wrap_lines(s: str, width: int, indent: int) -> Iterator[str]:
    """
    Wraps an escaped string into indented physical lines.

    Greedily fills each line up to ``width`` characters (indentation
    included) and breaks after the last whitespace in the span when there
    is one past the first position, otherwise exactly at the limit. Escape
    sequences are never split across lines, and a line made only of spaces
    ends in ``\\s`` so that it is not mistaken for blank filler. At least one
    token is emitted per line, so a line may only exceed ``width`` when the
    room left after indentation is smaller than a single escape sequence.
    The empty string yields a single indentation-only line.
    """
    if indent >= width:
        raise ValueError("indent must be less than width")

    pad = " " * indent
    tokens = tokenize(s)
    total = len(tokens)
    if not total:
        yield pad
        return

    pos = 0
    while pos < total:
        budget = width - indent
        if _starts_with_prefix(tokens, pos):
            budget -= len(ESCAPE_MARKER)

        end = pos
        used = 0
        while end < total and used + len(tokens[end]) <= budget:
            used += len(tokens[end])
            end += 1

        if end == pos:
            end = pos + 1
        elif end < total:
            for brk in range(end - 1, pos, -1):
                if _is_break(tokens[brk]):
                    end = brk + 1
                    break

        segment = tokens[pos:end]
        if all(token == " " for token in segment):
            if used + 1 > budget and len(segment) > 1:
                segment.pop()
                end -= 1
            segment[-1] = _ESCAPED_SPACE

        yield pad + mark_prefix("".join(segment))
        pos = end


def wrap(s: str, width: int, indent: int) -> str:
    """Returns the wrapped lines of ``s``, each terminated by a newline."""
    return "".join(f"{line}\n" for line in wrap_lines(s, width, indent))
