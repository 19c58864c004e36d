r"""Quoted string literals.

    "plain"            -> plain
    "tab\there"        -> tab<TAB>here
    "\u{1F602}"        -> the code point U+1F602
    "\u00e9"           -> é
    "a\   b"           -> ab    (backslash followed by whitespace is skipped)
"""

from __future__ import annotations

import re

from tinylisp.errors import ParsingError

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    "/": "/",
    '"': '"',
}

BRACED_UNICODE_RE = re.compile(r"\{([0-9A-Fa-f]{1,6})\}")
FIXED_UNICODE_RE = re.compile(r"[0-9A-Fa-f]{4}")
ESCAPED_WHITESPACE_RE = re.compile(r"\s+")
LITERAL_RE = re.compile(r'[^"\\]+')


def _code_point(hex_digits: str, pos: int) -> str:
    value = int(hex_digits, 16)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise ParsingError(f"invalid unicode escape at position {pos}: {hex_digits!r}")
    return chr(value)


def read_string(source: str, pos: int) -> tuple[str, int]:
    """Decode the string literal starting at `pos` (which must be a '"').

    Returns the decoded value and the position just past the closing quote.
    """
    if not source.startswith('"', pos):
        raise ParsingError(f"expected '\"' at position {pos}")
    start = pos
    pos += 1
    n = len(source)
    parts: list[str] = []

    while pos < n:
        current_char = source[pos]

        if current_char == '"':
            return "".join(parts), pos + 1

        if current_char != "\\":
            m = LITERAL_RE.match(source, pos)
            parts.append(m.group())
            pos = m.end()
            continue

        # ----------------------
        # Escape sequences
        # ----------------------
        pos += 1
        if pos >= n:
            break
        esc = source[pos]
        if esc in SIMPLE_ESCAPES:
            parts.append(SIMPLE_ESCAPES[esc])
            pos += 1
        elif esc == "u":
            pos += 1
            m = BRACED_UNICODE_RE.match(source, pos) or FIXED_UNICODE_RE.match(source, pos)
            if not m:
                raise ParsingError(f"malformed unicode escape at position {pos - 2}")
            digits = m.group(1) if m.re is BRACED_UNICODE_RE else m.group()
            parts.append(_code_point(digits, pos - 2))
            pos = m.end()
        elif esc.isspace():
            pos = ESCAPED_WHITESPACE_RE.match(source, pos).end()
        else:
            raise ParsingError(f"unknown escape sequence '\\{esc}' at position {pos - 1}")

    raise ParsingError(f"unterminated string starting at position {start}")


def escape_string(value: str) -> str:
    """Inverse of read_string: quote and escape `value`."""
    out = ['"']
    for ch in value:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\b":
            out.append("\\b")
        elif ch == "\f":
            out.append("\\f")
        elif ord(ch) < 0x20 or ch.isspace() and ch != " ":
            out.append(f"\\u{{{ord(ch):X}}}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)
