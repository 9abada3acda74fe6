"""Escaping and quoting helpers."""

from __future__ import annotations

from pypgdesc._constants import REGEX_SPECIAL_CHARS

# Escapes understood inside an E'...' literal. Anything else non-printable
# goes out as \xNN, \uXXXX or \UXXXXXXXX.
_SHORT_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(ch: str) -> str:
    short = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    if ch.isprintable():
        return ch
    cp = ord(ch)
    if cp < 0x80:
        return f"\\x{cp:02x}"
    if cp <= 0xFFFF:
        return f"\\u{cp:04x}"
    return f"\\U{cp:08x}"


def escape_backslashes(text: str) -> str:
    """Backslash-escape characters that cannot appear raw in an E'' literal."""
    return "".join(_escape_char(ch) for ch in text)


def escape_string_literal(value: str) -> str:
    """Escape a string for use as a SQL string literal."""
    return value.replace("'", "''")


def quote_literal(text: str) -> str:
    """Quote ``text`` as a PostgreSQL extended string literal.

    Stages run in a fixed order: backslash escapes, quote doubling, then
    the ``E'...'`` wrapper.
    """
    escaped = escape_backslashes(text)
    escaped = escape_string_literal(escaped)
    return f"E'{escaped}'"


def quote_identifier(name: str) -> str:
    """Quote a SQL identifier, doubling embedded double quotes."""
    return '"' + name.replace('"', '""') + '"'


def escape_regex_char(ch: str, force: bool) -> str:
    """Backslash-prefix a regex metacharacter when ``force`` is set."""
    if force and ch in REGEX_SPECIAL_CHARS:
        return "\\" + ch
    return ch


def fold_case(ch: str) -> str:
    """Lower-case an unquoted ASCII letter, matching server identifier folding."""
    if "A" <= ch <= "Z":
        return ch.lower()
    return ch
