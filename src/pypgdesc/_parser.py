"""Pattern parser - a lark scanner that turns a shell-style name pattern into regex fragments."""

from __future__ import annotations

from typing import NamedTuple

from lark import Lark, Token, Transformer

from pypgdesc._constants import FRAGMENT_PREFIX, FRAGMENT_SUFFIX
from pypgdesc._utils import escape_regex_char, fold_case

# A double-quoted run is one token, so "in quotes" is a token boundary.
# Inside it "" stands for one literal quote; the closing quote is optional
# so an unterminated run simply extends to the end of the pattern.
_GRAMMAR = r"""
start: (QUOTED | STAR | QMARK | DOT | DOLLAR | CHAR)*

QUOTED: /"(?:[^"]|"")*"?/
STAR: "*"
QMARK: "?"
DOT: "."
DOLLAR: "$"
CHAR: /[^"*?.$]/
"""

_parser = Lark(_GRAMMAR, parser="lalr")

_SEPARATOR = object()


class PatternFragments(NamedTuple):
    """Finalized regex source for the schema and name parts of a pattern.

    An empty string means the pattern did not constrain that part.
    """

    schema: str
    name: str


def _quoted_char(ch: str) -> str:
    if ch == "$":
        return "\\$"
    return escape_regex_char(ch, force=True)


def _finalize(parts: list[str]) -> str:
    body = "".join(parts)
    if len(body) <= len(FRAGMENT_PREFIX):
        return ""
    return body + FRAGMENT_SUFFIX


class _FragmentBuilder(Transformer):
    """Maps pattern tokens to regex text and splits them at separators."""

    def __init__(self, force_escape: bool) -> None:
        super().__init__()
        self._force_escape = force_escape

    def QUOTED(self, token: Token) -> str:
        text = str(token)
        out: list[str] = []
        i = 1
        while i < len(text):
            ch = text[i]
            if ch == '"':
                if i + 1 < len(text):
                    # doubled quote, stays inside the quoted run
                    out.append('"')
                    i += 2
                    continue
                break
            out.append(_quoted_char(ch))
            i += 1
        return "".join(out)

    def STAR(self, token: Token) -> str:
        return ".*"

    def QMARK(self, token: Token) -> str:
        return "."

    def DOT(self, token: Token) -> object:
        return _SEPARATOR

    def DOLLAR(self, token: Token) -> str:
        # literal in or out of quotes
        return "\\$"

    def CHAR(self, token: Token) -> str:
        return escape_regex_char(fold_case(str(token)), self._force_escape)

    def start(self, items: list) -> PatternFragments:
        schema: list[str] = []
        name: list[str] = [FRAGMENT_PREFIX]
        for item in items:
            if item is _SEPARATOR:
                # last separator wins
                schema = name
                name = [FRAGMENT_PREFIX]
            else:
                name.append(item)
        return PatternFragments(schema=_finalize(schema), name=_finalize(name))


def parse_pattern(pattern: str, force_escape: bool = False) -> PatternFragments:
    """Parse a name pattern into anchored schema and name regex fragments.

    Unquoted ASCII letters are lower-cased, ``*`` becomes ``.*`` and ``?``
    becomes ``.``. The last unquoted ``.`` splits schema from name. Inside
    double quotes every regex metacharacter is escaped; outside them only
    ``$`` is, unless ``force_escape`` is set.

    Args:
        pattern: The user-supplied pattern text.
        force_escape: Escape regex metacharacters outside quotes too.

    Returns:
        The finalized fragments. Never raises for any input text.
    """
    tree = _parser.parse(pattern)
    return _FragmentBuilder(force_escape).transform(tree)
