"""Target-list helpers shared by catalog listings."""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from pypgdesc._constants import ACL_COLUMN_TITLE
from pypgdesc._utils import quote_identifier
from pypgdesc.dialect._base import Writer

Translator = Callable[[str], str]
"""Maps an untranslated column header to the text to display."""


def noop_translate(s: str) -> str:
    return s


def write_acl_column(
    w: Writer,
    colname: str,
    *,
    translate: Translator | None = None,
) -> None:
    """Write the target-list entry for an ACL (privileges) column.

    The entry has no surrounding whitespace or comma decoration. ``colname``
    is trusted SQL; the header is passed through ``translate`` and quoted
    as an identifier.
    """
    if translate is None:
        translate = noop_translate
    header = quote_identifier(translate(ACL_COLUMN_TITLE))
    w.write(f"pg_catalog.array_to_string({colname}, E'\\n') AS {header}")


def acl_column(colname: str, *, translate: Translator | None = None) -> str:
    w = StringIO()
    write_acl_column(w, colname, translate=translate)
    return w.getvalue()
