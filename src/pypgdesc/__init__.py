"""pypgdesc - Compile psql-style object name patterns into catalog WHERE clauses."""

from __future__ import annotations

try:
    from pypgdesc._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from dataclasses import dataclass
from io import StringIO

from pypgdesc._compiler import ClauseCompiler, ClauseContext
from pypgdesc._errors import InvalidArgumentsError, PgDescError
from pypgdesc._parser import PatternFragments, parse_pattern
from pypgdesc._utils import quote_literal
from pypgdesc.columns import acl_column, write_acl_column
from pypgdesc.dialect._base import Dialect, Writer
from pypgdesc.dialect.postgres import PostgresDialect

__all__ = [
    "compile_name_pattern",
    "parse_pattern",
    "process_name_pattern",
    "quote_literal",
    "acl_column",
    "write_acl_column",
    "ClauseCompiler",
    "ClauseContext",
    "PatternFragments",
    "Result",
    "InvalidArgumentsError",
    "PgDescError",
    "Dialect",
    "PostgresDialect",
]


@dataclass(frozen=True)
class Result:
    """Result of compiling a pattern to text."""

    sql: str
    added_clause: bool
    have_where: bool


def process_name_pattern(
    w: Writer,
    pattern: str | None,
    *,
    name_var: str,
    schema_var: str | None = None,
    alt_name_var: str | None = None,
    visibility_rule: str | None = None,
    have_where: bool = False,
    force_escape: bool = False,
    dialect: Dialect | None = None,
) -> bool:
    """Append the WHERE-clause predicates for a name pattern to ``w``.

    Text already in ``w`` should end with a newline; appended text, if any,
    ends with one too. The first predicate is introduced with ``WHERE``
    unless ``have_where`` is set, later ones with ``AND``.

    Args:
        w: Output sink with a ``write`` method.
        pattern: User-supplied pattern. Empty or None matches everything.
        name_var: SQL expression matched against the object name.
        schema_var: SQL expression matched against the schema name, if any.
        alt_name_var: Optional alternative expression for the object name.
        visibility_rule: SQL condition restricting results to visible
            objects, applied when the pattern names no schema.
        have_where: True if the query already contains a WHERE clause.
        force_escape: Escape regex metacharacters outside quotes too.
        dialect: SQL dialect to use. Defaults to PostgreSQL.

    Returns:
        True if any predicate was written.

    Raises:
        InvalidArgumentsError: If ``name_var`` is empty or ``w`` cannot be
            written to. The pattern itself never causes an error.
    """
    if dialect is None:
        dialect = PostgresDialect()

    ctx = ClauseContext(
        name_var=name_var,
        schema_var=schema_var,
        alt_name_var=alt_name_var,
        visibility_rule=visibility_rule,
        have_where=have_where,
        force_escape=force_escape,
    )
    return ClauseCompiler(w, ctx, dialect).compile(pattern)


def compile_name_pattern(
    pattern: str | None,
    *,
    name_var: str,
    schema_var: str | None = None,
    alt_name_var: str | None = None,
    visibility_rule: str | None = None,
    have_where: bool = False,
    force_escape: bool = False,
    dialect: Dialect | None = None,
) -> Result:
    """Compile a name pattern to predicate text.

    Takes the same arguments as :func:`process_name_pattern` minus the sink.

    Returns:
        Result with the appended text, whether a clause was added, and the
        ``have_where`` value to pass to the next chained call.
    """
    if dialect is None:
        dialect = PostgresDialect()

    ctx = ClauseContext(
        name_var=name_var,
        schema_var=schema_var,
        alt_name_var=alt_name_var,
        visibility_rule=visibility_rule,
        have_where=have_where,
        force_escape=force_escape,
    )
    w = StringIO()
    compiler = ClauseCompiler(w, ctx, dialect)
    compiler.compile(pattern)
    return Result(
        sql=w.getvalue(),
        added_clause=compiler.added_clause,
        have_where=compiler.have_where,
    )
