"""Clause compiler - writes the WHERE-clause predicates for one name pattern."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pypgdesc._constants import (
    ALT_NAME_INDENT,
    AND_PREFIX,
    MATCH_ALL_FRAGMENT,
    WHERE_PREFIX,
)
from pypgdesc._errors import (
    ERR_MSG_INVALID_SINK,
    ERR_MSG_MISSING_NAME_VAR,
    InvalidArgumentsError,
)
from pypgdesc._parser import parse_pattern
from pypgdesc.dialect._base import Dialect, Writer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClauseContext:
    """Per-call settings for compiling one name pattern.

    ``schema_var``, ``name_var``, ``alt_name_var`` and ``visibility_rule``
    are trusted SQL and are written verbatim.

    Attributes:
        name_var: Expression matched against the name part of the pattern.
        schema_var: Expression matched against the schema part, or None
            if the objects being listed are not schema-qualified.
        alt_name_var: Optional second expression the name may match instead.
        visibility_rule: Boolean expression used to restrict results to
            visible objects when the pattern names no schema.
        have_where: True if the query already has a WHERE clause.
        force_escape: Escape regex metacharacters outside quotes as well.
    """

    name_var: str
    schema_var: str | None = None
    alt_name_var: str | None = None
    visibility_rule: str | None = None
    have_where: bool = False
    force_escape: bool = False

    def __post_init__(self) -> None:
        if not self.name_var:
            raise InvalidArgumentsError(
                ERR_MSG_MISSING_NAME_VAR,
                "ClauseContext created with an empty name_var",
            )


class ClauseCompiler:
    """Writes the predicates for one pattern into a caller-owned sink.

    Create one instance per pattern. After :meth:`compile`, ``have_where``
    holds the state to pass to the next call that extends the same query.
    """

    def __init__(self, w: Writer, ctx: ClauseContext, dialect: Dialect) -> None:
        if not callable(getattr(w, "write", None)):
            raise InvalidArgumentsError(
                ERR_MSG_INVALID_SINK,
                f"sink of type {type(w).__name__} has no write()",
            )
        self._w = w
        self._ctx = ctx
        self._dialect = dialect
        self._have_where = ctx.have_where
        self._added_clause = False
        self._predicates = 0

    @property
    def have_where(self) -> bool:
        return self._have_where

    @property
    def added_clause(self) -> bool:
        return self._added_clause

    def compile(self, pattern: str | None) -> bool:
        """Write the predicates for ``pattern`` and return whether any were added.

        An empty or None pattern matches everything, so only the visibility
        rule (if any) is written.
        """
        ctx = self._ctx

        if not pattern:
            if ctx.visibility_rule:
                self._open_predicate()
                self._w.write(f"{ctx.visibility_rule}\n")
            return self._added_clause

        fragments = parse_pattern(pattern, ctx.force_escape)
        logger.debug(
            "pattern %r parsed to schema=%r name=%r",
            pattern, fragments.schema, fragments.name,
        )

        if fragments.name and fragments.name != MATCH_ALL_FRAGMENT:
            self._open_predicate()
            self._write_name_match(fragments.name)

        if fragments.schema:
            if fragments.schema != MATCH_ALL_FRAGMENT and ctx.schema_var:
                self._open_predicate()
                self._dialect.write_regex_match(self._w, ctx.schema_var, fragments.schema)
                self._w.write("\n")
        elif ctx.visibility_rule:
            # No schema given, so only visible objects
            self._open_predicate()
            self._w.write(f"{ctx.visibility_rule}\n")

        logger.debug("pattern %r produced %d predicate(s)", pattern, self._predicates)
        return self._added_clause

    def _open_predicate(self) -> None:
        self._w.write(AND_PREFIX if self._have_where else WHERE_PREFIX)
        self._have_where = True
        self._added_clause = True
        self._predicates += 1

    def _write_name_match(self, regex: str) -> None:
        ctx = self._ctx
        if ctx.alt_name_var:
            self._w.write("(")
            self._dialect.write_regex_match(self._w, ctx.name_var, regex)
            self._w.write(ALT_NAME_INDENT)
            self._dialect.write_regex_match(self._w, ctx.alt_name_var, regex)
            self._w.write(")\n")
        else:
            self._dialect.write_regex_match(self._w, ctx.name_var, regex)
            self._w.write("\n")
