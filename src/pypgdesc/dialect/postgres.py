"""PostgreSQL dialect implementation."""

from __future__ import annotations

from pypgdesc._utils import quote_literal
from pypgdesc.dialect._base import Dialect, Writer


class PostgresDialect(Dialect):
    """PostgreSQL dialect.

    Args:
        operator_schema: Schema used to qualify the regex operator, so that
            ``OPERATOR(pg_catalog.~)`` is written. ``None`` writes the
            unqualified ``OPERATOR(~)``.
    """

    def __init__(self, operator_schema: str | None = "pg_catalog") -> None:
        self.operator_schema = operator_schema

    @property
    def regex_operator(self) -> str:
        if self.operator_schema:
            return f"OPERATOR({self.operator_schema}.~)"
        return "OPERATOR(~)"

    def write_string_literal(self, w: Writer, value: str) -> None:
        w.write(quote_literal(value))

    def write_regex_match(self, w: Writer, target: str, pattern: str) -> None:
        w.write(f"{target} {self.regex_operator} ")
        self.write_string_literal(w, pattern)

    def __repr__(self) -> str:
        return f"PostgresDialect(operator_schema={self.operator_schema!r})"
