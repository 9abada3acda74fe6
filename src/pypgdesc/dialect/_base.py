"""Abstract base class for SQL dialects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class Writer(Protocol):
    """Any text sink with a ``write`` method (``io.StringIO``, an open file, ...)."""

    def write(self, s: str, /) -> object: ...


class Dialect(ABC):
    """Abstract base class defining how predicates are spelled.

    All SQL-syntax-specific code lives behind this interface.
    """

    @abstractmethod
    def write_string_literal(self, w: Writer, value: str) -> None: ...

    @abstractmethod
    def write_regex_match(self, w: Writer, target: str, pattern: str) -> None:
        """Write a case-sensitive regex match of ``target`` against ``pattern``.

        ``target`` is trusted SQL and is written verbatim; ``pattern`` is
        quoted as a string literal.
        """
