"""SQL dialect system for name-pattern clauses."""

from pypgdesc.dialect._base import Dialect, Writer
from pypgdesc.dialect.postgres import PostgresDialect

__all__ = [
    "Dialect",
    "PostgresDialect",
    "Writer",
    "get_dialect",
]

_REGISTRY: dict[str, type[Dialect]] = {
    "postgresql": PostgresDialect,
}


def get_dialect(name: str) -> Dialect:
    """Get a dialect instance by name.

    Args:
        name: Dialect name (e.g., "postgresql").

    Returns:
        A Dialect instance.

    Raises:
        ValueError: If the dialect name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown dialect: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
