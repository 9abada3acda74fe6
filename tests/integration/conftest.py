"""Fixtures and helpers for integration tests against a real PostgreSQL server."""

from __future__ import annotations

import os
import shutil
import subprocess
from io import StringIO

import pytest

from pypgdesc import process_name_pattern


# ---------------------------------------------------------------------------
# Container runtime detection (Docker or Podman)
# ---------------------------------------------------------------------------

def _get_podman_socket() -> str | None:
    """Get the Podman machine socket path, if available."""
    try:
        result = subprocess.run(
            ["podman", "machine", "inspect", "--format",
             "{{.ConnectionInfo.PodmanSocket.Path}}"],
            capture_output=True, text=True, check=True, timeout=5,
        )
        sock = result.stdout.strip()
        if sock and os.path.exists(sock):
            return sock
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired,
            FileNotFoundError):
        pass
    return None


def _container_runtime_available() -> bool:
    """Check if Docker or Podman is available as a container runtime."""
    for cmd in ["docker", "podman"]:
        if shutil.which(cmd):
            try:
                subprocess.run(
                    [cmd, "info"], capture_output=True, check=True, timeout=10,
                )
                return True
            except (subprocess.CalledProcessError, subprocess.TimeoutExpired,
                    FileNotFoundError):
                continue
    return False


def _configure_testcontainers_for_podman() -> None:
    """Configure testcontainers to work with Podman."""
    if not shutil.which("podman"):
        return
    # Ryuk (resource reaper) is not always supported by Podman
    os.environ.setdefault("TESTCONTAINERS_RYUK_DISABLED", "true")
    if "DOCKER_HOST" not in os.environ:
        sock = _get_podman_socket()
        if sock:
            os.environ["DOCKER_HOST"] = f"unix://{sock}"


CONTAINER_RUNTIME_AVAILABLE = _container_runtime_available()

if CONTAINER_RUNTIME_AVAILABLE:
    _configure_testcontainers_for_podman()


# ---------------------------------------------------------------------------
# Seed catalog objects
# ---------------------------------------------------------------------------

SEED_DDL = [
    "CREATE SCHEMA sales",
    'CREATE SCHEMA "Mixed"',
    "CREATE TABLE public.orders (id integer)",
    "CREATE TABLE public.order_items (id integer)",
    "CREATE TABLE public.customers (id integer)",
    'CREATE TABLE public."dollar$name" (id integer)',
    "CREATE TABLE sales.orders (id integer)",
    "CREATE TABLE sales.invoices (id integer)",
    'CREATE TABLE "Mixed"."CamelTable" (id integer)',
]


def _setup_postgres(conn) -> None:
    with conn.cursor() as cur:
        for ddl in SEED_DDL:
            cur.execute(ddl)


# ---------------------------------------------------------------------------
# Session-scoped fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def pg_container():
    if not CONTAINER_RUNTIME_AVAILABLE:
        pytest.skip("No container runtime (Docker/Podman) available")
    from testcontainers.postgres import PostgresContainer
    with PostgresContainer("postgres:16") as pg:
        yield pg


@pytest.fixture(scope="session")
def pg_db(pg_container):
    import psycopg
    # Build a psycopg3-compatible connection string (not SQLAlchemy URL)
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    conn = psycopg.connect(
        host=host, port=port,
        user=pg_container.username,
        password=pg_container.password,
        dbname=pg_container.dbname,
        autocommit=True,
    )
    _setup_postgres(conn)
    yield conn
    conn.close()


# ---------------------------------------------------------------------------
# Query helpers
# ---------------------------------------------------------------------------

RELATIONS_QUERY = (
    "SELECT n.nspname, c.relname\n"
    "FROM pg_catalog.pg_class c\n"
    "     JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace\n"
    "WHERE c.relkind = 'r'\n"
    "  AND n.nspname NOT IN ('pg_catalog', 'information_schema')\n"
)


def build_relations_query(pattern: str | None, **kwargs) -> str:
    """Build a table listing filtered by ``pattern``."""
    w = StringIO()
    w.write(RELATIONS_QUERY)
    process_name_pattern(
        w,
        pattern,
        have_where=True,
        schema_var="n.nspname",
        name_var="c.relname",
        visibility_rule="pg_catalog.pg_table_is_visible(c.oid)",
        **kwargs,
    )
    w.write("ORDER BY 1, 2")
    return w.getvalue()


def list_relations(conn, pattern: str | None, **kwargs) -> set[tuple[str, str]]:
    """Run the filtered table listing and return (schema, table) pairs."""
    with conn.cursor() as cur:
        cur.execute(build_relations_query(pattern, **kwargs))
        return {(str(s), str(t)) for s, t in cur.fetchall()}


@pytest.fixture
def relations(pg_db):
    """Callable listing the (schema, table) pairs a pattern selects."""
    def _list(pattern: str | None, **kwargs) -> set[tuple[str, str]]:
        return list_relations(pg_db, pattern, **kwargs)
    return _list
