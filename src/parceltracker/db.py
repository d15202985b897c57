"""
PostgreSQL access for parceltracker.

Every helper runs one statement on a connection from get_connection()
and hands rows back as dicts keyed by column name. ParcelStore is the
only caller; it never sees a cursor.

Tests pin all helpers to one open transaction with
set_connection_override(), then roll it back when the test ends.
"""

from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.rows import dict_row

from parceltracker.config import config

# =============================================================================
# Connection Override (for testing)
# =============================================================================

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """Route every helper through `conn` until the override is cleared."""
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    global _connection_override
    _connection_override = None


# =============================================================================
# Connection Management
# =============================================================================


@contextmanager
def get_connection():
    """
    Yield a connection to config.database_url.

    Without an override, each call gets its own connection, so every
    store operation is its own transaction: committed when the block
    exits cleanly, rolled back when it raises, closed either way.

    With an override, the override connection is yielded as-is and its
    transaction is left to whoever installed it.
    """
    if _connection_override is not None:
        yield _connection_override
        return

    conn = psycopg.connect(config.database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def get_cursor():
    """Yield a dict-row cursor on a connection from get_connection()."""
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            yield cur


# =============================================================================
# Query Helpers
# =============================================================================


def execute(query: str, params: tuple = None) -> int:
    """
    Run an UPDATE or DELETE and return how many rows it touched.

    ParcelStore relies on a zero count to detect guarded statements
    that matched nothing.
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.rowcount


def fetch_one(query: str, params: tuple = None) -> dict[str, Any] | None:
    """First row of the result as a dict, or None when there are no rows."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchone()


def fetch_all(query: str, params: tuple = None) -> list[dict[str, Any]]:
    """Every row of the result as a dict; empty list when there are none."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()
