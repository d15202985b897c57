# src/parceltracker/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides fixtures available to all tests in the package.

Database-backed fixtures need a reachable PostgreSQL server at
TEST_DATABASE_URL (default postgresql://localhost:5432/parceltracker_test);
tests using them are skipped otherwise.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["PARCELTRACKER_ENV"] = "test"

from pathlib import Path
from unittest.mock import MagicMock

import psycopg
import pytest
from psycopg.rows import dict_row

from parceltracker import db
from parceltracker.config import config, require_test_database
from parceltracker.parcel import Parcel, ParcelStatus, ParcelStore

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_db():
    """
    Create test database and schema once per test session.

    This fixture:
    1. Drops the test database if it exists (clean slate)
    2. Creates a fresh test database
    3. Applies all migrations

    Runs once at the start of the test session.
    """
    test_db_url = config.database_url

    # Never drop a database that is not named *_test
    db_name = require_test_database(test_db_url)
    base_url = test_db_url.rsplit("/", 1)[0] + "/postgres"

    try:
        admin = psycopg.connect(base_url, autocommit=True)
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")

    with admin as conn:
        with conn.cursor() as cur:
            # Terminate existing connections to test database
            cur.execute(
                """
                SELECT pg_terminate_backend(pg_stat_activity.pid)
                FROM pg_stat_activity
                WHERE pg_stat_activity.datname = %s
                AND pid <> pg_backend_pid()
            """,
                (db_name,),
            )

            cur.execute(f"DROP DATABASE IF EXISTS {db_name}")
            cur.execute(f"CREATE DATABASE {db_name}")

    # Apply schema migrations
    migrations_dir = Path(__file__).parent.parent.parent / "migrations"
    schema_file = migrations_dir / "001_initial_schema.sql"

    if not schema_file.exists():
        raise FileNotFoundError(f"Migration file not found: {schema_file}")

    with psycopg.connect(test_db_url) as conn:
        with conn.cursor() as cur:
            cur.execute(schema_file.read_text())
        conn.commit()

    yield test_db_url


@pytest.fixture
def db_connection(test_db):
    """
    Provide a database connection with transaction rollback.

    Each test runs in a transaction that is rolled back at the end,
    ensuring tests don't affect each other.
    """
    conn = psycopg.connect(config.database_url)

    # Clean slate: truncate before each test
    with conn.cursor() as cur:
        cur.execute("TRUNCATE parcel RESTART IDENTITY")
    conn.commit()

    # Override the db module to use this connection
    db.set_connection_override(conn)

    yield conn

    # Rollback any changes made during the test
    conn.rollback()
    db.clear_connection_override()
    conn.close()


@pytest.fixture
def db_cursor(db_connection):
    """Provide a cursor for direct SQL operations in tests."""
    with db_connection.cursor(row_factory=dict_row) as cur:
        yield cur


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def parcel_store(db_connection):
    """Provide a ParcelStore bound to the test transaction."""
    return ParcelStore()


@pytest.fixture
def mock_store():
    """A ParcelStore stand-in for tests that don't touch the database."""
    return MagicMock(spec=ParcelStore)


# =============================================================================
# Seed Data Fixtures
# =============================================================================


def make_parcel(**overrides) -> Parcel:
    """Build an unsaved registered parcel, overriding any field."""
    fields = {
        "client": 1000,
        "address": "test",
        "status": ParcelStatus.REGISTERED,
        "created_at": "2024-01-01T10:00:00Z",
    }
    fields.update(overrides)
    return Parcel(**fields)


@pytest.fixture
def sample_parcel(parcel_store) -> Parcel:
    """Persist a single registered parcel and return it with its number."""
    parcel = make_parcel()
    parcel.number = parcel_store.add(parcel)
    return parcel


@pytest.fixture
def parcel_factory():
    """Provide make_parcel() to tests that build their own parcels."""
    return make_parcel
