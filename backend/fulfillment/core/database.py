"""
PostgreSQL database access

This module centralizes every way the service touches the database:
- SQLAlchemy declarative Base (table definitions, schema creation)
- psycopg2 direct connections (raw SQL used by the repositories)
- transaction() unit of work for multi-statement requests

Author: TM3
Date: 2026-10-16
"""
import logging
import time
from contextlib import contextmanager
from functools import lru_cache

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DRIVER = "postgresql+psycopg2"


# ============================================================================
# SQLAlchemy Configuration (schema only)
# ============================================================================

# Base for table models
Base = declarative_base()


def get_sqlalchemy_url(database_url: str) -> str:
    """
    DATABASE_URL for SQLAlchemy, always on the psycopg2 driver

    A bare postgresql:// URL would otherwise resolve to whatever driver
    SQLAlchemy defaults to.
    """
    url = make_url(database_url)
    if url.drivername in ("postgresql", "postgres"):
        url = url.set(drivername=SQLALCHEMY_DRIVER)
    return url.render_as_string(hide_password=False)


def get_libpq_url(database_url: str) -> str:
    """DATABASE_URL for psycopg2.connect (drops any +driver suffix)"""
    url = make_url(database_url)
    if url.drivername.startswith("postgresql+"):
        url = url.set(drivername="postgresql")
    return url.render_as_string(hide_password=False)


@lru_cache(maxsize=None)
def get_engine():
    """
    Engine built on first use, so importing the package never needs a driver
    """
    return create_engine(
        get_sqlalchemy_url(settings.DATABASE_URL),
        pool_pre_ping=True,  # Verify connection before use
    )


# ============================================================================
# psycopg2 Direct Connections (for raw SQL queries)
# ============================================================================

def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        Exception if DATABASE_URL is not configured
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    return psycopg2.connect(
        get_libpq_url(database_url),
        cursor_factory=RealDictCursor,
        connect_timeout=settings.CONNECTION_TIMEOUT,
    )


def get_db_connection_with_retry(max_retries=None, retry_delay=None):
    """
    Get a psycopg2 connection (RealDictCursor) with retry on connection failures

    Only establishing the connection is retried, with exponential backoff.
    Failures of the statements run afterwards are never retried here.

    Args:
        max_retries: Maximum number of connection attempts (default: settings.DB_MAX_RETRIES)
        retry_delay: Initial delay between retries in seconds (default: settings.DB_RETRY_DELAY)

    Returns:
        psycopg2 connection object

    Raises:
        ValueError: If max_retries is lower than 1
        psycopg2.OperationalError: If all retry attempts fail
    """
    max_retries = settings.DB_MAX_RETRIES if max_retries is None else max_retries
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")
    retry_delay = settings.DB_RETRY_DELAY if retry_delay is None else retry_delay

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = get_db_connection_dict()
            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt == max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)


@contextmanager
def transaction():
    """
    Unit of work: one connection, one transaction

    Commits when the block finishes, rolls back and re-raises on any error,
    and always closes the connection.

    Usage:
        with transaction() as conn:
            ProductRepository(conn).save(product)
    """
    conn = get_db_connection_with_retry()
    try:
        yield conn
        conn.commit()
    except Exception:
        logger.warning("Rolling back transaction")
        conn.rollback()
        raise
    finally:
        conn.close()
