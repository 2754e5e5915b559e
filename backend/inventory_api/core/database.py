"""
PostgreSQL access for the Inventory API

Two ways to talk to the database live here:
- Database: a psycopg2 connection pool used by the repositories for raw,
  parameterized SQL (one statement per operation)
- SQLAlchemy declarative Base: table definitions used only to create the
  schema (see inventory_api.init_db)
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

import psycopg2
from psycopg2 import pool, sql
from psycopg2.extras import RealDictCursor
from fastapi import Request
from sqlalchemy.orm import declarative_base

from .exceptions import StorageError

logger = logging.getLogger(__name__)

Query = Union[str, sql.Composable]
Params = Optional[Union[Sequence[Any], Dict[str, Any]]]


# ============================================================================
# SQLAlchemy Configuration (schema definitions only)
# ============================================================================

Base = declarative_base()


# ============================================================================
# psycopg2 Connection Pool (for raw SQL queries)
# ============================================================================

def _error_message(error: Exception) -> str:
    """Driver messages carry trailing newlines and DETAIL lines; keep the first line."""
    message = str(error).strip()
    return message.splitlines()[0] if message else type(error).__name__


class Database:
    """
    Pooled PostgreSQL gateway

    Opened once at startup and closed at shutdown. Every call borrows a
    connection, runs a single statement, commits (or rolls back on error)
    and hands the connection back. Rows come back as plain dicts.

    Example:
        db = Database(settings.DATABASE_URL)
        db.open()
        rows = db.fetch_all("SELECT * FROM suppliers")
        db.close()
    """

    def __init__(self, dsn: str, min_connections: int = 1, max_connections: int = 10):
        self.dsn = dsn
        self.min_connections = min_connections
        self.max_connections = max_connections
        self._pool: Optional[pool.ThreadedConnectionPool] = None
        # ThreadedConnectionPool raises instead of waiting when empty
        self._slots = threading.BoundedSemaphore(max_connections)

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self, max_retries: int = 3, retry_delay: float = 1.0) -> None:
        """
        Create the connection pool, retrying on connection failures

        Args:
            max_retries: Maximum number of attempts (default: 3)
            retry_delay: Initial delay between attempts in seconds, doubled each time

        Raises:
            StorageError: If every attempt fails
        """
        if self._pool is not None:
            return

        attempts = max(1, max_retries)
        last_error: Optional[psycopg2.Error] = None

        for attempt in range(1, attempts + 1):
            try:
                logger.debug(f"Opening database pool, attempt {attempt}/{attempts}")
                self._pool = pool.ThreadedConnectionPool(
                    self.min_connections,
                    self.max_connections,
                    self.dsn,
                    cursor_factory=RealDictCursor,
                )
                logger.info(
                    f"Database pool opened ({self.min_connections}-{self.max_connections} connections)"
                )
                return

            except psycopg2.OperationalError as e:
                last_error = e
                logger.warning(f"Connection error on attempt {attempt}/{attempts}: {_error_message(e)}")

                if attempt < attempts:
                    delay = retry_delay * (2 ** (attempt - 1))
                    logger.info(f"Retrying in {delay:.2f} seconds...")
                    time.sleep(delay)

        logger.error(f"All {attempts} connection attempts failed")
        raise StorageError(_error_message(last_error)) from last_error

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database pool closed")

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """
        Borrow a pooled connection for the duration of the block

        Commits when the block exits cleanly, rolls back otherwise. Blocks
        while every connection is lent out.
        """
        if self._pool is None:
            raise StorageError("Database pool not initialized. Call open() first.")

        with self._slots:
            try:
                conn = self._pool.getconn()
            except psycopg2.Error as e:
                raise StorageError(_error_message(e)) from e

            try:
                yield conn
                conn.commit()
            except Exception:
                if not conn.closed:
                    conn.rollback()
                raise
            finally:
                self._pool.putconn(conn, close=bool(conn.closed))

    def _run(self, query: Query, params: Params, fetch: Optional[str]) -> Any:
        try:
            with self.connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute(query, params)
                    if fetch == "all":
                        return [dict(row) for row in cursor.fetchall()]
                    if fetch == "one":
                        row = cursor.fetchone()
                        return dict(row) if row is not None else None
                    return cursor.rowcount
        except (psycopg2.Error, ValueError) as e:
            # ValueError: values psycopg2 cannot adapt, e.g. strings containing NUL
            message = _error_message(e)
            logger.error(f"Database error: {message}")
            raise StorageError(message) from e

    def fetch_all(self, query: Query, params: Params = None) -> List[Dict[str, Any]]:
        """Run a statement and return every row as a dict."""
        return self._run(query, params, "all")

    def fetch_one(self, query: Query, params: Params = None) -> Optional[Dict[str, Any]]:
        """Run a statement and return the first row, or None."""
        return self._run(query, params, "one")

    def execute(self, query: Query, params: Params = None) -> int:
        """Run a statement that returns no rows; gives the affected row count."""
        return self._run(query, params, None)

    def ping(self) -> None:
        """Round trip a trivial query; raises StorageError when unreachable."""
        self.fetch_one("SELECT 1 AS ok")


def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the process-wide Database

    Usage:
        @router.get("")
        def list_items(db: Database = Depends(get_database)):
            ...
    """
    return request.app.state.database
