import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import psycopg2
from psycopg2.extras import RealDictCursor

from db.connection import get_db_connection, resolve_database_url
from db.query_builder import build_query_with_params, normalize_query

logger = logging.getLogger("bookshelf-lambda")


class QueryExecutor:
    """
    Runs SQL against the books database for a single invocation.

    Statements with parameters are turned into literal SQL by
    build_query_with_params and executed without driver-side binding.
    With no connection string the executor runs in degraded mode and every
    query returns an empty list.
    """

    def __init__(
        self,
        database_url: Optional[str],
        connect: Callable[[str], Any] = get_db_connection,
    ):
        self.database_url = (database_url or "").strip()
        self._connect = connect
        self._conn = None

    @property
    def configured(self) -> bool:
        return bool(self.database_url)

    def query(self, text: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """
        Execute a statement and return its rows as dicts.

        Args:
            text (str): SQL text, optionally with $N placeholders
            params (Sequence): values for the placeholders

        Returns:
            list: one dict per row, empty for statements without a result set
        """
        if not self.configured:
            logger.info(f"No database connection configured, skipping query: {normalize_query(text)}")
            return []

        statement = normalize_query(text)
        if params:
            statement = build_query_with_params(statement, params)

        try:
            conn = self._connection()
        except psycopg2.OperationalError as e:
            logger.error(f"Database unreachable, returning no rows: {e}")
            return []

        try:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                # No argument tuple: psycopg2 must not touch the literal SQL
                cur.execute(statement)
                if cur.description is None:
                    return []
                return [dict(row) for row in cur.fetchall()]
        except Exception as e:
            logger.error(f"Query error: {normalize_query(text)} | {e}")
            raise

    def close(self) -> None:
        """Release the connection if one was opened."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()

    def _connection(self):
        if self._conn is None:
            self._conn = self._connect(self.database_url)
        return self._conn


def open_executor() -> QueryExecutor:
    """Build the executor for one invocation from the environment."""
    return QueryExecutor(resolve_database_url())
