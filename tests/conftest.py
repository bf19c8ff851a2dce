import datetime

import pytest

from db.query_builder import normalize_query
from settings import AppConfig
from shared.books import INSERT_FIELDS

STORE_TIMESTAMP = "2024-04-01 09:00:00+00"


class InMemoryBooksDb:
    """Stands in for QueryExecutor, answering the statements shared.books issues."""

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.statements = []
        self.closed = False

    def query(self, text, params=None):
        statement = normalize_query(text)
        params = list(params or [])
        self.statements.append((statement, params))

        if statement.startswith("INSERT INTO books"):
            row = dict(zip(INSERT_FIELDS, params))
            if isinstance(row["publication_date"], datetime.date):
                row["publication_date"] = row["publication_date"].isoformat()
            row.update(id=self.next_id, created_at=STORE_TIMESTAMP, updated_at=STORE_TIMESTAMP)
            self.rows[self.next_id] = row
            self.next_id += 1
            return [dict(row)]
        if statement.startswith("DELETE FROM books"):
            removed = self.rows.pop(params[0], None)
            return [{"id": params[0]}] if removed else []
        if statement.startswith("SELECT id FROM books"):
            return [{"id": params[0]}] if params[0] in self.rows else []
        if "WHERE id = $1" in statement:
            row = self.rows.get(params[0])
            return [dict(row)] if row else []
        if "ORDER BY id DESC" in statement:
            return [dict(self.rows[key]) for key in sorted(self.rows, reverse=True)]
        raise AssertionError(f"unexpected statement: {statement}")

    def close(self):
        self.closed = True

    def executed(self, prefix):
        return [s for s, _ in self.statements if s.startswith(prefix)]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setenv("BOOKSHELF_CONFIG_PATH", str(tmp_path / "app_config.json"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    for key in ("DEMO_MODE", "AI_SUMMARY_ENABLED", "DATABASE_URL_SSM_PARAM"):
        monkeypatch.delenv(f"BOOKSHELF_{key}", raising=False)
    AppConfig.reset()
    yield
    AppConfig.reset()


@pytest.fixture
def books_db():
    return InMemoryBooksDb()
