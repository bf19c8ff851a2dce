import re
from datetime import date, datetime
from typing import Any, Sequence


def normalize_query(text: str) -> str:
    """Collapse a multi-line SQL statement onto one line."""
    return text.replace("\n", " ").strip()


def to_sql_literal(value: Any) -> str:
    """
    Render a single value as a SQL literal.

    Any value that can carry user-supplied text must go through the str branch,
    which is the only one that quotes and escapes.
    """
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    if isinstance(value, (datetime, date)):
        return "'" + value.isoformat() + "'"
    return str(value)


def build_query_with_params(text: str, params: Sequence[Any]) -> str:
    """
    Embed positional parameters ($1, $2, ...) into SQL text as literals.

    Placeholders are replaced in ascending order, one pass per parameter, and
    every occurrence of a token is replaced. $1 never matches inside $10.

    Args:
        text (str): SQL text containing $N placeholders
        params (Sequence): values, params[0] binds to $1

    Returns:
        str: SQL text ready to execute without driver-side binding
    """
    query = text
    for index, param in enumerate(params, start=1):
        replacement = to_sql_literal(param)
        placeholder = re.compile(r"\$%d(?!\d)" % index)
        query = placeholder.sub(lambda _match: replacement, query)
    return query
