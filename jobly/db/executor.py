"""
executor.py
- Purpose: The one seam between repositories and the database.
- Repositories write SQL with 1-based positional placeholders ($1, $2, ...)
  and hand over a parallel sequence of values. We bind them as named
  parameters so values never land in the SQL text.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

_POSITIONAL = re.compile(r"\$(\d+)")


def to_named_binds(sql: str, params: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite `$N` placeholders to `:pN` and key the values accordingly."""
    named_sql = _POSITIONAL.sub(lambda m: f":p{m.group(1)}", sql)
    binds = {f"p{idx}": value for idx, value in enumerate(params, start=1)}
    return named_sql, binds


class QueryExecutor:
    def __init__(self, db: Session):
        self.db = db

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        named_sql, binds = to_named_binds(sql, params)
        result = self.db.execute(text(named_sql), binds)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings()]

    def commit(self) -> None:
        self.db.commit()
