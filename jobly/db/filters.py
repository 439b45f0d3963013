"""
filters.py
- Purpose: Assemble optional search filters into a parameterized WHERE clause.
- Design: Each entity declares an ordered list of Predicate descriptors. The
  order fixes placeholder numbering, so the generated SQL is reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence


def contains(value: Any) -> str:
    """Wrap a value for a case-insensitive substring match."""
    return f"%{value}%"


@dataclass(frozen=True)
class Predicate:
    key: str
    column: str
    op: str
    # Maps the supplied filter value to the bound parameter.
    transform: Callable[[Any], Any] | None = None
    # Extra gate on the supplied value; None means "any non-None value".
    when: Callable[[Any], bool] | None = None

    def applies(self, filters: Mapping[str, Any]) -> bool:
        value = filters.get(self.key)
        if value is None:
            return False
        return self.when(value) if self.when is not None else True

    def param(self, value: Any) -> Any:
        return self.transform(value) if self.transform is not None else value


def build_filtered_query(
    base_sql: str,
    predicates: Sequence[Predicate],
    filters: Mapping[str, Any] | None,
    *,
    order_by: str,
) -> tuple[str, list[Any]]:
    """
    Append WHERE (only if some filter applies) and ORDER BY to `base_sql`.

    Returns (sql, params); every filter value travels in `params`.
    """
    filters = filters or {}
    where_expressions: list[str] = []
    query_values: list[Any] = []

    for pred in predicates:
        if not pred.applies(filters):
            continue
        query_values.append(pred.param(filters[pred.key]))
        where_expressions.append(f"{pred.column} {pred.op} ${len(query_values)}")

    sql = base_sql
    if where_expressions:
        sql += " WHERE " + " AND ".join(where_expressions)
    sql += f" ORDER BY {order_by}"
    return sql, query_values
