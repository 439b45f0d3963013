"""
job/read.py
- Purpose: Read-side DB operations for Job (search + detail).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from jobly.core.errors import bad_request, not_found
from jobly.core.error_reasons import ErrorReason
from jobly.db.executor import QueryExecutor
from jobly.db.filters import Predicate, build_filtered_query, contains

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Evaluated in this order; it fixes $N numbering.
# has_equity only filters when truthy: False means "don't care", not "no equity".
JOB_FILTERS = (
    Predicate("min_salary", "salary", ">="),
    Predicate("has_equity", "equity", ">", transform=lambda _: 0, when=bool),
    Predicate("title", "title", "ILIKE", transform=contains),
)


def format_equity(value: Any) -> str | None:
    """NUMERIC comes back as Decimal; the API exposes equity as a plain decimal string."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        # Fixed-point: str() would give "1E-7" for 0.0000001.
        return format(value, "f")
    return str(value)


def to_job(row: Mapping[str, Any]) -> dict:
    return {**row, "equity": format_equity(row.get("equity"))}


def build_job_search(filters: Mapping[str, Any] | None = None) -> tuple[str, list[Any]]:
    """
    Build the job search query.

    Recognized filters: min_salary, has_equity, title (substring,
    case-insensitive). Raises bad request when min_salary <= 0.
    """
    filters = filters or {}
    min_salary = filters.get("min_salary")
    if min_salary is not None and min_salary <= 0:
        raise bad_request("Salary must be greater than 0!", reason=ErrorReason.INVALID_FILTER)

    return build_filtered_query(
        f"SELECT {JOB_COLUMNS} FROM jobs",
        JOB_FILTERS,
        filters,
        order_by="title",
    )


class JobReadRepo:
    def __init__(self, db: QueryExecutor):
        self.db = db

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[dict]:
        sql, params = build_job_search(filters)
        return [to_job(row) for row in self.db.query(sql, params)]

    def get(self, job_id: int) -> dict:
        rows = self.db.query(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
        if not rows:
            raise not_found(f"No job with id: {job_id}")
        return to_job(rows[0])
