"""
company/read.py
- Purpose: Read-side DB operations for Company (search + detail).
- Design: Keep query logic here for reuse and testability.
"""

from __future__ import annotations

from typing import Any, Mapping

from jobly.core.errors import bad_request, not_found
from jobly.core.error_reasons import ErrorReason
from jobly.db.executor import QueryExecutor
from jobly.db.filters import Predicate, build_filtered_query, contains
from jobly.repos.job.read import format_equity

COMPANY_COLUMNS = (
    'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

# Evaluated in this order; it fixes $N numbering.
COMPANY_FILTERS = (
    Predicate("min_employees", "num_employees", ">="),
    Predicate("max_employees", "num_employees", "<="),
    Predicate("name", "name", "ILIKE", transform=contains),
)


def build_company_search(filters: Mapping[str, Any] | None = None) -> tuple[str, list[Any]]:
    """
    Build the company search query.

    Recognized filters: min_employees, max_employees, name (substring,
    case-insensitive). Raises bad request when min_employees > max_employees.
    """
    filters = filters or {}
    min_employees = filters.get("min_employees")
    max_employees = filters.get("max_employees")
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise bad_request(
            "Min employees cannot be greater than max employees.",
            reason=ErrorReason.INVALID_FILTER,
        )

    return build_filtered_query(
        f"SELECT {COMPANY_COLUMNS} FROM companies",
        COMPANY_FILTERS,
        filters,
        order_by="name",
    )


class CompanyReadRepo:
    def __init__(self, db: QueryExecutor):
        self.db = db

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[dict]:
        sql, params = build_company_search(filters)
        return self.db.query(sql, params)

    def get(self, handle: str) -> dict:
        """Company by handle, with its jobs ordered by id. Not found if absent."""
        rows = self.db.query(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            [handle],
        )
        if not rows:
            raise not_found(f"No company: {handle}")

        company = rows[0]
        jobs = self.db.query(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        company["jobs"] = [{**job, "equity": format_equity(job["equity"])} for job in jobs]
        return company
