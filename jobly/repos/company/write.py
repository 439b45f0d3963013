"""
company/write.py
- Purpose: Write-side DB operations for Company.
- Design: No business logic. Only persistence, existence checks and mapping.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jobly.core.errors import bad_request, not_found
from jobly.core.error_reasons import ErrorReason
from jobly.db.executor import QueryExecutor
from jobly.db.sql import sql_for_partial_update
from jobly.repos.company.read import COMPANY_COLUMNS

logger = logging.getLogger("jobly.repos.company")

COMPANY_RENAMES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyWriteRepo:
    def __init__(self, db: QueryExecutor):
        self.db = db

    def create(
        self,
        *,
        handle: str,
        name: str,
        description: str,
        num_employees: int | None = None,
        logo_url: str | None = None,
    ) -> dict:
        """Insert a company; bad request if the handle is taken."""
        duplicate = self.db.query("SELECT handle FROM companies WHERE handle = $1", [handle])
        if duplicate:
            raise bad_request(f"Duplicate company: {handle}", reason=ErrorReason.ALREADY_EXISTS)

        rows = self.db.query(
            f"""INSERT INTO companies
                (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [handle, name, description, num_employees, logo_url],
        )
        self.db.commit()
        logger.info("company.created", extra={"handle": handle})
        return rows[0]

    def update(self, handle: str, data: Mapping[str, Any]) -> dict:
        """
        Partial update: only keys present in `data` change.

        `data` uses the API field names (name, description, numEmployees,
        logoUrl). Bad request if empty, not found if no such company.
        """
        set_cols, values = sql_for_partial_update(data, COMPANY_RENAMES)
        handle_idx = f"${len(values) + 1}"

        rows = self.db.query(
            f"""UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        )
        if not rows:
            raise not_found(f"No company: {handle}")

        self.db.commit()
        logger.info("company.updated", extra={"handle": handle, "fields": list(data)})
        return rows[0]

    def remove(self, handle: str) -> None:
        """Delete a company (its jobs cascade in the store); not found if absent."""
        rows = self.db.query("DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
        if not rows:
            raise not_found(f"No company: {handle}")

        self.db.commit()
        logger.info("company.removed", extra={"handle": handle})
