"""
job/write.py
- Purpose: Write-side DB operations for Job.
- Design: No business logic. Ids are assigned by the store, never by callers.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jobly.core.errors import not_found
from jobly.db.executor import QueryExecutor
from jobly.db.sql import sql_for_partial_update
from jobly.repos.job.read import JOB_COLUMNS, to_job

logger = logging.getLogger("jobly.repos.job")

JOB_RENAMES = {
    "companyHandle": "company_handle",
}


class JobWriteRepo:
    def __init__(self, db: QueryExecutor):
        self.db = db

    def create(
        self,
        *,
        title: str,
        company_handle: str,
        salary: int | None = None,
        equity: Any = None,
    ) -> dict:
        """Insert a job and return the stored row (including its new id)."""
        rows = self.db.query(
            f"""INSERT INTO jobs
                (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [title, salary, equity, company_handle],
        )
        self.db.commit()
        job = to_job(rows[0])
        logger.info("job.created", extra={"job_id": job["id"], "handle": company_handle})
        return job

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict:
        """
        Partial update: only keys present in `data` change.

        `data` uses the API field names (title, salary, equity, companyHandle).
        Bad request if empty, not found if no such job.
        """
        set_cols, values = sql_for_partial_update(data, JOB_RENAMES)
        id_idx = f"${len(values) + 1}"

        rows = self.db.query(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_idx}
                RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        )
        if not rows:
            raise not_found(f"No job with id: {job_id}")

        self.db.commit()
        logger.info("job.updated", extra={"job_id": job_id, "fields": list(data)})
        return to_job(rows[0])

    def remove(self, job_id: int) -> None:
        """Delete a job; not found iff no row was deleted."""
        rows = self.db.query("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
        if not rows:
            raise not_found(f"No job with id: {job_id}")

        self.db.commit()
        logger.info("job.removed", extra={"job_id": job_id})
