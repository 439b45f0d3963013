"""
models package
- Purpose: Import all table models so Base.metadata knows every table.
"""

from jobly.models.company import Company
from jobly.models.job import Job

__all__ = [
    "Company",
    "Job",
]
