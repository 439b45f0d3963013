"""
db/base.py
- Purpose: Provide Base + table create/drop helpers for local runs and tests.
"""

from sqlalchemy.engine import Engine

from jobly.models.base import Base
import jobly.models  # noqa: F401  (ensures models are imported)

__all__ = ["Base", "create_tables", "drop_tables"]


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)


def drop_tables(engine: Engine) -> None:
    Base.metadata.drop_all(engine)
