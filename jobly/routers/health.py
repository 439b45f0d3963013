from fastapi import APIRouter, Depends

from jobly.api.deps import get_executor
from jobly.db.executor import QueryExecutor

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/db/health")
def db_health(executor: QueryExecutor = Depends(get_executor)):
    """Round trip through the same executor the repositories use."""
    executor.query("SELECT 1")
    return {"status": "ok", "db": "connected"}
