from typing import Generator

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from jobly.core.errors import bad_request
from jobly.db.executor import QueryExecutor
from jobly.db.session import SessionLocal
from jobly.repos.company.read import CompanyReadRepo
from jobly.repos.company.write import CompanyWriteRepo
from jobly.repos.job.read import JobReadRepo
from jobly.repos.job.write import JobWriteRepo
from jobly.schemas.company import CompanySearch
from jobly.schemas.job import JobSearch


def get_db() -> Generator[Session, None, None]:
    """
    Yields a DB session per request.
    Ensures the session is closed even on exceptions (uncommitted work is rolled back).
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_executor(db: Session = Depends(get_db)) -> QueryExecutor:
    return QueryExecutor(db)


def get_company_read(executor: QueryExecutor = Depends(get_executor)) -> CompanyReadRepo:
    return CompanyReadRepo(executor)


def get_company_write(executor: QueryExecutor = Depends(get_executor)) -> CompanyWriteRepo:
    return CompanyWriteRepo(executor)


def get_job_read(executor: QueryExecutor = Depends(get_executor)) -> JobReadRepo:
    return JobReadRepo(executor)


def get_job_write(executor: QueryExecutor = Depends(get_executor)) -> JobWriteRepo:
    return JobWriteRepo(executor)


def _search_filters(request: Request, model: type[BaseModel]) -> dict:
    """
    Validate the query string against `model` (unknown params rejected) and
    return the filters that were supplied, keyed by attribute name.
    """
    try:
        search = model.model_validate(dict(request.query_params))
    except ValidationError as e:
        errors = [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in e.errors()]
        raise bad_request(
            "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in errors),
            details={"errors": errors},
        )
    return search.model_dump(exclude_none=True)


def get_company_filters(request: Request) -> dict:
    return _search_filters(request, CompanySearch)


def get_job_filters(request: Request) -> dict:
    return _search_filters(request, JobSearch)
