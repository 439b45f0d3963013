"""
companies.py
- Purpose: API routes for companies.
- Design: Keep router thin. Shape validation here, persistence in repos.
"""

from fastapi import APIRouter, Depends, status

from jobly.api.deps import get_company_filters, get_company_read, get_company_write
from jobly.auth.deps import require_admin_token
from jobly.core.request_context import set_context
from jobly.repos.company.read import CompanyReadRepo
from jobly.repos.company.write import CompanyWriteRepo
from jobly.schemas.company import (
    CompanyDeletedResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
def create_company(payload: CompanyNew, repo: CompanyWriteRepo = Depends(get_company_write)):
    set_context(handle=payload.handle)
    company = repo.create(
        handle=payload.handle,
        name=payload.name,
        description=payload.description,
        num_employees=payload.num_employees,
        logo_url=payload.logo_url,
    )
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    filters: dict = Depends(get_company_filters),
    repo: CompanyReadRepo = Depends(get_company_read),
):
    """Optional filters: minEmployees, maxEmployees, name (case-insensitive, partial)."""
    return {"companies": repo.find_all(filters)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, repo: CompanyReadRepo = Depends(get_company_read)):
    return {"company": repo.get(handle)}


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(require_admin_token)])
def update_company(
    handle: str,
    payload: CompanyUpdate,
    repo: CompanyWriteRepo = Depends(get_company_write),
):
    return {"company": repo.update(handle, payload.changes())}


@router.delete("/{handle}", response_model=CompanyDeletedResponse, dependencies=[Depends(require_admin_token)])
def delete_company(handle: str, repo: CompanyWriteRepo = Depends(get_company_write)):
    repo.remove(handle)
    return {"deleted": handle}
