"""
job.py (schemas)
- Purpose: Request/response DTOs for jobs.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _CamelIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class JobNew(_CamelIn):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25, alias="companyHandle")


class JobUpdate(_CamelIn):
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
    company_handle: Optional[str] = Field(default=None, min_length=1, max_length=25, alias="companyHandle")

    @model_validator(mode="after")
    def _required_columns_not_null(self) -> "JobUpdate":
        for field in ("title", "company_handle"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client sent (explicit nulls included), keyed by API name."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class JobSearch(_CamelIn):
    min_salary: Optional[int] = Field(default=None, alias="minSalary")
    has_equity: Optional[bool] = Field(default=None, alias="hasEquity")
    title: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _blank_is_absent(cls, value):
        return value or None


class JobOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(alias="companyHandle")


class JobResponse(BaseModel):
    job: JobOut


class JobListResponse(BaseModel):
    jobs: List[JobOut]


class JobDeletedResponse(BaseModel):
    deleted: int
