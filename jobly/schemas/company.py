"""
company.py (schemas)
- Purpose: Request/response DTOs for companies.
- Design: Python attribute names are snake_case; JSON uses camelCase aliases.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _CamelIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class _CamelOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CompanyNew(_CamelIn):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: Optional[int] = Field(default=None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")


class CompanyUpdate(_CamelIn):
    """Every field optional; `handle` cannot change."""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")

    @model_validator(mode="after")
    def _required_columns_not_null(self) -> "CompanyUpdate":
        for field in ("name", "description"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client sent, keyed by API name."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class CompanySearch(_CamelIn):
    min_employees: Optional[int] = Field(default=None, ge=0, alias="minEmployees")
    max_employees: Optional[int] = Field(default=None, ge=0, alias="maxEmployees")
    name: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _blank_is_absent(cls, value):
        return value or None


class CompanyJob(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None


class CompanyOut(_CamelOut):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = Field(default=None, alias="numEmployees")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")


class CompanyDetailOut(CompanyOut):
    jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetailOut


class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]


class CompanyDeletedResponse(BaseModel):
    deleted: str
