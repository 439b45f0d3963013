"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Sequence

import pytest
from fastapi.testclient import TestClient

from jobly.api.deps import get_executor
from jobly.auth.jwt import create_access_token
from jobly.core.config import settings
from jobly.main import app


class FakeExecutor:
    """
    Stands in for QueryExecutor. Each query() pops the next scripted result
    (an empty list once the script runs out) and records the normalized SQL.
    """

    def __init__(self, *results: list[dict]):
        self.results = list(results)
        self.calls: list[tuple[str, list[Any]]] = []
        self.commits = 0

    def push(self, *results: list[dict]) -> None:
        self.results.extend(results)

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        self.calls.append((" ".join(sql.split()), list(params)))
        return self.results.pop(0) if self.results else []

    def commit(self) -> None:
        self.commits += 1

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> list[Any]:
        return self.calls[-1][1]


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def client(executor):
    app.dependency_overrides[get_executor] = lambda: executor
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    token = create_access_token(subject=settings.ADMIN_USERNAME)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> dict:
    token = create_access_token(subject="u1")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def company_row() -> dict:
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


@pytest.fixture
def job_row() -> dict:
    return {
        "id": 7,
        "title": "J1",
        "salary": 100,
        "equity": "0.1",
        "companyHandle": "c1",
    }
