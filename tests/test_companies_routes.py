import pytest
from fastapi.testclient import TestClient

from jobly.api.deps import get_executor
from jobly.main import app


NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "DescNew",
    "numEmployees": 10,
    "logoUrl": "http://new.img",
}


# -- POST /companies

def test_create_ok_for_admin(client, executor, admin_headers):
    executor.push([], [dict(NEW_COMPANY)])

    resp = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)

    assert resp.status_code == 201, resp.text
    assert resp.json() == {"company": NEW_COMPANY}
    assert executor.calls[1][1] == ["new", "New", "DescNew", 10, "http://new.img"]


def test_create_unauth_for_anon(client, executor):
    resp = client.post("/companies", json=NEW_COMPANY)

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "UNAUTHORIZED"
    assert executor.calls == []


def test_create_forbidden_for_non_admin(client, executor, user_headers):
    resp = client.post("/companies", json=NEW_COMPANY, headers=user_headers)

    assert resp.status_code == 403
    assert executor.calls == []


def test_create_rejects_garbage_token(client):
    resp = client.post("/companies", json=NEW_COMPANY, headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_create_missing_data_is_400(client, executor, admin_headers):
    resp = client.post("/companies", json={"handle": "new", "numEmployees": 10}, headers=admin_headers)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"]["errors"]
    assert executor.calls == []


def test_create_invalid_data_is_400(client, admin_headers):
    resp = client.post("/companies", json={**NEW_COMPANY, "numEmployees": -1}, headers=admin_headers)
    assert resp.status_code == 400


def test_create_duplicate_is_400(client, executor, admin_headers):
    executor.push([{"handle": "new"}])

    resp = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"]["reason"] == "Resource already exists"


# -- GET /companies

def test_list_ok_for_anon(client, executor, company_row):
    executor.push([company_row])

    resp = client.get("/companies")

    assert resp.status_code == 200
    assert resp.json() == {"companies": [company_row]}
    assert "WHERE" not in executor.last_sql


def test_list_with_filters(client, executor):
    resp = client.get("/companies", params={"minEmployees": 2, "maxEmployees": 3, "name": "c"})

    assert resp.status_code == 200
    assert "WHERE num_employees >= $1 AND num_employees <= $2 AND name ILIKE $3" in executor.last_sql
    assert executor.last_params == [2, 3, "%c%"]


def test_list_min_over_max_is_400(client, executor):
    resp = client.get("/companies", params={"minEmployees": 3, "maxEmployees": 2})

    assert resp.status_code == 400
    assert executor.calls == []


@pytest.mark.parametrize("params", [{"nope": "x"}, {"minEmployees": "lots"}])
def test_list_bad_query_is_400(client, executor, params):
    resp = client.get("/companies", params=params)

    assert resp.status_code == 400
    assert executor.calls == []


def test_list_store_failure_is_500(executor):
    def broken(sql, params=()):
        raise RuntimeError("relation \"companies\" does not exist")

    executor.query = broken
    app.dependency_overrides[get_executor] = lambda: executor
    try:
        resp = TestClient(app, raise_server_exceptions=False).get("/companies")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"


# -- GET /companies/:handle

def test_get_with_jobs(client, executor, company_row):
    executor.push([dict(company_row)], [{"id": 1, "title": "J1", "salary": 1, "equity": "0.1"}])

    resp = client.get("/companies/c1")

    assert resp.status_code == 200
    assert resp.json() == {
        "company": {**company_row, "jobs": [{"id": 1, "title": "J1", "salary": 1, "equity": "0.1"}]}
    }


def test_get_not_found(client):
    resp = client.get("/companies/nope")

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


# -- PATCH /companies/:handle

def test_update_ok_for_admin(client, executor, admin_headers, company_row):
    executor.push([{**company_row, "name": "C1-new"}])

    resp = client.patch("/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["company"]["name"] == "C1-new"
    assert executor.last_params == ["C1-new", "c1"]


def test_update_sends_only_supplied_fields(client, executor, admin_headers, company_row):
    executor.push([company_row])

    client.patch("/companies/c1", json={"logoUrl": None, "numEmployees": 5}, headers=admin_headers)

    # Declaration order of the update schema, not request order.
    assert 'SET "num_employees"=$1, "logo_url"=$2 WHERE handle = $3' in executor.last_sql
    assert executor.last_params == [5, None, "c1"]


def test_update_unauth_for_anon(client):
    resp = client.patch("/companies/c1", json={"name": "C1-new"})
    assert resp.status_code == 401


def test_update_not_found(client, admin_headers):
    resp = client.patch("/companies/nope", json={"name": "new nope"}, headers=admin_headers)
    assert resp.status_code == 404


@pytest.mark.parametrize("body", [{"handle": "c1-new"}, {"logoUrl": 5}, {"name": None}])
def test_update_bad_body_is_400(client, executor, admin_headers, body):
    resp = client.patch("/companies/c1", json=body, headers=admin_headers)

    assert resp.status_code == 400
    assert executor.calls == []


def test_update_empty_body_is_400(client, executor, admin_headers):
    resp = client.patch("/companies/c1", json={}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"]["reason"] == "No data supplied"
    assert executor.calls == []


# -- DELETE /companies/:handle

def test_delete_ok_for_admin(client, executor, admin_headers):
    executor.push([{"handle": "c1"}])

    resp = client.delete("/companies/c1", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json() == {"deleted": "c1"}


def test_delete_unauth_for_anon(client, executor):
    resp = client.delete("/companies/c1")

    assert resp.status_code == 401
    assert executor.calls == []


def test_delete_not_found(client, admin_headers):
    resp = client.delete("/companies/nope", headers=admin_headers)
    assert resp.status_code == 404


def test_list_blank_name_is_no_filter(client, executor):
    resp = client.get("/companies?name=")

    assert resp.status_code == 200
    assert "WHERE" not in executor.last_sql
    assert executor.last_params == []
