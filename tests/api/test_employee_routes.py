"""Employee route tests — HTTP mapping, status codes, and request-id correlation.

Tests cover:
    - GET list / search / highestSalary / topTen return service results
    - Fixed paths are not captured by /{employee_id}
    - GET /{id} → 200 or 404 with structured error body
    - POST validates payload (400 with field details), 502 when creation fails
    - DELETE /{id} → deleted name, 404 when unresolved, 409 when delete fails
    - X-Request-Id echoed when supplied, generated otherwise

Design Decisions:
    - Fake store behind the real service: routes, handlers and service run
      together, only the upstream is replaced
"""

from employee_facade.core.errors import ErrorCategory

from tests.services.fake_store import make_employee


def _seed(fake_store):
    fake_store.employees = [
        make_employee(id="1", name="X", salary=10),
        make_employee(id="2", name="Y", salary=30),
        make_employee(id="3", name="Z", salary=20),
    ]


async def test_get_all_employees_uses_upstream_field_names(client, fake_store):
    fake_store.employees = [make_employee(id="id-123")]
    res = await client.get("/employees")
    assert res.status_code == 200
    body = res.json()
    assert body[0]["id"] == "id-123"
    assert body[0]["employee_name"] == "Bill Bob"
    assert body[0]["employee_salary"] == 89750


async def test_get_all_employees_degraded_upstream_is_empty(client):
    res = await client.get("/employees")
    assert res.status_code == 200
    assert res.json() == []


async def test_search(client, fake_store):
    _seed(fake_store)
    res = await client.get("/employees/search/y")
    assert [e["id"] for e in res.json()] == ["2"]


async def test_highest_salary(client, fake_store):
    _seed(fake_store)
    res = await client.get("/employees/highestSalary")
    assert res.status_code == 200
    assert res.json() == 30
    assert fake_store.calls_to("fetch_by_id") == []


async def test_top_ten(client, fake_store):
    _seed(fake_store)
    res = await client.get("/employees/topTenHighestEarningEmployeeNames")
    assert res.json() == ["Y", "Z", "X"]


async def test_get_by_id_found(client, fake_store):
    fake_store.by_id["id-123"] = make_employee(id="id-123")
    res = await client.get("/employees/id-123")
    assert res.status_code == 200
    assert res.json()["employee_email"] == "billBob@company.com"


async def test_get_by_id_absent_is_404(client):
    res = await client.get("/employees/missing")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "EMPLOYEE_NOT_FOUND"


async def test_create_employee(client, fake_store):
    fake_store.created = make_employee(id="new-id", name="Jill Jenkins")
    res = await client.post("/employees", json={
        "name": "Jill Jenkins", "salary": 139082, "age": 48, "title": "Financial Advisor",
    })
    assert res.status_code == 200
    assert res.json()["id"] == "new-id"
    assert fake_store.calls_to("create")[0][1].name == "Jill Jenkins"


async def test_create_employee_invalid_payload_is_400(client, fake_store):
    res = await client.post("/employees", json={
        "name": "Jill", "salary": 0, "age": 90, "title": "T",
    })
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == ErrorCategory.VALIDATION.value
    fields = {d["field"] for d in error["details"]}
    assert fields == {"body.salary", "body.age"}
    assert fake_store.calls_to("create") == []


async def test_create_employee_upstream_failure_is_502(client):
    res = await client.post("/employees", json={
        "name": "Jill", "salary": 1, "age": 30, "title": "T",
    })
    assert res.status_code == 502
    assert res.json()["error"]["code"] == "CREATION_FAILED"


async def test_delete_returns_deleted_name(client, fake_store):
    fake_store.by_id["id-123"] = make_employee(id="id-123", name="Bill Bob")
    fake_store.delete_results["Bill Bob"] = True
    res = await client.delete("/employees/id-123")
    assert res.status_code == 200
    assert res.json() == "Bill Bob"


async def test_delete_unresolved_is_404(client, fake_store):
    res = await client.delete("/employees/nope")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["employee_id"] == "nope"


async def test_delete_failed_is_409(client, fake_store):
    fake_store.by_id["id-123"] = make_employee(id="id-123", name="Bill Bob")
    res = await client.delete("/employees/id-123")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DELETE_FAILED"


async def test_request_id_echoed(client):
    res = await client.get("/employees", headers={"X-Request-Id": "req-42"})
    assert res.headers["X-Request-Id"] == "req-42"


async def test_request_id_generated_when_missing(client):
    res = await client.get("/employees")
    assert len(res.headers["X-Request-Id"]) == 36


async def test_top_ten_skips_nameless_top_earner(client, fake_store):
    fake_store.employees = [
        make_employee(id=str(i), name=f"E{i}", salary=i) for i in range(14)
    ] + [make_employee(id="anon", name=None, salary=1_000_000)]
    res = await client.get("/employees/topTenHighestEarningEmployeeNames")
    assert res.json() == [f"E{i}" for i in range(13, 3, -1)]
