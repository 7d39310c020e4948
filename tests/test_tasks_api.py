from datetime import date

import pytest


def test_list_empty_store_returns_empty_array(client):
    response = client.get("/tasks")
    assert response.status_code == 200
    assert response.json() == []


def test_fresh_process_scenario(seeded_client):
    today = date.today().isoformat()

    tasks = seeded_client.get("/tasks").json()
    assert [task["id"] for task in tasks] == [1, 2]
    assert tasks[0] == {
        "id": 1,
        "text": "Learn Go",
        "completed": False,
        "status": "todo",
        "startDate": today,
        "endDate": "",
    }
    assert tasks[1]["status"] == "done"
    assert tasks[1]["endDate"] == today

    response = seeded_client.post("/tasks", json={"text": "Buy milk"})
    assert response.status_code == 201
    assert response.json() == {
        "id": 3,
        "text": "Buy milk",
        "completed": False,
        "status": "todo",
        "startDate": "",
        "endDate": "",
    }

    response = seeded_client.put(
        "/tasks/3", json={"text": "Buy milk", "completed": True, "status": "done"}
    )
    assert response.status_code == 200
    body = response.json()
    assert (body["id"], body["completed"], body["status"]) == (3, True, "done")

    response = seeded_client.delete("/tasks/1")
    assert response.status_code == 204
    assert response.content == b""

    assert [task["id"] for task in seeded_client.get("/tasks").json()] == [2, 3]


def test_create_ignores_id_and_unknown_fields(client):
    response = client.post(
        "/tasks", json={"id": 50, "text": "a", "priority": "high", "status": "doing"}
    )
    assert response.status_code == 201
    assert response.json()["id"] == 1
    assert response.json()["status"] == "doing"


def test_create_accepts_null_fields(client):
    response = client.post(
        "/tasks", json={"text": None, "completed": None, "startDate": None}
    )
    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "text": "",
        "completed": False,
        "status": "todo",
        "startDate": "",
        "endDate": "",
    }


def test_create_accepts_null_document(client):
    response = client.post(
        "/tasks", content=b"null", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 201
    assert response.json()["status"] == "todo"


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"{not json",
        b"[]",
        b'"text"',
        b'{"completed": "yes"}',
        b'{"text": 5}',
        b'{"id": "abc"}',
    ],
)
def test_create_rejects_malformed_body(client, store, body):
    response = client.post(
        "/tasks", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text
    assert len(store) == 0


def test_update_replaces_whole_task(client):
    client.post(
        "/tasks",
        json={"text": "a", "status": "doing", "startDate": "2024-01-01", "endDate": "x"},
    )

    response = client.put("/tasks/1", json={"id": 9, "text": "b"})

    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "text": "b",
        "completed": False,
        "status": "",
        "startDate": "",
        "endDate": "",
    }
    assert client.get("/tasks").json() == [response.json()]


@pytest.mark.parametrize("method", ["put", "delete"])
@pytest.mark.parametrize("raw_id", ["abc", "1.5", "1x", " 1", "99999999999999999999"])
def test_invalid_task_id(client, method, raw_id):
    kwargs = {"json": {"text": "a"}} if method == "put" else {}
    response = getattr(client, method)(f"/tasks/{raw_id}", **kwargs)
    assert response.status_code == 400
    assert response.text == "Invalid task ID"


@pytest.mark.parametrize("method", ["put", "delete"])
def test_missing_task_is_not_found(client, store, method):
    client.post("/tasks", json={"text": "a"})
    kwargs = {"json": {"text": "b"}} if method == "put" else {}

    response = getattr(client, method)("/tasks/2", **kwargs)

    assert response.status_code == 404
    assert [task.text for task in store.list_tasks()] == ["a"]


def test_signed_ids_parse(client):
    client.post("/tasks", json={"text": "a"})
    assert client.put("/tasks/+1", json={"text": "b"}).status_code == 200
    assert client.delete("/tasks/-1").status_code == 404
    assert client.delete("/tasks/+1").status_code == 204


def test_update_missing_task_checked_before_body(client):
    response = client.put(
        "/tasks/5", content=b"{bad", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 404


def test_update_rejects_malformed_body(client):
    client.post("/tasks", json={"text": "a"})
    response = client.put(
        "/tasks/1", content=b"{bad", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert client.get("/tasks").json()[0]["text"] == "a"


def test_deleted_task_cannot_be_updated_or_deleted(client):
    client.post("/tasks", json={"text": "a"})
    assert client.delete("/tasks/1").status_code == 204

    assert client.get("/tasks").json() == []
    assert client.put("/tasks/1", json={"text": "b"}).status_code == 404
    assert client.delete("/tasks/1").status_code == 404
    assert client.post("/tasks", json={"text": "c"}).json()["id"] == 2


def test_cors_preflight_allows_configured_origin(client):
    response = client.options(
        "/tasks",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_cors_preflight_rejects_unknown_origin(client):
    response = client.options(
        "/tasks",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_date_fields_are_read_under_wire_names_only(client):
    response = client.post(
        "/tasks", json={"text": "a", "start_date": "2024-01-01", "end_date": "x"}
    )
    assert response.status_code == 201
    assert response.json()["startDate"] == ""
    assert response.json()["endDate"] == ""

    response = client.put(
        "/tasks/1", json={"startDate": "2024-02-02", "end_date": "ignored"}
    )
    assert response.json()["startDate"] == "2024-02-02"
    assert response.json()["endDate"] == ""


def test_task_serializes_id_first(client):
    created = client.post("/tasks", json={"text": "a"}).json()
    assert list(created) == ["id", "text", "completed", "status", "startDate", "endDate"]
    assert list(client.get("/tasks").json()[0])[0] == "id"


def test_create_reads_only_first_json_value(client):
    response = client.post(
        "/tasks",
        content=b'{"text": "a"} xyz',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 201
    assert response.json()["text"] == "a"


def test_update_reads_only_first_json_value(client):
    client.post("/tasks", json={"text": "a"})
    response = client.put(
        "/tasks/1",
        content=b'  {"text": "b"}{"text": "c"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["text"] == "b"
