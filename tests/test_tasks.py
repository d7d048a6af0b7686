"""
Tests for task endpoints: create, update, move, reorder, delete.
"""
import pytest


@pytest.fixture
def add_task(client, alice, board):
    def _add(title, column="To do", **extra):
        payload = {
            "title": title,
            "columnId": board["columns"][column]["id"],
            "projectId": board["project"]["id"],
            **extra,
        }
        response = client.post("/api/tasks", json=payload, headers=alice)
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _add


def test_create_task_appends_in_column(add_task):
    assert add_task("first")["order"] == 0
    assert add_task("second")["order"] == 1
    assert add_task("elsewhere", column="Done")["order"] == 0


def test_create_task_fields(add_task):
    task = add_task("with date", description="details", dueDate="2000-01-01T10:00:00Z")
    assert task["description"] == "details"
    assert task["dueDate"] == "2000-01-01T10:00:00"
    assert task["isOverdue"] is True

    plain = add_task("plain")
    assert plain["description"] == ""
    assert plain["dueDate"] is None
    assert plain["isOverdue"] is False


def test_create_task_requires_fields(client, alice, board):
    todo = board["columns"]["To do"]
    project_id = board["project"]["id"]
    for payload in (
        {"columnId": todo["id"], "projectId": project_id},
        {"title": "t", "projectId": project_id},
        {"title": "t", "columnId": todo["id"]},
    ):
        response = client.post("/api/tasks", json=payload, headers=alice)
        assert response.status_code == 400
        assert response.json()["success"] is False


def test_create_task_column_from_other_project(client, alice, board):
    other = client.post("/api/projects", json={"name": "Other"}, headers=alice).json()["data"]
    response = client.post(
        "/api/tasks",
        json={"title": "t", "columnId": other["columns"][0]["id"], "projectId": board["project"]["id"]},
        headers=alice,
    )
    assert response.status_code == 400


def test_create_task_in_foreign_project(client, bob, board):
    response = client.post(
        "/api/tasks",
        json={"title": "t", "columnId": board["columns"]["To do"]["id"], "projectId": board["project"]["id"]},
        headers=bob,
    )
    assert response.status_code == 403


def test_update_task_partial(client, alice, add_task):
    task = add_task("draft", description="keep", dueDate="2999-01-01T00:00:00")

    response = client.put(f"/api/tasks/{task['id']}", json={"title": "final"}, headers=alice)
    data = response.json()["data"]
    assert data["title"] == "final"
    assert data["description"] == "keep"
    assert data["isOverdue"] is False

    cleared = client.put(f"/api/tasks/{task['id']}", json={"dueDate": None}, headers=alice).json()["data"]
    assert cleared["dueDate"] is None
    assert cleared["title"] == "final"


def test_update_task_other_user(client, bob, add_task):
    task = add_task("private")
    assert client.put(f"/api/tasks/{task['id']}", json={"title": "mine"}, headers=bob).status_code == 403


def test_move_task_across_columns(client, alice, board, add_task):
    moved = add_task("moved")
    stays = add_task("stays")
    done = board["columns"]["Done"]

    response = client.put(f"/api/tasks/{moved['id']}/move", json={"columnId": done["id"], "order": 0}, headers=alice)
    assert response.status_code == 200
    assert response.json()["data"]["columnId"] == done["id"]
    assert response.json()["data"]["order"] == 0

    left = client.get(f"/api/tasks/column/{board['columns']['To do']['id']}", headers=alice).json()["data"]
    assert [(t["id"], t["order"]) for t in left] == [(stays["id"], 1)]


def test_move_task_without_order_appends(client, alice, board, add_task):
    add_task("already there", column="Done")
    task = add_task("incoming")
    response = client.put(
        f"/api/tasks/{task['id']}/move", json={"columnId": board["columns"]["Done"]["id"]}, headers=alice
    )
    assert response.json()["data"]["order"] == 1


def test_move_task_to_same_place_succeeds(client, alice, board, add_task):
    task = add_task("still")
    response = client.put(
        f"/api/tasks/{task['id']}/move",
        json={"columnId": board["columns"]["To do"]["id"], "order": task["order"]},
        headers=alice,
    )
    assert response.status_code == 200
    assert response.json()["data"]["order"] == task["order"]


def test_move_task_to_other_project_column_is_parent_mismatch(client, alice, add_task):
    task = add_task("stuck")
    other = client.post("/api/projects", json={"name": "Other"}, headers=alice).json()["data"]
    response = client.put(
        f"/api/tasks/{task['id']}/move", json={"columnId": other["columns"][0]["id"], "order": 0}, headers=alice
    )
    assert response.status_code == 400
    assert "project" in response.json()["message"]


def test_move_task_to_missing_column(client, alice, add_task):
    task = add_task("lost")
    response = client.put(f"/api/tasks/{task['id']}/move", json={"columnId": 9999, "order": 0}, headers=alice)
    assert response.status_code == 404


def test_move_task_other_user(client, bob, board, add_task):
    task = add_task("guarded")
    response = client.put(
        f"/api/tasks/{task['id']}/move", json={"columnId": board["columns"]["Done"]["id"]}, headers=bob
    )
    assert response.status_code == 403


def test_reorder_tasks(client, alice, board, add_task):
    a, b, c = add_task("a"), add_task("b"), add_task("c")
    payload = {"tasks": [{"id": c["id"], "order": 0}, {"id": a["id"], "order": 1}, {"id": b["id"], "order": 2}]}

    first = client.put("/api/tasks/reorder", json=payload, headers=alice)
    assert first.status_code == 200
    assert [t["title"] for t in first.json()["data"]] == ["c", "a", "b"]

    second = client.put("/api/tasks/reorder", json=payload, headers=alice)
    assert [t["title"] for t in second.json()["data"]] == ["c", "a", "b"]


def test_reorder_tasks_with_explicit_column(client, alice, board, add_task):
    a, b = add_task("a"), add_task("b")
    response = client.put(
        "/api/tasks/reorder",
        json={"columnId": board["columns"]["To do"]["id"], "tasks": [{"id": a["id"], "order": 5}]},
        headers=alice,
    )
    assert [t["title"] for t in response.json()["data"]] == ["b", "a"]


def test_reorder_tasks_mixed_columns_rejected(client, alice, board, add_task):
    a = add_task("a")
    d = add_task("d", column="Done")
    response = client.put(
        "/api/tasks/reorder",
        json={"tasks": [{"id": a["id"], "order": 3}, {"id": d["id"], "order": 4}]},
        headers=alice,
    )
    assert response.status_code == 400

    todo = client.get(f"/api/tasks/column/{board['columns']['To do']['id']}", headers=alice).json()["data"]
    assert todo[0]["order"] == 0


def test_reorder_tasks_empty(client, alice):
    response = client.put("/api/tasks/reorder", json={"tasks": []}, headers=alice)
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_reorder_tasks_other_user(client, bob, add_task):
    task = add_task("mine")
    response = client.put("/api/tasks/reorder", json={"tasks": [{"id": task["id"], "order": 4}]}, headers=bob)
    assert response.status_code == 403


def test_delete_task(client, alice, add_task):
    task = add_task("bye")
    assert client.delete(f"/api/tasks/{task['id']}", headers=alice).status_code == 200
    assert client.delete(f"/api/tasks/{task['id']}", headers=alice).status_code == 404
