"""
Tests for cascade deletes across project → column → task.
"""
from core.cascade import delete_project, delete_column, delete_task
from models import Project, BoardColumn, Task


def _count(db, model, **filters):
    return db.query(model).filter_by(**filters).count()


def test_delete_project_removes_columns_and_tasks(db, seed):
    user = seed.user()
    doomed = seed.project(user, "doomed")
    kept = seed.project(user, "kept")
    for name in ("a", "b"):
        column = seed.column(doomed, name)
        seed.task(column, f"{name}-1")
        seed.task(column, f"{name}-2", order=1)
    survivor = seed.task(seed.column(kept), "survivor")

    removed = delete_project(db, doomed)
    db.commit()

    assert removed == {"columns": 2, "tasks": 4}
    assert db.get(Project, doomed.id) is None
    assert _count(db, BoardColumn, project_id=doomed.id) == 0
    assert _count(db, Task, project_id=doomed.id) == 0
    assert db.get(Task, survivor.id) is not None


def test_delete_empty_project(db, seed):
    project = seed.project(seed.user())
    assert delete_project(db, project) == {"columns": 0, "tasks": 0}
    db.commit()
    assert db.get(Project, project.id) is None


def test_delete_column_removes_only_its_tasks(db, seed):
    project = seed.project(seed.user())
    todo = seed.column(project, "todo", 0)
    done = seed.column(project, "done", 1)
    seed.task(todo, "a")
    seed.task(todo, "b", order=1)
    other = seed.task(done, "c")

    removed = delete_column(db, todo)
    db.commit()

    assert removed == {"tasks": 2}
    assert db.get(BoardColumn, todo.id) is None
    assert _count(db, Task, column_id=todo.id) == 0
    assert db.get(Task, other.id) is not None
    assert db.get(BoardColumn, done.id) is not None


def test_delete_task(db, seed):
    column = seed.column(seed.project(seed.user()))
    task = seed.task(column)
    delete_task(db, task)
    db.commit()
    assert _count(db, Task, column_id=column.id) == 0


def test_cascade_rolls_back_as_a_unit(db, seed):
    project = seed.project(seed.user())
    column = seed.column(project)
    seed.task(column)
    db.commit()

    delete_project(db, project)
    db.rollback()

    assert db.get(Project, project.id) is not None
    assert _count(db, BoardColumn, project_id=project.id) == 1
    assert _count(db, Task, project_id=project.id) == 1
