# server/api/tasks.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.auth import get_current_user
from api.schemas import CreateTaskRequest, UpdateTaskRequest, MoveTaskRequest, ReorderTasksRequest
from core.cascade import delete_task as cascade_delete_task
from core.errors import ParentMismatchError
from core.ordering import next_order, siblings, reorder, move_task as engine_move_task
from core.ownership import resolve_owned_project, resolve_owned_column, resolve_owned_task
from core.state import parent_lock
from core.utils import serialize_task
from database import get_db
from models import Task


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(req: CreateTaskRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, req.project_id)
    column, _ = resolve_owned_column(db, current_user, req.column_id)
    if column.project_id != project.id:
        raise ParentMismatchError("Column does not belong to the given project")

    with parent_lock("column", column.id):
        task = Task(
            title=req.title,
            description=req.description or "",
            due_date=req.due_date,
            column_id=column.id,
            project_id=project.id,
            order=next_order(db, Task, column.id)
        )
        db.add(task)
        db.commit()
    return {"success": True, "data": serialize_task(task)}


@router.get("/project/{project_id}")
def list_project_tasks(project_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, project_id)
    tasks = (
        db.query(Task)
        .filter(Task.project_id == project.id)
        .order_by(Task.order.asc(), Task.id.asc())
        .all()
    )
    return {"success": True, "data": [serialize_task(t) for t in tasks]}


@router.get("/column/{column_id}")
def list_column_tasks(column_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    column, _ = resolve_owned_column(db, current_user, column_id)
    return {"success": True, "data": [serialize_task(t) for t in siblings(db, Task, column.id)]}


# Registered before /{task_id} so "reorder" is never read as an id
@router.put("/reorder")
def reorder_tasks(req: ReorderTasksRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    if req.column_id is not None:
        column, _ = resolve_owned_column(db, current_user, req.column_id)
        column_id = column.id
    elif req.tasks:
        first, _ = resolve_owned_task(db, current_user, req.tasks[0].id)
        column_id = first.column_id
    else:
        return {"success": True, "message": "Nothing to reorder", "data": []}

    with parent_lock("column", column_id):
        reorder(db, Task, column_id, [(item.id, item.order) for item in req.tasks])
        db.commit()
    return {
        "success": True,
        "message": "Tasks reordered",
        "data": [serialize_task(t) for t in siblings(db, Task, column_id)]
    }


@router.put("/{task_id}/move")
def move_task(task_id: int, req: MoveTaskRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    task, _ = resolve_owned_task(db, current_user, task_id)
    column, _ = resolve_owned_column(db, current_user, req.column_id)
    with parent_lock("column", column.id):
        engine_move_task(db, task, column, req.order)
        db.commit()
    return {"success": True, "data": serialize_task(task)}


@router.put("/{task_id}")
def update_task(task_id: int, req: UpdateTaskRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    task, _ = resolve_owned_task(db, current_user, task_id)
    changes = req.model_dump(exclude_unset=True)
    if changes.get("title") is not None:
        task.title = changes["title"]
    if "description" in changes:
        task.description = changes["description"] or ""
    if "due_date" in changes:
        task.due_date = changes["due_date"]
    db.commit()
    return {"success": True, "data": serialize_task(task)}


@router.delete("/{task_id}")
def delete_task(task_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    task, _ = resolve_owned_task(db, current_user, task_id)
    cascade_delete_task(db, task)
    db.commit()
    return {"success": True, "message": "Task deleted"}
