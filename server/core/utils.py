# server/core/utils.py

from datetime import datetime
from typing import Optional

from models import User, Project, BoardColumn, Task


# -------------------------------
# Response Serialization
# -------------------------------

def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def serialize_user(user: User) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email}


def serialize_project(project: Project) -> dict:
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "userId": project.user_id,
        "createdAt": _iso(project.created_at),
        "updatedAt": _iso(project.updated_at),
    }


def serialize_column(column: BoardColumn) -> dict:
    return {
        "id": column.id,
        "name": column.name,
        "projectId": column.project_id,
        "order": column.order,
        "createdAt": _iso(column.created_at),
        "updatedAt": _iso(column.updated_at),
    }


def serialize_task(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "dueDate": _iso(task.due_date),
        "columnId": task.column_id,
        "projectId": task.project_id,
        "order": task.order,
        "isOverdue": task.is_overdue,
        "createdAt": _iso(task.created_at),
        "updatedAt": _iso(task.updated_at),
    }
