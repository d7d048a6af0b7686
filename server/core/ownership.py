# server/core/ownership.py

import logging
from sqlalchemy.orm import Session

from core.errors import NotFoundError, ForbiddenError
from models import Project, BoardColumn, Task, MAX_INTEGER


logger = logging.getLogger(__name__)


# -------------------------------
# Ownership Resolver
# -------------------------------
#
# One rule for every entity: NotFound when the entity or an ancestor does not
# exist, Forbidden when it exists under another user's project. Callers never
# get data back from a Forbidden lookup.

def _check_owner(project: Project, caller_id: int, entity: str, entity_id: int):
    if project.user_id != caller_id:
        logger.warning(f"User {caller_id} denied access to {entity} {entity_id}")
        raise ForbiddenError(f"You do not have access to this {entity}")


def _lookup(db: Session, model, entity_id: int):
    # ids the store can never hold are simply absent
    if not 1 <= entity_id <= MAX_INTEGER:
        return None
    return db.get(model, entity_id)


def resolve_owned_project(db: Session, caller_id: int, project_id: int) -> Project:
    project = _lookup(db, Project, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    _check_owner(project, caller_id, "project", project_id)
    return project


def resolve_owned_column(db: Session, caller_id: int, column_id: int) -> tuple[BoardColumn, Project]:
    column = _lookup(db, BoardColumn, column_id)
    if column is None:
        raise NotFoundError("Column not found")
    project = db.get(Project, column.project_id)
    if project is None:
        raise NotFoundError("Column not found")
    _check_owner(project, caller_id, "column", column_id)
    return column, project


def resolve_owned_task(db: Session, caller_id: int, task_id: int) -> tuple[Task, Project]:
    task = _lookup(db, Task, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    project = db.get(Project, task.project_id)
    if project is None:
        raise NotFoundError("Task not found")
    _check_owner(project, caller_id, "task", task_id)
    return task, project
