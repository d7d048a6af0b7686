# server/api/projects.py

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.auth import get_current_user
from api.schemas import CreateProjectRequest, UpdateProjectRequest
from core.cascade import delete_project as cascade_delete_project
from core.ordering import siblings
from core.ownership import resolve_owned_project
from core.state import discard_lock
from core.utils import serialize_project, serialize_column, serialize_task
from database import get_db
from models import Project, BoardColumn, Task


logger = logging.getLogger(__name__)

router = APIRouter()

# Seeded on every new project, in board order
DEFAULT_COLUMNS = ["To do", "In progress", "Done"]


@router.get("")
def list_projects(current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    projects = (
        db.query(Project)
        .filter(Project.user_id == current_user)
        .order_by(Project.created_at.desc(), Project.id.desc())
        .all()
    )
    return {"success": True, "data": [serialize_project(p) for p in projects]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_project(req: CreateProjectRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = Project(name=req.name, description=req.description, user_id=current_user)
    db.add(project)
    db.flush()

    columns = [
        BoardColumn(name=name, project_id=project.id, order=index)
        for index, name in enumerate(DEFAULT_COLUMNS)
    ]
    db.add_all(columns)
    db.commit()
    logger.info(f"User {current_user} created project {project.id}")

    return {
        "success": True,
        "data": {
            "project": serialize_project(project),
            "columns": [serialize_column(c) for c in columns],
        }
    }


@router.get("/{project_id}")
def get_project(project_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Returns the project with its columns and tasks, each sorted by
    (order, id) so the board renders in a stable sequence.
    """
    project = resolve_owned_project(db, current_user, project_id)
    columns = siblings(db, BoardColumn, project.id)
    tasks = (
        db.query(Task)
        .filter(Task.project_id == project.id)
        .order_by(Task.order.asc(), Task.id.asc())
        .all()
    )
    return {
        "success": True,
        "data": {
            "project": serialize_project(project),
            "columns": [serialize_column(c) for c in columns],
            "tasks": [serialize_task(t) for t in tasks],
        }
    }


@router.put("/{project_id}")
def update_project(project_id: int, req: UpdateProjectRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, project_id)
    changes = req.model_dump(exclude_unset=True)
    if changes.get("name") is not None:
        project.name = changes["name"]
    if "description" in changes:
        project.description = changes["description"]
    db.commit()
    return {"success": True, "data": serialize_project(project)}


@router.delete("/{project_id}")
def delete_project(project_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, project_id)
    column_ids = [c.id for c in db.query(BoardColumn.id).filter(BoardColumn.project_id == project.id)]
    removed = cascade_delete_project(db, project)
    db.commit()

    discard_lock("project", project_id)
    for column_id in column_ids:
        discard_lock("column", column_id)

    return {"success": True, "message": "Project deleted", "data": removed}
