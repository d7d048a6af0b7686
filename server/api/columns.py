# server/api/columns.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.auth import get_current_user
from api.schemas import CreateColumnRequest, UpdateColumnRequest, ReorderColumnsRequest
from core.cascade import delete_column as cascade_delete_column
from core.ordering import next_order, siblings, reorder, move_column
from core.ownership import resolve_owned_project, resolve_owned_column
from core.state import parent_lock, discard_lock
from core.utils import serialize_column
from database import get_db
from models import BoardColumn


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_column(req: CreateColumnRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, req.project_id)
    with parent_lock("project", project.id):
        column = BoardColumn(
            name=req.name,
            project_id=project.id,
            order=next_order(db, BoardColumn, project.id)
        )
        db.add(column)
        db.commit()
    return {"success": True, "message": "Column created", "data": serialize_column(column)}


@router.get("/project/{project_id}")
def list_columns(project_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, project_id)
    return {"success": True, "data": [serialize_column(c) for c in siblings(db, BoardColumn, project.id)]}


# Registered before /{column_id} so "reorder" is never read as an id
@router.put("/reorder")
def reorder_columns(req: ReorderColumnsRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    project = resolve_owned_project(db, current_user, req.project_id)
    with parent_lock("project", project.id):
        reorder(db, BoardColumn, project.id, [(item.id, item.order) for item in req.columns])
        db.commit()
    return {
        "success": True,
        "message": "Columns reordered",
        "data": [serialize_column(c) for c in siblings(db, BoardColumn, project.id)]
    }


@router.put("/{column_id}")
def update_column(column_id: int, req: UpdateColumnRequest, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    column, _ = resolve_owned_column(db, current_user, column_id)
    if req.name is not None:
        column.name = req.name
    if req.order is not None:
        move_column(db, column, req.order)
    db.commit()
    return {"success": True, "message": "Column updated", "data": serialize_column(column)}


@router.delete("/{column_id}")
def delete_column(column_id: int, current_user: int = Depends(get_current_user), db: Session = Depends(get_db)):
    column, _ = resolve_owned_column(db, current_user, column_id)
    removed = cascade_delete_column(db, column)
    db.commit()
    discard_lock("column", column_id)
    return {"success": True, "message": "Column deleted", "data": removed}
