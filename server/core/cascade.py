# server/core/cascade.py

import logging
from sqlalchemy.orm import Session

from models import Project, BoardColumn, Task


logger = logging.getLogger(__name__)


# -------------------------------
# Cascade Delete
# -------------------------------
#
# Children go first so no column ever outlives its project, even mid-flush.
# The caller commits; a failure anywhere rolls the whole cascade back.

def delete_project(db: Session, project: Project) -> dict:
    tasks = db.query(Task).filter(Task.project_id == project.id).delete(synchronize_session=False)
    columns = db.query(BoardColumn).filter(BoardColumn.project_id == project.id).delete(synchronize_session=False)
    db.delete(project)
    db.flush()
    logger.info(f"Deleted project {project.id} with {columns} columns and {tasks} tasks")
    return {"columns": columns, "tasks": tasks}


def delete_column(db: Session, column: BoardColumn) -> dict:
    tasks = db.query(Task).filter(Task.column_id == column.id).delete(synchronize_session=False)
    db.delete(column)
    db.flush()
    logger.info(f"Deleted column {column.id} with {tasks} tasks")
    return {"tasks": tasks}


def delete_task(db: Session, task: Task):
    db.delete(task)
    db.flush()
