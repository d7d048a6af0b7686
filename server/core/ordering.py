# server/core/ordering.py

"""
Ordering engine for board columns and tasks.

Siblings are columns sharing a project or tasks sharing a column. Their
`order` values may have gaps and ties; every read sorts by (order, id) so
ties fall back to insertion sequence. Nothing here commits: the caller owns
the transaction and commits once all writes for a request are staged.
"""

import logging
from typing import Iterable, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from core.errors import ParentMismatchError, ValidationError
from models import BoardColumn, Task


logger = logging.getLogger(__name__)


def _parent_attr(model):
    if model is BoardColumn:
        return BoardColumn.project_id
    if model is Task:
        return Task.column_id
    raise TypeError(f"{model!r} has no ordered parent")


def next_order(db: Session, model, parent_id: int) -> int:
    """
    Order for a new last sibling: max existing order + 1, or 0 for an empty
    parent. Always re-queried, never cached.
    """
    current_max = (
        db.query(func.max(model.order))
        .filter(_parent_attr(model) == parent_id)
        .scalar()
    )
    return 0 if current_max is None else current_max + 1


def siblings(db: Session, model, parent_id: int) -> list:
    return (
        db.query(model)
        .filter(_parent_attr(model) == parent_id)
        .order_by(model.order.asc(), model.id.asc())
        .all()
    )


def reorder(db: Session, model, parent_id: int, items: Iterable[tuple[int, int]]) -> list:
    """
    Apply a batch of (id, new_order) pairs under one parent.

    Every id is validated before anything is written, so a bad entry leaves
    all siblings untouched. Returns the entities that were updated.
    """
    items = list(items)
    if not items:
        return []

    ids = [entity_id for entity_id, _ in items]
    if len(set(ids)) != len(ids):
        raise ValidationError("Duplicate ids in reorder list")

    found = {e.id: e for e in db.query(model).filter(model.id.in_(ids)).all()}
    parent_name = _parent_attr(model).key
    for entity_id in ids:
        entity = found.get(entity_id)
        # unknown ids and ids under another parent get the same answer
        if entity is None or getattr(entity, parent_name) != parent_id:
            raise ParentMismatchError(
                f"{_label(model)} {entity_id} does not belong to {parent_name.replace('_id', '')} {parent_id}"
            )

    for entity_id, new_order in items:
        found[entity_id].order = new_order

    db.flush()
    return [found[entity_id] for entity_id in ids]


def move_task(db: Session, task: Task, column: BoardColumn, order: Optional[int] = None) -> Task:
    """
    Reparent a task into `column` at `order`.

    The target column must live in the task's project. Siblings left behind
    and siblings at the target keep their order values. Without an order the
    task is appended to the target, or keeps its place if it is already there.
    """
    if column.project_id != task.project_id:
        raise ParentMismatchError("Target column belongs to a different project")

    if order is None:
        if column.id == task.column_id:
            return task
        order = next_order(db, Task, column.id)

    if column.id == task.column_id and order == task.order:
        return task

    logger.info(f"Moving task {task.id} from column {task.column_id} to column {column.id} at order {order}")
    task.column_id = column.id
    task.order = order
    db.flush()
    return task


def move_column(db: Session, column: BoardColumn, order: int) -> BoardColumn:
    """Set a column's rank within its project without renumbering siblings."""
    if column.order != order:
        column.order = order
        db.flush()
    return column


def _label(model) -> str:
    return "Column" if model is BoardColumn else "Task"
