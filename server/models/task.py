# server/models/task.py

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from . import Base, utcnow


class Task(Base):
    """
    A card inside a column. `project_id` duplicates the column's project so
    ownership checks need a single lookup; it must always match the column.
    """
    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_project_column_order", "project_id", "column_id", "order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, default="")
    due_date = Column(DateTime, nullable=True, index=True)
    column_id = Column(Integer, ForeignKey("columns.id"), index=True, nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id"), index=True, nullable=False)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    @property
    def is_overdue(self) -> bool:
        if self.due_date is None:
            return False
        return utcnow() > self.due_date
