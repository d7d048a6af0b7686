# server/models/column.py

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from . import Base, utcnow


class BoardColumn(Base):
    """
    A column of a project board. `order` ranks it among the project's
    columns; gaps and ties are allowed, reads sort by (order, id).
    """
    __tablename__ = "columns"
    __table_args__ = (
        Index("ix_columns_project_order", "project_id", "order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id"), index=True, nullable=False)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
