# server/api/schemas.py

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from models import MAX_INTEGER


class CamelModel(BaseModel):
    """Request body base: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# -------------------------------
# Auth
# -------------------------------

class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# -------------------------------
# Projects
# -------------------------------

class CreateProjectRequest(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class UpdateProjectRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


# -------------------------------
# Columns
# -------------------------------

class CreateColumnRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    project_id: int = Field(..., ge=1, le=MAX_INTEGER)


class UpdateColumnRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    order: Optional[int] = Field(None, ge=0, le=MAX_INTEGER)


class OrderItem(CamelModel):
    id: int = Field(..., ge=1, le=MAX_INTEGER)
    order: int = Field(..., ge=0, le=MAX_INTEGER)


class ReorderColumnsRequest(CamelModel):
    project_id: int = Field(..., ge=1, le=MAX_INTEGER)
    columns: list[OrderItem]


# -------------------------------
# Tasks
# -------------------------------

class CreateTaskRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    due_date: Optional[datetime] = None
    column_id: int = Field(..., ge=1, le=MAX_INTEGER)
    project_id: int = Field(..., ge=1, le=MAX_INTEGER)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value):
        return _naive_utc(value)


class UpdateTaskRequest(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value):
        return _naive_utc(value)


class MoveTaskRequest(CamelModel):
    column_id: int = Field(..., ge=1, le=MAX_INTEGER)
    order: Optional[int] = Field(None, ge=0, le=MAX_INTEGER)


class ReorderTasksRequest(CamelModel):
    column_id: Optional[int] = Field(None, ge=1, le=MAX_INTEGER)
    tasks: list[OrderItem]
