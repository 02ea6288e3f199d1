"""Request and response bodies."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# --- boards ---


class BoardCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=120)
    description: Optional[str] = Field(None, max_length=1000)


class BoardUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=120)
    description: Optional[str] = Field(None, max_length=1000)
    is_archived: Optional[bool] = None


# --- columns ---


class ColumnCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)


class ColumnUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=80)


# --- tasks ---


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=140)
    description: Optional[str] = Field(None, max_length=2000)
    column_id: str = Field(..., min_length=1)
    due_date: Optional[datetime] = None


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=140)
    description: Optional[str] = Field(None, max_length=2000)
    due_date: Optional[datetime] = None
    column_id: Optional[str] = Field(None, min_length=1)
    position: Optional[int] = Field(None, ge=0, strict=True)
    assignee_id: Optional[str] = None


# --- comments ---


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


# --- reorder ---


class ColumnOrderItem(BaseModel):
    id: str = Field(..., min_length=1)
    position: int = Field(..., ge=0, strict=True)


class ColumnReorder(BaseModel):
    board_id: str = Field(..., min_length=1)
    columns: List[ColumnOrderItem] = Field(..., min_length=1)


class TaskOrderItem(BaseModel):
    id: str = Field(..., min_length=1)
    column_id: str = Field(..., min_length=1)
    position: int = Field(..., ge=0, strict=True)


class TaskReorder(BaseModel):
    board_id: str = Field(..., min_length=1)
    tasks: List[TaskOrderItem] = Field(..., min_length=1)


# --- responses ---


class Ok(BaseModel):
    ok: bool = True


class CommentOut(ORMModel):
    id: str
    content: str
    author_id: str
    task_id: str
    created_at: datetime


class TaskOut(ORMModel):
    id: str
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    position: int
    column_id: str
    board_id: str
    assignee_id: Optional[str]
    created_at: datetime
    updated_at: datetime
    comments: List[CommentOut] = []


class ColumnOut(ORMModel):
    id: str
    name: str
    position: int
    board_id: str
    created_at: datetime
    updated_at: datetime
    tasks: List[TaskOut] = []


class BoardSummary(ORMModel):
    id: str
    title: str
    description: Optional[str]
    owner_id: str
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class BoardOut(BoardSummary):
    columns: List[ColumnOut] = []
