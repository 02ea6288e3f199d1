"""Column endpoints, including the batched column reorder."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tasky.server.api._common import transaction
from tasky.server.auth import current_user, get_owned_board, get_owned_column
from tasky.server.database import get_db
from tasky.server.models import BoardColumn, User
from tasky.server.ordering import append_position, renumber_columns, reorder_columns
from tasky.server.schemas import ColumnCreate, ColumnOut, ColumnReorder, ColumnUpdate, Ok

router = APIRouter(tags=["columns"])


@router.post("/api/boards/{board_id}/columns", response_model=ColumnOut, status_code=status.HTTP_201_CREATED)
def create_column(
    board_id: str,
    payload: ColumnCreate,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    board = get_owned_board(db, board_id, user)
    column = BoardColumn(name=payload.name, board_id=board.id)
    with transaction(db, "Failed to create column"):
        column.position = append_position(db, BoardColumn, board_id=board.id)
        db.add(column)
    db.refresh(column)
    return column


@router.post("/api/columns/reorder", response_model=Ok)
def reorder(payload: ColumnReorder, db: Session = Depends(get_db), user: User = Depends(current_user)):
    board = get_owned_board(db, payload.board_id, user)
    with transaction(db, "Failed to reorder columns"):
        reorder_columns(db, board, payload.columns)
    return Ok()


@router.patch("/api/columns/{column_id}", response_model=ColumnOut)
def update_column(
    column_id: str,
    payload: ColumnUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    column = get_owned_column(db, column_id, user)
    with transaction(db, "Failed to update column"):
        if payload.name is not None:
            column.name = payload.name
    db.refresh(column)
    return column


@router.delete("/api/columns/{column_id}", response_model=Ok)
def delete_column(column_id: str, db: Session = Depends(get_db), user: User = Depends(current_user)):
    column = get_owned_column(db, column_id, user)
    with transaction(db, "Failed to delete column"):
        board_id = column.board_id
        db.delete(column)
        renumber_columns(db, board_id, exclude=[column.id])
    return Ok()
