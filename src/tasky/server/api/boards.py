"""Board endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from tasky.server.api._common import transaction
from tasky.server.auth import current_user, get_owned_board
from tasky.server.database import get_db
from tasky.server.models import Board, BoardColumn, User
from tasky.server.schemas import BoardCreate, BoardOut, BoardSummary, BoardUpdate, Ok

router = APIRouter(prefix="/api/boards", tags=["boards"])


@router.get("", response_model=List[BoardSummary])
def list_boards(db: Session = Depends(get_db), user: User = Depends(current_user)):
    return db.query(Board).filter(Board.owner_id == user.id).order_by(Board.updated_at.desc()).all()


@router.post("", response_model=BoardSummary, status_code=status.HTTP_201_CREATED)
def create_board(
    payload: BoardCreate,
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    board = Board(title=payload.title, description=payload.description, owner_id=user.id)
    with transaction(db, "Failed to create board"):
        db.add(board)
        for position, name in enumerate(request.app.state.settings.DEFAULT_COLUMNS):
            board.columns.append(BoardColumn(name=name, position=position))
    db.refresh(board)
    return board


@router.get("/{board_id}", response_model=BoardOut)
def get_board(board_id: str, db: Session = Depends(get_db), user: User = Depends(current_user)):
    return get_owned_board(db, board_id, user)


@router.patch("/{board_id}", response_model=BoardSummary)
def update_board(
    board_id: str,
    payload: BoardUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    board = get_owned_board(db, board_id, user)
    changes = payload.model_dump(exclude_unset=True)
    with transaction(db, "Failed to update board"):
        for key in ("title", "is_archived"):
            if changes.get(key) is not None:
                setattr(board, key, changes[key])
        if "description" in changes:
            board.description = changes["description"]
    db.refresh(board)
    return board


@router.delete("/{board_id}", response_model=Ok)
def delete_board(board_id: str, db: Session = Depends(get_db), user: User = Depends(current_user)):
    board = get_owned_board(db, board_id, user)
    with transaction(db, "Failed to delete board"):
        db.delete(board)
    return Ok()
