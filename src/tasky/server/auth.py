"""Authorization gate: who is asking, and do they own the board.

Authentication itself happens upstream; the caller's identity arrives in
the ``X-User-Id`` header. Every lookup of a board-scoped entity goes
through one of the ``get_owned_*`` helpers, which answer 404 for both
missing entities and entities on someone else's board.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from tasky.server.database import get_db
from tasky.server.models import Board, BoardColumn, Task, User

USER_HEADER = "X-User-Id"


def current_user(
    x_user_id: Optional[str] = Header(None, alias=USER_HEADER),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the acting user, provisioning the row on first sight."""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    user = db.get(User, user_id)
    if user is None:
        user = User(id=user_id)
        db.add(user)
        db.commit()
    return user


def _not_found(what: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")


def get_owned_board(db: Session, board_id: str, user: User) -> Board:
    board = db.get(Board, board_id)
    if board is None or board.owner_id != user.id:
        raise _not_found("Board")
    return board


def get_owned_column(db: Session, column_id: str, user: User) -> BoardColumn:
    column = db.get(BoardColumn, column_id)
    if column is None or column.board.owner_id != user.id:
        raise _not_found("Column")
    return column


def get_owned_task(db: Session, task_id: str, user: User) -> Task:
    task = db.get(Task, task_id)
    if task is None or task.board.owner_id != user.id:
        raise _not_found("Task")
    return task
