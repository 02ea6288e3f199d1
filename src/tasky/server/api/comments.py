"""Comment endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tasky.server.api._common import transaction
from tasky.server.auth import current_user, get_owned_task
from tasky.server.database import get_db
from tasky.server.models import Comment, User
from tasky.server.schemas import CommentCreate, CommentOut, Ok

router = APIRouter(tags=["comments"])


@router.post("/api/tasks/{task_id}/comments", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def create_comment(
    task_id: str,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    task = get_owned_task(db, task_id, user)
    comment = Comment(content=payload.content, task_id=task.id, author_id=user.id)
    with transaction(db, "Failed to post comment"):
        db.add(comment)
    db.refresh(comment)
    return comment


@router.delete("/api/comments/{comment_id}", response_model=Ok)
def delete_comment(comment_id: str, db: Session = Depends(get_db), user: User = Depends(current_user)):
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    if comment.author_id != user.id and comment.task.board.owner_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed")
    with transaction(db, "Failed to delete comment"):
        db.delete(comment)
    return Ok()
