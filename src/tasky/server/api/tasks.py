"""Task endpoints, including the batched task reorder."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tasky.server.api._common import transaction
from tasky.server.auth import current_user, get_owned_board, get_owned_task
from tasky.server.database import get_db
from tasky.server.models import BoardColumn, Task, User
from tasky.server.ordering import append_position, move_task, renumber_tasks, reorder_tasks
from tasky.server.schemas import Ok, TaskCreate, TaskOut, TaskReorder, TaskUpdate

router = APIRouter(tags=["tasks"])


@router.post("/api/boards/{board_id}/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    board_id: str,
    payload: TaskCreate,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    board = get_owned_board(db, board_id, user)
    column = db.get(BoardColumn, payload.column_id)
    if column is None or column.board_id != board.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Column not found")

    task = Task(
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        column_id=column.id,
        board_id=board.id,
    )
    with transaction(db, "Failed to create task"):
        task.position = append_position(db, Task, column_id=column.id)
        db.add(task)
    db.refresh(task)
    return task


@router.post("/api/tasks/reorder", response_model=Ok)
def reorder(payload: TaskReorder, db: Session = Depends(get_db), user: User = Depends(current_user)):
    board = get_owned_board(db, payload.board_id, user)
    with transaction(db, "Failed to reorder tasks"):
        reorder_tasks(db, board, payload.tasks)
    return Ok()


@router.patch("/api/tasks/{task_id}", response_model=TaskOut)
def update_task(
    task_id: str,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(current_user),
):
    task = get_owned_task(db, task_id, user)
    changes = payload.model_dump(exclude_unset=True)

    target = None
    if changes.get("column_id") and changes["column_id"] != task.column_id:
        target = db.get(BoardColumn, changes["column_id"])
        if target is None or target.board_id != task.board_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid column")
    if changes.get("assignee_id") and db.get(User, changes["assignee_id"]) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid assignee")

    with transaction(db, "Failed to update task"):
        if changes.get("title") is not None:
            task.title = changes["title"]
        for key in ("description", "due_date", "assignee_id"):
            if key in changes:
                setattr(task, key, changes[key])
        if target is not None or changes.get("position") is not None:
            column = target if target is not None else task.column
            move_task(db, task, column, changes.get("position"))
    db.refresh(task)
    return task


@router.delete("/api/tasks/{task_id}", response_model=Ok)
def delete_task(task_id: str, db: Session = Depends(get_db), user: User = Depends(current_user)):
    task = get_owned_task(db, task_id, user)
    with transaction(db, "Failed to delete task"):
        column_id = task.column_id
        db.delete(task)
        renumber_tasks(db, column_id, exclude=[task.id])
    return Ok()
