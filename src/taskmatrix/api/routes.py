"""API routes for the task board."""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from taskmatrix import __version__
from taskmatrix.api.models import (
    AddTaskRequest,
    BoardResponse,
    EditTaskRequest,
    EditTaskResponse,
    HealthResponse,
    MoveTaskRequest,
    QuadrantView,
    TaskResponse,
)
from taskmatrix.store.models import (
    QUADRANT_COLORS,
    QUADRANT_ORDER,
    QUADRANT_TITLES,
    Quadrant,
    Task,
)
from taskmatrix.store.tasks import TaskStore, get_task_store

router = APIRouter()

# Track service start time for uptime
_start_time = time.time()


def _task_not_found(task_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Task {task_id} not found",
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )


# =============================================================================
# Board
# =============================================================================


@router.get("/board", response_model=BoardResponse)
async def get_board(
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> BoardResponse:
    """Render all four quadrants."""
    snapshot = store.snapshot()
    return BoardResponse(
        quadrants=[
            QuadrantView(
                quadrant=q,
                title=QUADRANT_TITLES[q],
                color=QUADRANT_COLORS[q],
                tasks=snapshot[q],
            )
            for q in QUADRANT_ORDER
        ]
    )


@router.get("/quadrants/{quadrant}/tasks", response_model=list[Task])
async def list_tasks(
    quadrant: Quadrant,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> list[Task]:
    """List the tasks of one quadrant, in order."""
    return store.tasks(quadrant)


# =============================================================================
# Task Management
# =============================================================================


@router.post(
    "/quadrants/{quadrant}/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_task(
    quadrant: Quadrant,
    request: AddTaskRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> TaskResponse:
    """Add a task to a quadrant."""
    task = store.add(quadrant, request.text)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Task text must not be blank",
        )
    return TaskResponse(id=task.id, text=task.text, quadrant=quadrant)


@router.patch("/quadrants/{quadrant}/tasks/{task_id}", response_model=EditTaskResponse)
async def edit_task(
    quadrant: Quadrant,
    task_id: str,
    request: EditTaskRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> EditTaskResponse:
    """Edit a task's text.

    Blank or unchanged text leaves the task as is and reports ``changed=False``.
    """
    changed = store.edit(quadrant, task_id, request.text)

    task = next((t for t in store.tasks(quadrant) if t.id == task_id), None)
    if task is None:
        raise _task_not_found(task_id)
    return EditTaskResponse(id=task.id, text=task.text, quadrant=quadrant, changed=changed)


@router.delete("/quadrants/{quadrant}/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    quadrant: Quadrant,
    task_id: str,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> None:
    """Delete a task from a quadrant."""
    if not store.delete(quadrant, task_id):
        raise _task_not_found(task_id)


@router.post("/tasks/{task_id}/move", response_model=TaskResponse)
async def move_task(
    task_id: str,
    request: MoveTaskRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> TaskResponse:
    """Move a task onto another quadrant (drag-and-drop)."""
    task = store.move(task_id, request.quadrant)
    if task is None:
        raise _task_not_found(task_id)
    return TaskResponse(id=task.id, text=task.text, quadrant=request.quadrant)
