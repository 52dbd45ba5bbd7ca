"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

from taskmatrix.store.models import Quadrant, Task


class AddTaskRequest(BaseModel):
    """Request to add a task to a quadrant."""

    text: str = Field(..., description="Task text; must not be blank")


class EditTaskRequest(BaseModel):
    """Request to replace a task's text."""

    text: str = Field(..., description="Replacement text")


class MoveTaskRequest(BaseModel):
    """Drop a task onto a quadrant."""

    quadrant: Quadrant = Field(..., description="Target quadrant")


class TaskResponse(BaseModel):
    """A task together with the quadrant holding it."""

    id: str
    text: str
    quadrant: Quadrant


class EditTaskResponse(TaskResponse):
    """Result of an edit; ``changed`` is False for blank or identical text."""

    changed: bool


class QuadrantView(BaseModel):
    """One quadrant as rendered on the board."""

    quadrant: Quadrant
    title: str
    color: str
    tasks: list[Task] = Field(default_factory=list)


class BoardResponse(BaseModel):
    """All four quadrants in fixed order."""

    quadrants: list[QuadrantView] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    uptime_seconds: float = 0.0
