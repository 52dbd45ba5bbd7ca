"""Task and quadrant models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Quadrant(str, Enum):
    """One of the four urgency/importance categories."""

    URGENT_IMPORTANT = "urgent-important"
    NOT_URGENT_IMPORTANT = "not-urgent-important"
    URGENT_NOT_IMPORTANT = "urgent-not-important"
    NOT_URGENT_NOT_IMPORTANT = "not-urgent-not-important"


# Fixed enumeration order, also the search order used when moving a task
QUADRANT_ORDER: tuple[Quadrant, ...] = (
    Quadrant.URGENT_IMPORTANT,
    Quadrant.NOT_URGENT_IMPORTANT,
    Quadrant.URGENT_NOT_IMPORTANT,
    Quadrant.NOT_URGENT_NOT_IMPORTANT,
)

# Key-value store keys; these strings are the on-disk format and must not change
STORAGE_KEYS: dict[Quadrant, str] = {
    Quadrant.URGENT_IMPORTANT: "urgentImportant",
    Quadrant.NOT_URGENT_IMPORTANT: "notUrgentImportant",
    Quadrant.URGENT_NOT_IMPORTANT: "urgentNotImportant",
    Quadrant.NOT_URGENT_NOT_IMPORTANT: "notUrgentNotImportant",
}

QUADRANT_TITLES: dict[Quadrant, str] = {
    Quadrant.URGENT_IMPORTANT: "Urgent & Important",
    Quadrant.NOT_URGENT_IMPORTANT: "Not Urgent & Important",
    Quadrant.URGENT_NOT_IMPORTANT: "Urgent & Not Important",
    Quadrant.NOT_URGENT_NOT_IMPORTANT: "Not Urgent & Not Important",
}

QUADRANT_COLORS: dict[Quadrant, str] = {
    Quadrant.URGENT_IMPORTANT: "red",
    Quadrant.NOT_URGENT_IMPORTANT: "green",
    Quadrant.URGENT_NOT_IMPORTANT: "orange",
    Quadrant.NOT_URGENT_NOT_IMPORTANT: "gray",
}


class Task(BaseModel):
    """A user-authored item on the board.

    Tasks are immutable; editing replaces the task with a copy carrying the
    same ``id``. Two tasks with the same ``id`` are the same logical task,
    whatever their text.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., strict=True, description="Unique task identifier")
    text: str = Field(..., description="Task text, never blank")

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
