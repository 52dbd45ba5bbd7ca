"""HTTP surface for the task board."""

from taskmatrix.api.routes import router

__all__ = ["router"]
