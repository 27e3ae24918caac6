from auraboard.models.user import User
from auraboard.models.task import Task

__all__ = ["User", "Task"]
