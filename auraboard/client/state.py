from dataclasses import dataclass, field

from auraboard.schemas.task import CATEGORIES, TaskOut
from auraboard.services.reflection_service import Mood
from auraboard.services.stats_service import category_breakdown, completed_count, completion_rate

LOADING_REFLECTION = "Composing something soft... ✨"


@dataclass
class BoardState:
    """
    Client-side mirror of the dashboard.

    The task list only changes through the methods below, each called after
    the server confirmed the matching request.
    """

    tasks: list[TaskOut] = field(default_factory=list)
    mood: str = Mood.CALM.value
    category: str = CATEGORIES[0]
    reflection: str = "Loading your atmosphere..."
    refresh_key: int = 0

    def replace_tasks(self, tasks: list[TaskOut]) -> None:
        self.tasks = list(tasks)

    def task_created(self, task: TaskOut) -> None:
        self.tasks.insert(0, task)

    def task_updated(self, task: TaskOut) -> None:
        self.tasks = [task if t.id == task.id else t for t in self.tasks]

    def task_deleted(self, task_id: str) -> None:
        self.tasks = [t for t in self.tasks if t.id != task_id]

    @property
    def completed_count(self) -> int:
        return completed_count(self.tasks)

    @property
    def total_count(self) -> int:
        return len(self.tasks)

    @property
    def progress(self) -> int:
        return completion_rate(self.completed_count, self.total_count)

    @property
    def category_counts(self) -> dict[str, int]:
        return category_breakdown(self.tasks)

    @property
    def summary_line(self) -> str:
        if self.total_count == 0:
            return "No tasks yet."
        return f"{self.completed_count} / {self.total_count} tasks completed"
