from typing import Iterable, Protocol

from auraboard.schemas.task import UNCATEGORIZED


class TaskLike(Protocol):
    completed: bool
    category: str | None


def completed_count(tasks: Iterable[TaskLike]) -> int:
    return sum(1 for t in tasks if t.completed)


def completion_rate(completed: int, total: int) -> int:
    """Whole-number percentage of completed tasks; 0 for an empty list."""
    if total == 0:
        return 0
    # round-half-up, so 1 of 8 (12.5%) shows as 13 like a browser would.
    return int(completed * 100 / total + 0.5)


def category_breakdown(tasks: Iterable[TaskLike]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for t in tasks:
        label = t.category or UNCATEGORIZED
        counts[label] = counts.get(label, 0) + 1
    return counts


def summarize(tasks: Iterable[TaskLike]) -> dict:
    tasks = list(tasks)
    done = completed_count(tasks)
    return {
        "total_tasks": len(tasks),
        "completed_tasks": done,
        "completion_rate": completion_rate(done, len(tasks)),
        "categories": category_breakdown(tasks),
    }
