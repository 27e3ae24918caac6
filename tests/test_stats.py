from types import SimpleNamespace

import pytest

from auraboard.services.stats_service import category_breakdown, completion_rate, summarize


def task(category=None, completed=False):
    return SimpleNamespace(category=category, completed=completed)


@pytest.mark.parametrize(
    "completed,total,expected",
    [(0, 0, 0), (0, 3, 0), (1, 2, 50), (1, 3, 33), (2, 3, 67), (1, 8, 13), (4, 4, 100)],
)
def test_completion_rate(completed, total, expected):
    assert completion_rate(completed, total) == expected


def test_category_breakdown_folds_missing_labels():
    tasks = [task("Work"), task(None), task(""), task("Work"), task("Health")]
    assert category_breakdown(tasks) == {"Work": 2, "Uncategorized": 2, "Health": 1}


def test_summarize_empty():
    assert summarize([]) == {"total_tasks": 0, "completed_tasks": 0, "completion_rate": 0, "categories": {}}


def test_summarize_example():
    tasks = [task("Personal", completed=True), task("Work")]
    assert summarize(tasks) == {
        "total_tasks": 2,
        "completed_tasks": 1,
        "completion_rate": 50,
        "categories": {"Personal": 1, "Work": 1},
    }
