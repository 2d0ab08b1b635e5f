"""
Severity-ordered queue of pending care tasks.

Tasks are never removed. `prioritize()` and `first_pending()` only read a
snapshot; re-enqueueing a task id replaces it in place and refreshes its
timestamp.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from care_agent.models import PatientTask, utc_now

logger = logging.getLogger(__name__)

NO_TASKS = "no tasks pending"


def rank(tasks: Sequence[PatientTask]) -> List[PatientTask]:
    # sorted() is stable, so equal severities keep arrival order
    return sorted(tasks, key=lambda t: t.severity, reverse=True)


def prioritize(tasks: Sequence[PatientTask]) -> str:
    """Description of the highest-severity task, or NO_TASKS."""
    ranked = rank(tasks)
    if not ranked:
        return NO_TASKS
    return ranked[0].description


class TaskQueue:
    def __init__(self, tasks: Iterable[PatientTask] = ()):
        self._tasks: List[PatientTask] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> Tuple[PatientTask, ...]:
        return tuple(self._tasks)

    def enqueue(self, task: PatientTask) -> None:
        refreshed = task.model_copy(update={"last_updated": utc_now()})
        for i, existing in enumerate(self._tasks):
            if existing.id == task.id:
                self._tasks[i] = refreshed
                logger.info(f"[TaskQueue] Re-enqueued task {task.id} (severity={task.severity})")
                return
        self._tasks.append(refreshed)
        logger.info(f"[TaskQueue] Enqueued task {task.id} (severity={task.severity})")

    def ranked(self) -> List[PatientTask]:
        return rank(self.snapshot())

    def prioritize(self) -> str:
        return prioritize(self.snapshot())

    def first_pending(self) -> Optional[PatientTask]:
        return self._tasks[0] if self._tasks else None
