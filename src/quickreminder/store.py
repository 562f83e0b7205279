"""Task store: holds the ordered task list, id allocation and observers.

Every effective mutation notifies subscribers synchronously, in
subscription order, before the mutating call returns. Lookups by id that
miss are silent no-ops and do not notify.
"""
import logging
from typing import Callable, Iterator, List, Optional, Tuple
from quickreminder.models import Task, TaskCategory, DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

Observer = Callable[["TaskStore"], None]


class TaskStore:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._observers: List[Observer] = []
        self._next_id: int = 1

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- observation --------------------
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register observer(store); returns a callable that unsubscribes it."""
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        # copy: an observer may unsubscribe itself while being called
        for observer in list(self._observers):
            observer(self)

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_completed)

    def completion_rate(self) -> float:
        """Fraction of completed tasks in [0, 1]; 0.0 when the list is empty."""
        if not self._tasks:
            return 0.0
        return self.completed_count() / len(self._tasks)

    # -------------------- task operations --------------------
    def add_task(self, title: str, category: TaskCategory = DEFAULT_CATEGORY) -> Task:
        """Append a new incomplete task. The title is not validated here."""
        task = Task(id=self._allocate_id(), title=title, category=category)
        self._tasks.append(task)
        logger.debug("added task id=%s category=%s", task.id, category.value)
        self.notify()
        return task

    def toggle_task_completion(self, task_id: int) -> None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[idx] = task.with_completed(not task.is_completed)
                logger.debug("toggled task id=%s done=%s", task_id, not task.is_completed)
                self.notify()
                return
        logger.debug("toggle: task id=%s not found", task_id)

    def remove_task(self, task_id: int) -> None:
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            logger.debug("remove: task id=%s not found", task_id)
            return
        self._tasks = remaining
        logger.debug("removed task id=%s", task_id)
        self.notify()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __str__(self) -> str:
        return (f'Tasks: {len(self._tasks)}, '
                f'Done: {self.completed_count()}, '
                f'Rate: {self.completion_rate():.0%}')
