"""In-memory task store with Qt signals for the UI"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal
from models.task import Task

logger = logging.getLogger(__name__)


class TaskStore(QObject):
    """Owns the ordered task list; insertion order is display order"""

    task_added = pyqtSignal(Task)
    task_updated = pyqtSignal(Task)
    task_deleted = pyqtSignal(str)  # task_id

    def __init__(self):
        super().__init__()
        self._tasks: List[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, name: str, description: str, due_date: datetime) -> Task:
        """Append a new, not yet completed task"""
        task = Task(name=name, description=description, due_date=due_date)
        self._tasks.append(task)
        logger.info("Task added id=%s name=%r", task.id, task.name)
        self.task_added.emit(task)
        return task

    def toggle_completion(self, task_id: str) -> bool:
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Toggle ignored, no task id=%s", task_id)
            return False
        task.toggle()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.is_completed)
        self.task_updated.emit(task)
        return True

    def delete_task(self, task_id: str) -> bool:
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Delete ignored, no task id=%s", task_id)
            return False
        self._tasks.remove(task)
        logger.info("Task deleted id=%s", task_id)
        self.task_deleted.emit(task_id)
        return True

    def get_task(self, task_id: str) -> Optional[Task]:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self) -> Tuple[Task, ...]:
        """Snapshot of all tasks in insertion order"""
        return tuple(self._tasks)
