"""Application state owned by the main window.

Holds the task store together with the transient UI state (pending form
values and the hovered row). The functions below are the only way the
window mutates it, so they can be exercised without any widgets.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from models.task import Task
from models.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class FormState:
    name: str = ""
    description: str = ""
    due_date: datetime = field(default_factory=datetime.now)


@dataclass
class AppState:
    store: TaskStore = field(default_factory=TaskStore)
    clock: Callable[[], datetime] = datetime.now
    form: Optional[FormState] = None
    hovered_task_id: Optional[str] = None

    def __post_init__(self):
        if self.form is None:
            self.form = FormState(due_date=self.clock())


def update_form(state: AppState, name: Optional[str] = None, description: Optional[str] = None,
                due_date: Optional[datetime] = None):
    if name is not None:
        state.form.name = name
    if description is not None:
        state.form.description = description
    if due_date is not None:
        state.form.due_date = due_date


def add_task(state: AppState) -> Task:
    """Create a task from the pending form values, then reset the form"""
    form = state.form
    task = state.store.add_task(form.name, form.description, form.due_date)
    state.form = FormState(due_date=state.clock())
    return task


def toggle_completion(state: AppState, task_id: str) -> bool:
    return state.store.toggle_completion(task_id)


def delete_task(state: AppState, task_id: str) -> bool:
    """Remove a task; if it was hovered, hover passes to the task that moves into its row"""
    tasks = state.store.list_tasks()
    index = next((i for i, t in enumerate(tasks) if t.id == task_id), None)
    if index is not None and state.hovered_task_id == task_id:
        # 行控件按位置复用，下一条任务会出现在鼠标下方
        following = tasks[index + 1] if index + 1 < len(tasks) else None
        state.hovered_task_id = following.id if following else None
    return state.store.delete_task(task_id)


def set_hovered(state: AppState, task_id: str, hovering: bool):
    """Pointer entered (hovering=True) or left a task row"""
    if hovering:
        state.hovered_task_id = task_id
    elif state.hovered_task_id == task_id:
        state.hovered_task_id = None
    logger.debug("Hovered task id=%s", state.hovered_task_id)
