"""Init file for models package"""
from models.task import Task, format_due_date
from models.task_store import TaskStore
from models.app_state import AppState, FormState

__all__ = ['Task', 'TaskStore', 'AppState', 'FormState', 'format_due_date']
