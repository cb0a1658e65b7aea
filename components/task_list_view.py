from typing import List, Optional, Sequence

from PyQt6.QtWidgets import QScrollArea, QWidget, QVBoxLayout
from PyQt6.QtCore import Qt, pyqtSignal

from models import Task
from components.task_row import TaskRow
from constants import LIST_MAX_HEIGHT, ROW_SPACING


class TaskListView(QScrollArea):
    """可滚动的任务列表，按插入顺序排列"""
    toggle_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)
    hover_changed = pyqtSignal(str, bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setMaximumHeight(LIST_MAX_HEIGHT)
        self.setFrameShape(QScrollArea.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.container = QWidget()
        self.container_layout = QVBoxLayout(self.container)
        self.container_layout.setContentsMargins(0, 10, 0, 0)
        self.container_layout.setSpacing(ROW_SPACING)
        self.container_layout.addStretch()
        self.setWidget(self.container)
        self.rows: List[TaskRow] = []

    def update_tasks(self, tasks: Sequence[Task], hovered_task_id: Optional[str] = None):
        """流式更新：复用已有行，多余的删除"""
        for i, task in enumerate(tasks):
            show_actions = task.id == hovered_task_id
            if i < len(self.rows):
                self.rows[i].update_task(task, show_actions)
            else:
                row = TaskRow(task, show_actions)
                row.toggle_requested.connect(self.toggle_requested)
                row.delete_requested.connect(self.delete_requested)
                row.hover_changed.connect(self.hover_changed)
                # 插在底部弹簧之前
                self.container_layout.insertWidget(i, row)
                self.rows.append(row)

        for row in self.rows[len(tasks):]:
            self.container_layout.removeWidget(row)
            row.deleteLater()
        del self.rows[len(tasks):]
