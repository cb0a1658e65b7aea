from PyQt6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont

from models import Task, format_due_date
from constants import (
    ROW_PADDING, ACTION_BTN_SIZE, COMPLETED_COLOR, PENDING_COLOR, DELETE_COLOR,
    ICON_COMPLETED, ICON_PENDING, ICON_DELETE,
)


def _action_style(color: str) -> str:
    return f"QPushButton {{ background: transparent; border: none; color: {color}; font-size: 22px; }}"


class TaskRow(QWidget):
    """单个任务行；操作按钮仅在鼠标悬停时显示"""
    toggle_requested = pyqtSignal(str)  # task_id
    delete_requested = pyqtSignal(str)  # task_id
    hover_changed = pyqtSignal(str, bool)  # task_id, hovering

    def __init__(self, task: Task, show_actions: bool = False, parent=None):
        super().__init__(parent)
        self.task_id = task.id
        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(ROW_PADDING, ROW_PADDING, ROW_PADDING, ROW_PADDING)

        text_col = QVBoxLayout()
        text_col.setSpacing(2)
        self.name_label = QLabel()
        self.description_label = QLabel()
        self.date_label = QLabel()

        name_font = QFont()
        name_font.setBold(True)
        self.name_label.setFont(name_font)
        small = QFont()
        small.setPointSize(9)
        self.date_label.setFont(small)

        text_col.addWidget(self.name_label)
        text_col.addWidget(self.description_label)
        text_col.addWidget(self.date_label)
        self.layout.addLayout(text_col)
        self.layout.addStretch()

        self.actions = QWidget()
        actions_layout = QHBoxLayout(self.actions)
        actions_layout.setContentsMargins(0, 0, 0, 0)

        self.toggle_btn = QPushButton()
        self.toggle_btn.setFixedSize(ACTION_BTN_SIZE, ACTION_BTN_SIZE)
        self.toggle_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.toggle_btn.clicked.connect(lambda: self.toggle_requested.emit(self.task_id))
        actions_layout.addWidget(self.toggle_btn)

        self.delete_btn = QPushButton(ICON_DELETE)
        self.delete_btn.setFixedSize(ACTION_BTN_SIZE, ACTION_BTN_SIZE)
        self.delete_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_btn.setStyleSheet(_action_style(DELETE_COLOR))
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.task_id))
        actions_layout.addWidget(self.delete_btn)

        self.layout.addWidget(self.actions)
        self.update_task(task, show_actions)

    def update_task(self, task: Task, show_actions: bool):
        """复用行控件显示另一条任务"""
        self.task_id = task.id
        self.name_label.setText(task.name)
        font = self.name_label.font()
        font.setStrikeOut(task.is_completed)
        self.name_label.setFont(font)
        self.description_label.setText(task.description)
        self.date_label.setText(format_due_date(task.due_date))

        if task.is_completed:
            self.toggle_btn.setText(ICON_COMPLETED)
            self.toggle_btn.setStyleSheet(_action_style(COMPLETED_COLOR))
        else:
            self.toggle_btn.setText(ICON_PENDING)
            self.toggle_btn.setStyleSheet(_action_style(PENDING_COLOR))
        self.actions.setHidden(not show_actions)

    def enterEvent(self, event):
        self.hover_changed.emit(self.task_id, True)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.hover_changed.emit(self.task_id, False)
        super().leaveEvent(event)
