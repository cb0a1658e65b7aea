#!/usr/bin/env python3
import sys
import logging
from datetime import datetime, date
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout

from config import Settings, load_settings
from logging_setup import setup_logging
from models import AppState
from models.app_state import add_task, toggle_completion, delete_task, set_hovered, update_form
from components.title_bar import TitleBar
from components.task_form import TaskForm
from components.task_list_view import TaskListView
from constants import WINDOW_TITLE, CONTENT_MARGIN, SECTION_SPACING

logger = logging.getLogger(__name__)


class TaskWindow(QMainWindow):
    def __init__(self, state: Optional[AppState] = None, settings: Optional[Settings] = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.state = state if state is not None else AppState()
        settings = settings or Settings()
        self.resize(settings.window_width, settings.window_height)

        self.init_ui()
        self.rebuild_content()

    def init_ui(self):
        self.main_widget = QWidget()
        self.setCentralWidget(self.main_widget)
        self.main_layout = QVBoxLayout(self.main_widget)
        self.main_layout.setContentsMargins(CONTENT_MARGIN, CONTENT_MARGIN, CONTENT_MARGIN, CONTENT_MARGIN)
        self.main_layout.setSpacing(SECTION_SPACING)

        self.title_bar = TitleBar()
        self.main_layout.addWidget(self.title_bar)

        self.form = TaskForm()
        self.form.name_edited.connect(self.on_name_edited)
        self.form.description_edited.connect(self.on_description_edited)
        self.form.date_selected.connect(self.on_date_selected)
        self.form.add_requested.connect(self.on_add_requested)
        self.form.set_values(self.state.form)
        self.main_layout.addWidget(self.form)

        self.task_list = TaskListView()
        self.task_list.toggle_requested.connect(self.on_toggle_requested)
        self.task_list.delete_requested.connect(self.on_delete_requested)
        self.task_list.hover_changed.connect(self.on_hover_changed)

        # 任务变更后由 store 信号驱动重绘
        store = self.state.store
        store.task_added.connect(self.on_store_changed)
        store.task_updated.connect(self.on_store_changed)
        store.task_deleted.connect(self.on_store_changed)
        self.main_layout.addWidget(self.task_list)
        self.main_layout.addStretch()

    def rebuild_content(self):
        """任务列表随状态重新渲染"""
        self.task_list.update_tasks(self.state.store.list_tasks(), self.state.hovered_task_id)

    def on_store_changed(self, *_):
        self.rebuild_content()

    # --- 表单输入 ---
    def on_name_edited(self, text: str):
        update_form(self.state, name=text)

    def on_description_edited(self, text: str):
        update_form(self.state, description=text)

    def on_date_selected(self, picked: date):
        # 保留原有的时间部分，只替换日期
        current = self.state.form.due_date
        update_form(self.state, due_date=datetime.combine(picked, current.time()))

    # --- 用户操作 ---
    def on_add_requested(self):
        add_task(self.state)
        self.form.set_values(self.state.form)

    def on_toggle_requested(self, task_id: str):
        toggle_completion(self.state, task_id)

    def on_delete_requested(self, task_id: str):
        delete_task(self.state, task_id)

    def on_hover_changed(self, task_id: str, hovering: bool):
        set_hovered(self.state, task_id, hovering)
        self.rebuild_content()


def main() -> int:
    settings = load_settings()
    setup_logging(settings.log_level)
    settings.apply_qt_platform()

    app = QApplication(sys.argv)
    window = TaskWindow(settings=settings)
    window.show()
    logger.info("Quick Tasks started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
