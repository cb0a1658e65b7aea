from datetime import date

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton, QCalendarWidget
from PyQt6.QtCore import pyqtSignal, QDate

from models import FormState
from components.styled_line_edit import StyledLineEdit
from constants import SECTION_SPACING, ADD_BTN_BG, ADD_BTN_FG


class TaskForm(QWidget):
    """新建任务表单：名称、描述、截止日期和添加按钮"""
    name_edited = pyqtSignal(str)
    description_edited = pyqtSignal(str)
    date_selected = pyqtSignal(object)  # datetime.date
    add_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(SECTION_SPACING)

        self.name_edit = StyledLineEdit("Task Name")
        self.name_edit.textEdited.connect(self.name_edited)
        self.layout.addWidget(self.name_edit)

        self.description_edit = StyledLineEdit("Description")
        self.description_edit.textEdited.connect(self.description_edited)
        self.layout.addWidget(self.description_edit)

        self.date_label = QLabel("Due Date:")
        self.layout.addWidget(self.date_label)

        self.calendar = QCalendarWidget()
        self.calendar.setGridVisible(False)
        self.calendar.selectionChanged.connect(self._on_date_selected)
        self.layout.addWidget(self.calendar)

        self.add_btn = QPushButton("Add Task")
        self.add_btn.setStyleSheet(f"""
            QPushButton {{
                background: {ADD_BTN_BG}; color: {ADD_BTN_FG};
                font-weight: bold; font-size: 15px;
                border: none; border-radius: 8px; padding: 12px;
            }}
            QPushButton:pressed {{ background: #333333; }}
        """)
        self.add_btn.clicked.connect(lambda: self.add_requested.emit())
        self.layout.addWidget(self.add_btn)

    def _on_date_selected(self):
        self.date_selected.emit(self.calendar.selectedDate().toPyDate())

    def set_values(self, form: FormState):
        """同步表单状态到控件，不触发编辑信号"""
        self.name_edit.setText(form.name)
        self.description_edit.setText(form.description)
        d: date = form.due_date
        self.calendar.blockSignals(True)
        self.calendar.setSelectedDate(QDate(d.year, d.month, d.day))
        self.calendar.blockSignals(False)
