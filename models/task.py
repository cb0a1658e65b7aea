"""Task data model"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union
import uuid

from PyQt6.QtCore import QDate, QLocale

# 中等长度日期样式，例如 "Jan 2, 2025"
# Qt 没有 medium 格式；字段顺序固定，只有月份名随 locale 变化
MEDIUM_DATE_FORMAT = "MMM d, yyyy"


@dataclass
class Task:
    """Single task with unique ID and a completion flag"""
    name: str
    description: str = ""
    due_date: datetime = field(default_factory=datetime.now)
    is_completed: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def toggle(self):
        self.is_completed = not self.is_completed


def format_due_date(value: Union[date, datetime], locale: Optional[QLocale] = None) -> str:
    """Render a due date in medium localized style, without the time part"""
    if locale is None:
        locale = QLocale()
    return locale.toString(QDate(value.year, value.month, value.day), MEDIUM_DATE_FORMAT)
