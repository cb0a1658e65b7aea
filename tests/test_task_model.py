# tests/test_task_model.py

from __future__ import annotations

from datetime import date, datetime

from PyQt6.QtCore import QLocale

from models import Task, format_due_date

EN_US = QLocale("en_US")


def test_task_defaults() -> None:
    task = Task(name="a")

    assert task.description == ""
    assert task.is_completed is False
    assert isinstance(task.due_date, datetime)
    assert task.id


def test_toggle_flips_flag() -> None:
    task = Task(name="a")
    task.toggle()
    assert task.is_completed is True
    task.toggle()
    assert task.is_completed is False


def test_format_due_date_medium_style_without_time() -> None:
    assert format_due_date(datetime(2025, 1, 2, 23, 59), EN_US) == "Jan 2, 2025"
    assert format_due_date(date(2024, 12, 25), EN_US) == "Dec 25, 2024"


def test_format_due_date_defaults_to_system_locale() -> None:
    value = datetime(2025, 1, 2)
    assert format_due_date(value) == format_due_date(value, QLocale())
