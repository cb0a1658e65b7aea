# tests/test_window.py

from __future__ import annotations

from datetime import date, datetime

import pytest
from PyQt6.QtCore import QDate

from main import TaskWindow
from models import AppState, format_due_date

from .conftest import FIXED_NOW


@pytest.fixture()
def window(qapp, state: AppState) -> TaskWindow:
    w = TaskWindow(state)
    yield w
    w.close()
    w.deleteLater()


def _fill_and_add(window: TaskWindow, name: str, description: str = "") -> None:
    window.form.name_edit.setText(name)
    window.form.name_edit.textEdited.emit(name)
    window.form.description_edit.setText(description)
    window.form.description_edit.textEdited.emit(description)
    window.form.add_btn.click()


def test_add_creates_row_and_resets_form(window: TaskWindow) -> None:
    _fill_and_add(window, "Buy milk", "2% milk")

    tasks = window.state.store.list_tasks()
    assert [(t.name, t.description) for t in tasks] == [("Buy milk", "2% milk")]
    assert window.form.name_edit.text() == ""
    assert window.form.description_edit.text() == ""

    rows = window.task_list.rows
    assert len(rows) == 1
    assert rows[0].name_label.text() == "Buy milk"
    assert rows[0].description_label.text() == "2% milk"


def test_date_pick_keeps_time_of_day(window: TaskWindow) -> None:
    window.form.date_selected.emit(date(2025, 2, 14))

    assert window.state.form.due_date == datetime(2025, 2, 14, FIXED_NOW.hour, FIXED_NOW.minute)


def test_actions_only_visible_for_hovered_row(window: TaskWindow) -> None:
    _fill_and_add(window, "A")
    _fill_and_add(window, "B")
    row_a, row_b = window.task_list.rows
    assert row_a.actions.isHidden() and row_b.actions.isHidden()

    row_a.hover_changed.emit(row_a.task_id, True)
    assert not row_a.actions.isHidden()
    assert row_b.actions.isHidden()

    row_a.hover_changed.emit(row_a.task_id, False)
    assert row_a.actions.isHidden()


def test_toggle_strikes_through_name(window: TaskWindow) -> None:
    _fill_and_add(window, "A")
    row = window.task_list.rows[0]
    row.hover_changed.emit(row.task_id, True)

    row.toggle_btn.click()
    assert window.state.store.list_tasks()[0].is_completed is True
    assert window.task_list.rows[0].name_label.font().strikeOut() is True

    window.task_list.rows[0].toggle_btn.click()
    assert window.task_list.rows[0].name_label.font().strikeOut() is False


def test_delete_removes_row(window: TaskWindow) -> None:
    _fill_and_add(window, "A")
    _fill_and_add(window, "B")
    row_a = window.task_list.rows[0]
    row_a.hover_changed.emit(row_a.task_id, True)

    row_a.delete_btn.click()

    assert [t.name for t in window.state.store.list_tasks()] == ["B"]
    assert [r.name_label.text() for r in window.task_list.rows] == ["B"]
    # B moved into the row under the pointer
    assert window.state.hovered_task_id == window.state.store.list_tasks()[0].id
    assert not window.task_list.rows[0].actions.isHidden()


def test_row_shows_picked_date_and_form_resets_calendar(window: TaskWindow) -> None:
    picked = date(2025, 3, 14)
    window.form.calendar.setSelectedDate(QDate(picked.year, picked.month, picked.day))
    _fill_and_add(window, "A")

    assert window.task_list.rows[0].date_label.text() == format_due_date(picked)
    assert window.form.calendar.selectedDate().toPyDate() == FIXED_NOW.date()
    assert window.state.form.due_date == FIXED_NOW


def test_store_changes_redraw_list(window: TaskWindow) -> None:
    store = window.state.store
    task = store.add_task("from store", "", FIXED_NOW)
    assert [r.name_label.text() for r in window.task_list.rows] == ["from store"]

    store.toggle_completion(task.id)
    assert window.task_list.rows[0].name_label.font().strikeOut() is True

    store.delete_task(task.id)
    assert window.task_list.rows == []
