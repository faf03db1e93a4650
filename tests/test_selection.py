"""
Tests for SelectionState: clamping, focus switching and cursor movement.
"""
from selection import Focus, SelectionState, clamp


def test_clamp() -> None:
    assert clamp(5, 3) == 2
    assert clamp(-1, 3) == 0
    assert clamp(1, 3) == 1
    assert clamp(0, 0) is None


def test_clamp_category_moves_to_new_last_index() -> None:
    sel = SelectionState(category_index=4)
    assert sel.clamp_category(3) == 2
    assert sel.category_index == 2


def test_clamp_category_empty_list_has_no_selection() -> None:
    sel = SelectionState(category_index=2)
    assert sel.clamp_category(0) is None
    assert sel.category_index == 0


def test_task_row_clamps_for_display_only() -> None:
    sel = SelectionState(task_index=3)
    assert sel.task_row(2) == 1
    assert sel.task_row(0) is None
    assert sel.task_index == 3


def test_switch_focus_keeps_indices() -> None:
    sel = SelectionState(category_index=1, task_index=2)
    assert sel.switch_focus() is Focus.TASKS
    assert sel.switch_focus() is Focus.CATEGORIES
    assert (sel.category_index, sel.task_index) == (1, 2)


def test_added_rows_become_selected() -> None:
    sel = SelectionState()
    sel.category_added(3)
    sel.task_added(5)
    assert (sel.category_index, sel.task_index) == (3, 5)


def test_move_in_category_pane() -> None:
    sel = SelectionState()
    sel.move(1, 3, 0)
    sel.move(1, 3, 0)
    sel.move(1, 3, 0)
    assert sel.category_index == 2
    sel.move(-5, 3, 0)
    assert sel.category_index == 0


def test_move_in_task_pane_starts_from_displayed_row() -> None:
    sel = SelectionState(task_index=7, focus=Focus.TASKS)
    sel.move(-1, 2, 4)
    assert sel.task_index == 2
    assert sel.category_index == 0


def test_move_with_empty_list_is_noop() -> None:
    sel = SelectionState(task_index=3, focus=Focus.TASKS)
    sel.move(1, 1, 0)
    assert sel.task_index == 3


def test_jump() -> None:
    sel = SelectionState(focus=Focus.TASKS)
    sel.jump(True, 2, 5)
    assert sel.task_index == 4
    sel.jump(False, 2, 5)
    assert sel.task_index == 0
    sel.switch_focus()
    sel.jump(True, 2, 5)
    assert sel.category_index == 1
