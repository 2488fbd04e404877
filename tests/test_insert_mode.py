from __future__ import annotations

from typing import List

import pytest

from code_editor import CodeEditor, EditorMode, KeyInput


def make_editor(
    text: str = "", row: int | None = None, col: int | None = None, **kwargs: object
) -> CodeEditor:
    editor = CodeEditor(text, **kwargs)
    if row is not None and col is not None:
        editor.set_cursor(row, col)
    return editor


def press(editor: CodeEditor, *keys: str) -> List[bool]:
    handled = []
    for key in keys:
        if len(key) == 1:
            event = KeyInput.char(key)
        elif key.startswith("ctrl+"):
            event = KeyInput.ctrl(key[len("ctrl+"):])
        else:
            event = KeyInput.named(key)
        handled.append(editor.handle_key(event))
    return handled


def type_text(editor: CodeEditor, text: str) -> None:
    press(editor, *text)


def test_starts_in_insert_mode_at_document_end() -> None:
    editor = make_editor("ab\ncde")

    assert editor.mode is EditorMode.INSERT
    assert editor.cursor == (2, 3)


def test_characters_are_inserted_at_the_cursor() -> None:
    editor = make_editor("ad", 1, 1)

    type_text(editor, "bc")

    assert editor.text == "abcd"
    assert editor.cursor == (1, 3)


def test_enter_splits_the_line() -> None:
    editor = make_editor("hello", 1, 2)

    press(editor, "ENTER")

    assert editor.lines == ("he", "llo")
    assert editor.cursor == (2, 0)


def test_backspace_deletes_and_joins() -> None:
    editor = make_editor("ab\ncd", 2, 0)

    press(editor, "BACKSPACE")
    assert editor.text == "abcd"
    assert editor.cursor == (1, 2)

    press(editor, "BACKSPACE")
    assert editor.text == "acd"
    assert editor.cursor == (1, 1)


def test_backspace_at_document_start_is_handled() -> None:
    editor = make_editor("abc", 1, 0)

    assert press(editor, "BACKSPACE") == [True]
    assert editor.text == "abc"


@pytest.mark.parametrize(
    "header",
    ["function f()", "if x > 1", "for i in 1:3", "while true"],
)
def test_enter_indents_after_block_opener(header: str) -> None:
    editor = make_editor(header)

    press(editor, "ENTER")

    assert editor.lines == (header, "    ")
    assert editor.cursor == (2, 4)


def test_enter_keeps_existing_indentation() -> None:
    editor = make_editor("    x = 1")

    press(editor, "ENTER")

    assert editor.lines == ("    x = 1", "    ")
    assert editor.cursor == (2, 4)


def test_python_block_opener_uses_trailing_colon() -> None:
    editor = make_editor("def f():", language="python")

    press(editor, "ENTER")

    assert editor.lines == ("def f():", "    ")


def test_typing_end_dedents() -> None:
    editor = make_editor("function f()")

    press(editor, "ENTER")
    type_text(editor, "end")

    assert editor.lines == ("function f()", "end")
    assert editor.cursor == (2, 3)


def test_tab_and_backtab() -> None:
    editor = make_editor("x", 1, 0)

    press(editor, "TAB")
    assert editor.text == "    x"
    assert editor.cursor == (1, 4)

    press(editor, "BACKTAB")
    assert editor.text == "x"
    assert editor.cursor == (1, 0)

    assert press(editor, "BACKTAB") == [True]
    assert editor.text == "x"


def test_tab_width_is_configurable() -> None:
    editor = make_editor("", tab_width=2)

    press(editor, "TAB")

    assert editor.text == "  "


def test_delete_removes_forward_and_joins() -> None:
    editor = make_editor("abc\ndef", 1, 1)

    press(editor, "DELETE")
    assert editor.lines == ("ac", "def")

    press(editor, "END", "DELETE")
    assert editor.lines == ("acdef",)
    assert editor.cursor == (1, 2)

    press(editor, "END", "DELETE")
    assert editor.text == "acdef"


def test_left_and_right_wrap_rows() -> None:
    editor = make_editor("ab\ncd", 2, 0)

    press(editor, "LEFT")
    assert editor.cursor == (1, 2)
    press(editor, "RIGHT")
    assert editor.cursor == (2, 0)

    press(editor, "END", "RIGHT")
    assert editor.cursor == (2, 2)


def test_up_down_use_the_gap_clamp() -> None:
    editor = make_editor("abc\nd", 1, 3)

    press(editor, "DOWN")
    assert editor.cursor == (2, 1)
    press(editor, "UP")
    assert editor.cursor == (1, 1)


def test_page_keys_move_by_page_size() -> None:
    editor = make_editor("a\nb\nc\nd\ne", 1, 0, page_size=2)

    press(editor, "PAGEDOWN")
    assert editor.cursor == (3, 0)
    press(editor, "PAGEDOWN", "PAGEDOWN")
    assert editor.cursor == (5, 0)
    press(editor, "PAGEUP")
    assert editor.cursor == (3, 0)


def test_escape_rests_cursor_on_last_character() -> None:
    editor = make_editor("abc")
    assert editor.cursor == (1, 3)

    press(editor, "ESC")

    assert editor.mode is EditorMode.NORMAL
    assert editor.cursor == (1, 2)


def test_typed_run_undoes_in_one_step() -> None:
    editor = make_editor("")

    type_text(editor, "abc")
    press(editor, "ENTER")
    type_text(editor, "de")

    press(editor, "ctrl+z")
    assert editor.lines == ("abc", "")
    press(editor, "ctrl+z")
    assert editor.text == "abc"
    press(editor, "ctrl+z")
    assert editor.text == ""
    assert not editor.can_undo

    press(editor, "ctrl+r", "ctrl+r", "ctrl+r")
    assert editor.lines == ("abc", "de")


def test_control_chords_are_not_inserted() -> None:
    editor = make_editor("abc")

    assert press(editor, "ctrl+q") == [False]
    assert editor.text == "abc"
