from __future__ import annotations

from typing import List

import pytest

from code_editor import CodeEditor, EditorMode, KeyInput, PendingKey
from code_editor.modes import PENDING_TRANSITIONS, transition


def make_editor(text: str, row: int = 1, col: int = 0, **kwargs: object) -> CodeEditor:
    editor = CodeEditor(text, initial_mode=EditorMode.NORMAL, **kwargs)
    editor.set_cursor(row, col)
    return editor


def to_key(name: str) -> KeyInput:
    if len(name) == 1:
        return KeyInput.char(name)
    if name.startswith("ctrl+"):
        return KeyInput.ctrl(name[len("ctrl+"):])
    return KeyInput.named(name)


def press(editor: CodeEditor, *keys: str) -> List[bool]:
    return [editor.handle_key(to_key(key)) for key in keys]


def test_h_and_l_stay_on_the_line() -> None:
    editor = make_editor("hello\nworld", col=2)

    press(editor, "l", "l", "l")
    assert editor.cursor == (1, 4)

    press(editor, "h")
    assert editor.cursor == (1, 3)

    press(editor, "0", "h")
    assert editor.cursor == (1, 0)


def test_j_and_k_clamp_the_column() -> None:
    editor = make_editor("abcdef\nab\nxyz", col=5)

    press(editor, "j")
    assert editor.cursor == (2, 1)
    press(editor, "j", "j")
    assert editor.cursor == (3, 1)
    press(editor, "k", "k", "k")
    assert editor.cursor == (1, 1)


def test_line_start_end_and_first_non_blank() -> None:
    editor = make_editor("   hello", col=5)

    press(editor, "$")
    assert editor.cursor == (1, 7)
    press(editor, "0")
    assert editor.cursor == (1, 0)
    press(editor, "^")
    assert editor.cursor == (1, 3)


def test_word_motions() -> None:
    editor = make_editor("foo.bar baz")

    stops = []
    for _ in range(4):
        press(editor, "w")
        stops.append(editor.cursor[1])
    assert stops == [3, 4, 8, 10]

    stops = []
    for _ in range(3):
        press(editor, "b")
        stops.append(editor.cursor[1])
    assert stops == [8, 4, 3]

    press(editor, "0")
    stops = []
    for _ in range(3):
        press(editor, "e")
        stops.append(editor.cursor[1])
    assert stops == [2, 3, 6]


def test_w_continues_on_the_next_line() -> None:
    editor = make_editor("foo\n  bar")

    press(editor, "w")

    assert editor.cursor == (2, 2)


def test_gg_and_G() -> None:
    editor = make_editor("a\nbb\nccc", col=0)
    editor.set_cursor(2, 1)

    press(editor, "G")
    assert editor.cursor == (3, 1)

    assert press(editor, "g", "g") == [True, True]
    assert editor.cursor == (1, 0)
    assert editor.pending_key is None


def test_x_deletes_and_yanks_the_character() -> None:
    editor = make_editor("abc", col=2)

    press(editor, "x")

    assert editor.text == "ab"
    assert editor.cursor == (1, 1)
    assert editor.yank_buffer == ("c",)
    assert not editor.yank_linewise


def test_x_on_an_empty_line_is_a_handled_no_op() -> None:
    editor = make_editor("")

    assert press(editor, "x") == [True]
    assert editor.text == ""
    assert not editor.can_undo


def test_D_and_C_cut_to_end_of_line() -> None:
    editor = make_editor("hello world", col=5)
    press(editor, "D")
    assert editor.text == "hello"
    assert editor.cursor == (1, 4)
    assert editor.yank_buffer == (" world",)

    editor = make_editor("hello world", col=5)
    press(editor, "C")
    assert editor.text == "hello"
    assert editor.mode is EditorMode.INSERT
    assert editor.cursor == (1, 5)


def test_J_joins_with_one_space() -> None:
    editor = make_editor("hello\n  world")
    press(editor, "J")
    assert editor.lines == ("hello world",)

    editor = make_editor("\n  world")
    press(editor, "J")
    assert editor.lines == ("world",)


def test_J_on_last_line_does_nothing() -> None:
    editor = make_editor("only")

    assert press(editor, "J") == [True]
    assert editor.text == "only"


def test_tilde_toggles_case_and_advances() -> None:
    editor = make_editor("Hello")
    press(editor, "~")
    assert editor.text == "hello"
    assert editor.cursor == (1, 1)

    editor = make_editor("ab", col=1)
    press(editor, "~")
    assert editor.text == "aB"
    assert editor.cursor == (1, 1)


def test_r_replaces_the_character() -> None:
    editor = make_editor("abc", col=1)

    press(editor, "r")
    assert editor.pending_key == "r"
    press(editor, "X")

    assert editor.text == "aXc"
    assert editor.cursor == (1, 1)
    assert editor.pending_key is None


def test_undo_and_redo() -> None:
    editor = make_editor("abc")

    press(editor, "x")
    assert editor.text == "bc"
    press(editor, "u")
    assert editor.text == "abc"
    assert editor.cursor == (1, 0)
    press(editor, "ctrl+r")
    assert editor.text == "bc"


def test_undo_clamps_the_cursor_in_normal_mode() -> None:
    editor = CodeEditor("ab")

    press(editor, "ESC", "A", "c", "ESC", "x")
    assert editor.text == "ab"

    press(editor, "u", "u")

    assert editor.text == "ab"
    assert editor.cursor == (1, 1)
    assert press(editor, "u") == [True]
    assert editor.text == "ab"


def test_yy_then_p() -> None:
    editor = make_editor("aaa\nbbb")

    press(editor, "y", "y")
    assert editor.yank_buffer == ("aaa",)
    assert editor.yank_linewise
    assert not editor.can_undo

    press(editor, "p")
    assert editor.lines == ("aaa", "aaa", "bbb")
    assert editor.cursor == (2, 0)


def test_dd_then_p() -> None:
    editor = make_editor("aaa\nbbb\nccc")
    editor.set_cursor(2, 0)

    press(editor, "d", "d")
    assert editor.lines == ("aaa", "ccc")
    assert editor.cursor == (2, 0)

    press(editor, "p")
    assert editor.lines == ("aaa", "ccc", "bbb")
    assert editor.cursor == (3, 0)


def test_dd_on_the_only_line_clears_it() -> None:
    editor = make_editor("only", col=2)

    press(editor, "d", "d")

    assert editor.lines == ("",)
    assert editor.cursor == (1, 0)
    assert editor.yank_buffer == ("only",)


def test_linewise_P_lands_on_first_non_blank() -> None:
    editor = make_editor("  foo\nbar")

    press(editor, "y", "y", "j", "P")

    assert editor.lines == ("  foo", "  foo", "bar")
    assert editor.cursor == (2, 2)


def test_charwise_paste_after_and_before() -> None:
    editor = make_editor("abcde")
    press(editor, "x", "$", "p")
    assert editor.text == "bcdea"
    assert editor.cursor == (1, 4)

    editor = make_editor("abc", col=1)
    press(editor, "x", "P")
    assert editor.text == "abc"
    assert editor.cursor == (1, 1)


def test_paste_with_empty_yank_buffer_is_a_no_op() -> None:
    editor = make_editor("abc")

    assert press(editor, "p", "P") == [True, True]
    assert editor.text == "abc"
    assert not editor.can_undo


def test_cc_keeps_indentation_and_enters_insert() -> None:
    editor = make_editor("    hello", col=6)

    press(editor, "c", "c")

    assert editor.text == "    "
    assert editor.cursor == (1, 4)
    assert editor.mode is EditorMode.INSERT


@pytest.mark.parametrize(
    ("key", "text", "col", "expected"),
    [
        ("i", "abc", 1, 1),
        ("a", "abc", 1, 2),
        ("a", "abc", 2, 3),
        ("A", "abc", 0, 3),
        ("I", "   abc", 5, 3),
    ],
)
def test_insert_entry_points(key: str, text: str, col: int, expected: int) -> None:
    editor = make_editor(text, col=col)

    press(editor, key)

    assert editor.mode is EditorMode.INSERT
    assert editor.cursor == (1, expected)
    assert not editor.can_undo


def test_o_and_O_open_indented_lines() -> None:
    editor = make_editor("  foo\nbar")
    press(editor, "O")
    assert editor.lines == ("  ", "  foo", "bar")
    assert editor.cursor == (1, 2)
    assert editor.mode is EditorMode.INSERT

    press(editor, "ctrl+z")
    assert editor.lines == ("  foo", "bar")


def test_arrows_and_home_end() -> None:
    editor = make_editor("abc\nde", col=2)

    press(editor, "DOWN")
    assert editor.cursor == (2, 1)
    press(editor, "RIGHT")
    assert editor.cursor == (2, 1)
    press(editor, "LEFT", "UP")
    assert editor.cursor == (1, 0)
    press(editor, "END")
    assert editor.cursor == (1, 2)
    press(editor, "HOME")
    assert editor.cursor == (1, 0)


def test_unknown_second_key_cancels_pending() -> None:
    editor = make_editor("abc")

    press(editor, "d")
    assert editor.pending_key == "d"

    assert press(editor, "x") == [True]
    assert editor.text == "abc"
    assert editor.pending_key is None

    press(editor, "x")
    assert editor.text == "bc"


def test_global_key_clears_pending() -> None:
    editor = make_editor("abc")

    press(editor, "y", "ctrl+z")

    assert editor.pending_key is None


def test_leaving_normal_clears_pending() -> None:
    editor = make_editor("abc")

    press(editor, "g", "ctrl+f")

    assert editor.mode is EditorMode.SEARCH
    assert editor.pending_key is None


def test_unbound_keys_are_not_handled() -> None:
    editor = make_editor("abc")

    assert press(editor, "z", "ctrl+q", "TAB") == [False, False, False]


def test_pending_transition_table() -> None:
    assert set(PENDING_TRANSITIONS) == {
        PendingKey.DELETE,
        PendingKey.YANK,
        PendingKey.CHANGE,
        PendingKey.REPLACE,
        PendingKey.GOTO,
    }
    assert transition(PendingKey.DELETE, KeyInput.char("d")) == "edit.delete_line"
    assert transition(PendingKey.DELETE, KeyInput.char("y")) is None
    assert transition(PendingKey.REPLACE, KeyInput.char("Q")) == "edit.replace_char"
    assert transition(PendingKey.REPLACE, KeyInput.named("ENTER")) is None
    assert transition(PendingKey.NONE, KeyInput.char("d")) is None
