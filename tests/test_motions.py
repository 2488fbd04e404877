from __future__ import annotations

from code_editor.buffer import Document, motions


def make_document(text: str) -> Document:
    return Document.from_text(text)


def test_insert_left_right_wrap_rows() -> None:
    document = make_document("abc\ndef")

    assert motions.move_left(document, (2, 0)) == (1, 3)
    assert motions.move_right(document, (1, 3)) == (2, 0)
    assert motions.move_right(document, (2, 3)) == (2, 3)
    assert motions.move_left(document, (1, 0)) == (1, 0)


def test_normal_left_right_stay_on_row() -> None:
    document = make_document("abc\ndef")

    assert motions.move_left(document, (2, 0), normal=True) == (2, 0)
    assert motions.move_right(document, (1, 2), normal=True) == (1, 2)


def test_vertical_moves_clamp_column() -> None:
    document = make_document("abcdef\nab\n")

    assert motions.move_down(document, (1, 5)) == (2, 2)
    assert motions.move_down(document, (1, 5), normal=True) == (2, 1)
    assert motions.move_down(document, (2, 1)) == (3, 0)
    assert motions.move_down(document, (3, 0)) == (3, 0)
    assert motions.move_up(document, (1, 3)) == (1, 3)


def test_page_moves_stop_at_edges() -> None:
    document = make_document("\n".join(str(n) for n in range(30)))

    assert motions.move_vertical(document, (5, 0), 20) == (25, 0)
    assert motions.move_vertical(document, (25, 0), 20) == (30, 0)
    assert motions.move_vertical(document, (5, 0), -20) == (1, 0)


def test_line_start_end_and_first_non_blank() -> None:
    document = make_document("   hello world")

    assert motions.line_start(document, (1, 5)) == (1, 0)
    assert motions.line_end(document, (1, 0)) == (1, 14)
    assert motions.line_end(document, (1, 0), normal=True) == (1, 13)
    assert motions.first_non_blank(document, (1, 9)) == (1, 3)


def test_first_non_blank_on_blank_line_clamps() -> None:
    document = make_document("    ")

    assert motions.first_non_blank(document, (1, 0), normal=True) == (1, 3)
    assert motions.first_non_blank(document, (1, 0)) == (1, 4)


def test_first_and_last_line() -> None:
    document = make_document("line1\nline2\nx")

    assert motions.first_line(document, (3, 0)) == (1, 0)
    assert motions.last_line(document, (1, 4)) == (3, 0)


def test_word_forward_backward_and_end() -> None:
    document = make_document("hello world foo")

    assert motions.next_word_start(document, (1, 0)) == (1, 6)
    assert motions.next_word_start(document, (1, 6)) == (1, 12)
    assert motions.prev_word_start(document, (1, 12)) == (1, 6)
    assert motions.word_end(document, (1, 0)) == (1, 4)


def test_word_motion_treats_punctuation_as_its_own_class() -> None:
    document = make_document("foo(bar)")

    assert motions.next_word_start(document, (1, 0)) == (1, 3)
    assert motions.next_word_start(document, (1, 3)) == (1, 4)
    assert motions.word_end(document, (1, 4)) == (1, 6)


def test_word_motions_wrap_rows() -> None:
    document = make_document("end\n  next")

    assert motions.next_word_start(document, (1, 0)) == (2, 2)
    assert motions.prev_word_start(document, (2, 0)) == (1, 2)
    assert motions.word_end(document, (1, 2)) == (2, 5)
