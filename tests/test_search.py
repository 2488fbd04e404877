from __future__ import annotations

from code_editor.buffer import SearchState, split_text


def make_search(query: str, text: str, row: int = 1, col: int = 0) -> SearchState:
    search = SearchState()
    for ch in query:
        search.append(ch)
    search.recompute(split_text(text), row, col)
    return search


def test_empty_query_has_no_matches() -> None:
    search = make_search("", "anything")

    assert search.matches == []
    assert search.index == 0
    assert search.current() is None
    assert search.next() is None
    assert search.prev() is None


def test_matches_are_in_document_order_and_may_overlap() -> None:
    search = make_search("aa", "aaa\nxaa")

    assert search.matches == [(1, 1), (1, 2), (2, 2)]


def test_selection_starts_at_first_match_after_cursor() -> None:
    search = make_search("foo", "foo bar foo\nfoo", row=1, col=1)

    assert search.index == 2
    assert search.current() == (1, 9)


def test_match_under_cursor_is_selected() -> None:
    search = make_search("foo", "foo bar foo", row=1, col=8)

    assert search.current() == (1, 9)


def test_selection_wraps_to_first_match() -> None:
    search = make_search("foo", "foo\nbar", row=2, col=0)

    assert search.index == 1


def test_next_and_prev_wrap_around() -> None:
    search = make_search("o", "foo")

    assert search.index == 1
    assert search.next() == (1, 3)
    assert search.next() == (1, 2)
    assert search.prev() == (1, 3)
    assert search.prev() == (1, 2)
    assert search.prev() == (1, 3)


def test_pop_and_reset() -> None:
    search = make_search("ab", "ab")

    assert search.pop() is True
    assert search.query == "a"
    assert search.pop() is True
    assert search.pop() is False

    search.append("z")
    search.reset()
    assert search.query == ""
    assert search.matches == []


def test_clear_keeps_query() -> None:
    search = make_search("ab", "ab ab")

    search.clear()

    assert search.query == "ab"
    assert search.matches == []
    assert search.index == 0


def test_in_match_uses_one_based_columns() -> None:
    search = make_search("bar", "foo bar")

    assert search.in_match(1, 5)
    assert search.in_match(1, 7)
    assert not search.in_match(1, 4)
    assert not search.in_match(1, 8)
    assert not search.in_match(2, 5)
