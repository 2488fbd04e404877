from __future__ import annotations

from code_editor.buffer import EditBuffer, split_text
from code_editor.syntax import TokenCache, TokenKind, get_lexer


def make_cache(language: str | None = "julia") -> TokenCache:
    return TokenCache(get_lexer(language))


def expected_rows(buffer: EditBuffer) -> list:
    lexer = buffer.tokens.lexer
    assert lexer is not None
    return [lexer.lex(line) for line in buffer.document.lines]


def test_rebuild_lexes_every_row() -> None:
    cache = make_cache()
    lines = split_text("function f()\n    1\nend")

    cache.rebuild(lines)

    assert len(cache) == 3
    assert cache.tokens(1)[0].kind is TokenKind.KEYWORD
    assert cache.tokens(2)[0].kind is TokenKind.NUMBER
    assert cache.dirty == frozenset()


def test_ensure_fresh_only_relexes_dirty_rows() -> None:
    cache = make_cache()
    lines = split_text("a\nb")
    cache.rebuild(lines)
    untouched = cache.tokens(2)

    lines[0][:] = list("end")
    cache.mark_dirty(1)
    cache.ensure_fresh(lines)

    assert cache.tokens(1)[0].kind is TokenKind.KEYWORD
    assert cache.tokens(2) is untouched


def test_ensure_fresh_is_idempotent() -> None:
    cache = make_cache()
    lines = split_text("x = 1")
    cache.mark_dirty(1)
    cache.ensure_fresh(lines)
    first = cache.tokens(1)

    cache.ensure_fresh(lines)

    assert cache.tokens(1) is first
    assert cache.dirty == frozenset()


def test_ensure_fresh_resizes_to_line_count() -> None:
    cache = make_cache()
    cache.rebuild(split_text("a\nb\nc"))

    cache.ensure_fresh(split_text("a"))
    assert len(cache) == 1

    cache.ensure_fresh(split_text("a\n1"))
    assert len(cache) == 2
    assert cache.tokens(2)[0].kind is TokenKind.NUMBER


def test_out_of_range_dirty_rows_are_dropped() -> None:
    cache = make_cache()
    lines = split_text("a")
    cache.rebuild(lines)

    cache.mark_dirty(9)
    cache.ensure_fresh(lines)

    assert cache.dirty == frozenset()
    assert cache.tokens(9) == []


def test_cache_without_lexer_yields_empty_rows() -> None:
    cache = make_cache("cobol")

    cache.rebuild(split_text("anything\nat all"))

    assert cache.tokens(1) == []
    assert cache.tokens(2) == []


def test_buffer_edits_keep_cache_in_sync() -> None:
    buffer = EditBuffer("function f()\nx = 1\nend", language="julia")
    buffer.set_cursor(1, 12)

    buffer.insert_newline()
    buffer.insert_char("y")
    buffer.set_cursor(3, 0)
    buffer.backspace()
    buffer.refresh_tokens()

    assert [buffer.tokens.tokens(row) for row in range(1, 4)] == expected_rows(buffer)


def test_language_change_rebuilds_cache() -> None:
    buffer = EditBuffer("def f(): pass", language="python")
    buffer.set_language("cobol")

    assert buffer.tokens.tokens(1) == []

    buffer.set_language("py")
    assert buffer.tokens.tokens(1)[0].kind is TokenKind.KEYWORD
