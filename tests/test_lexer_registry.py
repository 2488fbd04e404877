from __future__ import annotations

import pytest

from code_editor import tokenize
from code_editor.syntax import (
    LexerConflictError,
    LexerRegistry,
    TokenKind,
    get_lexer,
    normalize_language,
    rule_for,
)
from code_editor.syntax.lexers import PythonLexer, ScriptLexer, ShellLexer, TypeScriptLexer


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("julia", "script"),
        ("jl", "script"),
        ("script", "script"),
        ("python", "python"),
        ("py", "python"),
        ("bash", "shell"),
        ("sh", "shell"),
        ("zsh", "shell"),
        ("console", "shell"),
        ("typescript", "typescript"),
        ("ts", "typescript"),
        ("javascript", "typescript"),
        ("js", "typescript"),
        ("tsx", "typescript"),
        ("jsx", "typescript"),
    ],
)
def test_builtin_aliases(alias: str, expected: str) -> None:
    lexer = get_lexer(alias)

    assert lexer is not None
    assert lexer.name == expected


def test_aliases_are_normalized() -> None:
    assert normalize_language("  PyThOn ") == "python"
    assert get_lexer(" Bash\t") is get_lexer("sh")


def test_unknown_language_degrades_silently() -> None:
    assert get_lexer("cobol") is None
    assert get_lexer(None) is None
    assert tokenize("cobol", "x = 1") is None


def test_tokenize_accepts_strings() -> None:
    tokens = tokenize("julia", "end")

    assert tokens is not None
    assert [token.kind for token in tokens] == [TokenKind.KEYWORD]


def test_register_rejects_taken_alias() -> None:
    registry = LexerRegistry()

    with pytest.raises(LexerConflictError):
        registry.register(PythonLexer(), ["jl"])


def test_register_with_replace_rebinds_alias() -> None:
    registry = LexerRegistry()
    replacement = ShellLexer()

    registry.register(replacement, ["py"], replace=True)

    assert registry.get("py") is replacement
    assert registry.get("python") is not replacement


def test_empty_registry_and_stats() -> None:
    registry = LexerRegistry(load_builtins=False)
    assert registry.stats().lexer_count == 0

    registry.register(TypeScriptLexer(), ["ts", "js"])
    registry.register(ScriptLexer(), ["julia"])

    stats = registry.stats()
    assert stats.lexer_count == 2
    assert stats.alias_count == 3
    assert registry.aliases("typescript") == ("js", "ts")


def test_indent_rules_follow_language_aliases() -> None:
    assert rule_for("jl").opens_block("function f()")
    assert rule_for("py").opens_block("if x:")
    assert rule_for("bash").closes_block("  fi")
    assert rule_for("ts").opens_block("class A {")
    assert not rule_for("cobol").opens_block("function f()")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("if [ -f x ]; then", True),
        ("then", True),
        ("for f in *; do", True),
        ("while true\tdo", True),
        ("main() {", True),
        ("echo undo", False),
        ("git redo", False),
        ("cmd --xthen", False),
        ("echo done", False),
    ],
)
def test_shell_trailers_match_whole_words(line: str, expected: bool) -> None:
    assert rule_for("sh").opens_block(line) is expected


def test_script_do_block_still_indents() -> None:
    rule = rule_for("julia")

    assert rule.opens_block("map(xs) do")
    assert not rule.opens_block("x = undo")
