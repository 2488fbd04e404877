from __future__ import annotations

import pytest

from code_editor import CodeEditor, EditorConfig, EditorMode, KeyInput


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_width == 4
    assert config.page_size == 20
    assert config.history_limit == 100
    assert config.language == "julia"
    assert config.initial_mode is EditorMode.INSERT


def test_values_are_normalized() -> None:
    config = EditorConfig(language=" PyThOn ", initial_mode="Normal")

    assert config.language == "python"
    assert config.initial_mode is EditorMode.NORMAL


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tab_width": 0},
        {"page_size": -1},
        {"history_limit": True},
        {"tab_width": "4"},
        {"initial_mode": "visual"},
    ],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**kwargs)


def test_from_env_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "CODE_EDITOR_TAB_WIDTH": "2",
            "CODE_EDITOR_LANGUAGE": "ts",
            "CODE_EDITOR_MODE": "normal",
            "CODE_EDITOR_PAGE_SIZE": "   ",
            "UNRELATED": "1",
        }
    )

    assert config.tab_width == 2
    assert config.language == "ts"
    assert config.initial_mode is EditorMode.NORMAL
    assert config.page_size == 20


def test_from_env_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODE_EDITOR_HISTORY_LIMIT", "5")

    assert EditorConfig.from_env().history_limit == 5


def test_from_env_rejects_non_integers() -> None:
    with pytest.raises(ValueError, match="CODE_EDITOR_TAB_WIDTH"):
        EditorConfig.from_env({"CODE_EDITOR_TAB_WIDTH": "wide"})


def test_with_overrides() -> None:
    base = EditorConfig()

    changed = base.with_overrides(page_size=5)

    assert changed.page_size == 5
    assert base.page_size == 20
    with pytest.raises(ValueError, match="colour"):
        base.with_overrides(colour="red")


def test_editor_applies_config() -> None:
    editor = CodeEditor("", config=EditorConfig(history_limit=2, tab_width=3))
    for _ in range(3):
        editor.handle_key(KeyInput.named("TAB"))

    assert editor.text == " " * 9
    assert editor.buffer.history.undo_depth == 2


def test_editor_rejects_unknown_overrides() -> None:
    with pytest.raises(ValueError):
        CodeEditor("", wrap=True)
