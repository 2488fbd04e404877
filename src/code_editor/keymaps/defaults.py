"""Built-in keymaps that seed each mode with the editor's default bindings."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Mapping, Sequence

from .models import ActionRef, Binding, WhenClause, bindings_for
from .registry import KeymapRegistry


@lru_cache(maxsize=1)
def default_actions() -> tuple[ActionRef, ...]:
    """Every built-in action, bound or reached through a pending key.

    Built on first use: the action modules depend on the mode types, which in
    turn resolve keys through this package.
    """

    from code_editor.actions import core as core_actions
    from code_editor.actions import editing as edit_actions
    from code_editor.actions import motions as motion_actions
    from code_editor.actions import search as search_actions

    def pending(kind: str, description: str) -> ActionRef:
        return ActionRef(
            id=f"pending.{kind}",
            handler=core_actions.begin_pending,
            description=description,
            metadata={"pending": kind[0]},
        )

    return (
        ActionRef("core.enter_insert", core_actions.enter_insert_mode, "Enter insert mode"),
        ActionRef("core.append", core_actions.append_after_cursor, "Insert after the cursor"),
        ActionRef("core.append_end", core_actions.append_at_line_end, "Insert at end of line"),
        ActionRef(
            "core.insert_start",
            core_actions.insert_at_first_non_blank,
            "Insert at first non-blank",
        ),
        ActionRef("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
        ActionRef("core.enter_search", core_actions.enter_search_mode, "Start a new search"),
        ActionRef("core.undo", core_actions.undo, "Undo the last change"),
        ActionRef("core.redo", core_actions.redo, "Redo the last undone change"),
        pending("delete", "Start a delete command"),
        pending("yank", "Start a yank command"),
        pending("change", "Start a change command"),
        pending("replace", "Replace the character under the cursor"),
        pending("goto", "Start a goto command"),
        ActionRef("motion.left", motion_actions.cursor_left, "Move left"),
        ActionRef("motion.right", motion_actions.cursor_right, "Move right"),
        ActionRef("motion.up", motion_actions.cursor_up, "Move up"),
        ActionRef("motion.down", motion_actions.cursor_down, "Move down"),
        ActionRef("motion.page_up", motion_actions.page_up, "Move one page up"),
        ActionRef("motion.page_down", motion_actions.page_down, "Move one page down"),
        ActionRef("motion.line_start", motion_actions.line_start, "Go to line start"),
        ActionRef("motion.line_end", motion_actions.line_end, "Go to line end"),
        ActionRef("motion.first_non_blank", motion_actions.first_non_blank, "Go to first non-blank"),
        ActionRef("motion.first_line", motion_actions.first_line, "Go to the first line"),
        ActionRef("motion.last_line", motion_actions.last_line, "Go to the last line"),
        ActionRef("motion.word_forward", motion_actions.word_forward, "Next word start"),
        ActionRef("motion.word_backward", motion_actions.word_backward, "Previous word start"),
        ActionRef("motion.word_end", motion_actions.word_end, "End of word"),
        ActionRef("edit.newline", edit_actions.insert_newline, "Split the line"),
        ActionRef("edit.backspace", edit_actions.backspace, "Delete before the cursor"),
        ActionRef("edit.delete", edit_actions.delete_forward, "Delete at the cursor"),
        ActionRef("edit.indent", edit_actions.indent, "Insert one indent level"),
        ActionRef("edit.dedent", edit_actions.dedent, "Remove one indent level"),
        ActionRef("edit.open_below", edit_actions.open_line_below, "Open a line below"),
        ActionRef("edit.open_above", edit_actions.open_line_above, "Open a line above"),
        ActionRef("edit.delete_char", edit_actions.delete_char, "Delete the character"),
        ActionRef("edit.delete_to_end", edit_actions.delete_to_end, "Delete to end of line"),
        ActionRef("edit.change_to_end", edit_actions.change_to_end, "Change to end of line"),
        ActionRef("edit.join_lines", edit_actions.join_lines, "Join with the next line"),
        ActionRef("edit.toggle_case", edit_actions.toggle_case, "Toggle case"),
        ActionRef("edit.paste_after", edit_actions.paste_after, "Paste after the cursor"),
        ActionRef("edit.paste_before", edit_actions.paste_before, "Paste before the cursor"),
        ActionRef("edit.delete_line", edit_actions.delete_line, "Delete the line"),
        ActionRef("edit.yank_line", edit_actions.yank_line, "Yank the line"),
        ActionRef("edit.change_line", edit_actions.change_line, "Change the line"),
        ActionRef("edit.replace_char", edit_actions.replace_char, "Replace the character"),
        ActionRef("search.backspace", search_actions.delete_from_query, "Shorten the query"),
        ActionRef("search.cancel", search_actions.cancel_search, "Cancel the search"),
        ActionRef("search.confirm", search_actions.confirm_search, "Jump to the selected match"),
        ActionRef("search.next", search_actions.next_match, "Next match"),
        ActionRef("search.prev", search_actions.prev_match, "Previous match"),
    )


GLOBAL_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="global.undo",
        mode="global",
        token="ctrl+z",
        action_id="core.undo",
        description="Undo in any mode",
    ),
    Binding(
        id="global.redo",
        mode="global",
        token="ctrl+r",
        action_id="core.redo",
        description="Redo in any mode",
    ),
    Binding(
        id="global.search",
        mode="global",
        token="ctrl+f",
        action_id="core.enter_search",
        description="Start a search unless one is active",
        when=(WhenClause("search_active", expected=False),),
    ),
)

INSERT_BINDINGS = bindings_for(
    "insert",
    (
        ("ESC", "core.exit_to_normal", "Leave insert mode"),
        ("ENTER", "edit.newline", "Split the line with auto-indent"),
        ("BACKSPACE", "edit.backspace", "Delete before the cursor"),
        ("DELETE", "edit.delete", "Delete at the cursor"),
        ("TAB", "edit.indent", "Insert one indent level"),
        ("BACKTAB", "edit.dedent", "Remove one indent level"),
        ("LEFT", "motion.left", "Move left, wrapping rows"),
        ("RIGHT", "motion.right", "Move right, wrapping rows"),
        ("UP", "motion.up", "Move up"),
        ("DOWN", "motion.down", "Move down"),
        ("HOME", "motion.line_start", "Go to line start"),
        ("END", "motion.line_end", "Go to line end"),
        ("PAGEUP", "motion.page_up", "Move one page up"),
        ("PAGEDOWN", "motion.page_down", "Move one page down"),
    ),
)

NORMAL_BINDINGS = bindings_for(
    "normal",
    (
        ("LEFT", "motion.left", "Move left"),
        ("RIGHT", "motion.right", "Move right"),
        ("UP", "motion.up", "Move up"),
        ("DOWN", "motion.down", "Move down"),
        ("HOME", "motion.line_start", "Go to line start"),
        ("END", "motion.line_end", "Go to last character"),
        ("i", "core.enter_insert", "Insert before the cursor"),
        ("a", "core.append", "Insert after the cursor"),
        ("A", "core.append_end", "Insert at end of line"),
        ("I", "core.insert_start", "Insert at first non-blank"),
        ("o", "edit.open_below", "Open a line below"),
        ("O", "edit.open_above", "Open a line above"),
        ("h", "motion.left", "Move left"),
        ("l", "motion.right", "Move right"),
        ("j", "motion.down", "Move down"),
        ("k", "motion.up", "Move up"),
        ("w", "motion.word_forward", "Next word start"),
        ("b", "motion.word_backward", "Previous word start"),
        ("e", "motion.word_end", "End of word"),
        ("0", "motion.line_start", "Go to line start"),
        ("$", "motion.line_end", "Go to last character"),
        ("^", "motion.first_non_blank", "Go to first non-blank"),
        ("G", "motion.last_line", "Go to the last line"),
        ("x", "edit.delete_char", "Delete the character"),
        ("D", "edit.delete_to_end", "Delete to end of line"),
        ("C", "edit.change_to_end", "Change to end of line"),
        ("J", "edit.join_lines", "Join with the next line"),
        ("~", "edit.toggle_case", "Toggle case"),
        ("p", "edit.paste_after", "Paste after"),
        ("P", "edit.paste_before", "Paste before"),
        ("d", "pending.delete", "Delete (dd)"),
        ("y", "pending.yank", "Yank (yy)"),
        ("c", "pending.change", "Change (cc)"),
        ("r", "pending.replace", "Replace (r<char>)"),
        ("g", "pending.goto", "Go to (gg)"),
        ("u", "core.undo", "Undo"),
        ("/", "core.enter_search", "Start a new search"),
        ("n", "search.next", "Next match"),
        ("N", "search.prev", "Previous match"),
    ),
)

SEARCH_BINDINGS = bindings_for(
    "search",
    (
        ("ESC", "search.cancel", "Cancel the search"),
        ("ENTER", "search.confirm", "Jump to the selected match"),
        ("BACKSPACE", "search.backspace", "Shorten the query"),
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    GLOBAL_BINDINGS + INSERT_BINDINGS + NORMAL_BINDINGS + SEARCH_BINDINGS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    per_mode_overrides: Mapping[str, Iterable[Binding]] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode.

    Every default action is always registered so that pending-key transitions
    can reach it even when its own binding is filtered out.
    """

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in default_actions():
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)

    if per_mode_overrides:
        for mode, bindings in per_mode_overrides.items():
            for binding in bindings:
                if binding.mode != mode:
                    raise ValueError(
                        f"Override binding '{binding.id}' must target mode '{mode}'"
                    )
                registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
