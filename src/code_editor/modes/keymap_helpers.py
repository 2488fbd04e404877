"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import Mapping, MutableMapping, Optional, cast

from code_editor.keymaps.registry import KeymapRegistry
from code_editor.keymaps.resolver import KeymapResolver, ResolutionMatch
from code_editor.runtime import telemetry

from .base_mode import ModeContext, ModeResult


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    registry = context.extras.get("keymap_registry")
    if not isinstance(registry, KeymapRegistry):
        raise RuntimeError("ModeContext.extras missing 'keymap_registry'")
    return registry


def keymap_flag_context(context: ModeContext) -> Mapping[str, bool]:
    flags = context.extras.setdefault("keymap_flags", {})
    return cast(Mapping[str, bool], flags)


def update_flag(context: ModeContext, key: str, value: bool) -> None:
    flags = cast(
        MutableMapping[str, bool], context.extras.setdefault("keymap_flags", {})
    )
    flags[key] = value


def run_action(
    context: ModeContext,
    action_id: str,
    match: Optional[ResolutionMatch] = None,
) -> ModeResult:
    """Invoke ``action_id`` (or the matched action) inside a telemetry span."""

    action = match.action if match else require_keymap_registry(context).get_action(action_id)
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={
            "binding_id": match.binding.id if match else "-",
            "action": action.id,
        },
    ):
        outcome = action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


def dispatch_binding(context: ModeContext, mode: str) -> Optional[ModeResult]:
    """Resolve the current key in ``mode``; ``None`` when nothing is bound."""

    key = context.current_key
    if key is None:
        return None
    resolver = require_keymap_resolver(context)
    result = resolver.resolve(mode, key.token, context=keymap_flag_context(context))
    if result.status != "match" or result.match is None:
        return None
    return run_action(context, result.match.action.id, result.match)


__all__ = [
    "dispatch_binding",
    "keymap_flag_context",
    "require_keymap_registry",
    "require_keymap_resolver",
    "run_action",
    "update_flag",
]
