"""Two-key Normal-mode grammar: ``(PendingKey, second key) -> action id``."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .base_mode import KeyInput, PendingKey

ANY_CHAR = "<char>"

PENDING_TRANSITIONS: Mapping[PendingKey, Mapping[str, str]] = MappingProxyType(
    {
        PendingKey.DELETE: MappingProxyType({"d": "edit.delete_line"}),
        PendingKey.YANK: MappingProxyType({"y": "edit.yank_line"}),
        PendingKey.CHANGE: MappingProxyType({"c": "edit.change_line"}),
        PendingKey.REPLACE: MappingProxyType({ANY_CHAR: "edit.replace_char"}),
        PendingKey.GOTO: MappingProxyType({"g": "motion.first_line"}),
    }
)


def transition(pending: PendingKey, key: KeyInput) -> Optional[str]:
    """Action completing ``pending`` with ``key``; ``None`` cancels it."""

    table = PENDING_TRANSITIONS.get(pending)
    if not table:
        return None
    action_id = table.get(key.token)
    if action_id is None and key.is_char:
        action_id = table.get(ANY_CHAR)
    return action_id


__all__ = ["ANY_CHAR", "PENDING_TRANSITIONS", "PendingKey", "transition"]
