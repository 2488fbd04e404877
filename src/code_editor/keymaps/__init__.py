"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, WhenClause, bindings_for
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_BINDINGS, default_actions, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "WhenClause",
    "bindings_for",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "default_actions",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
