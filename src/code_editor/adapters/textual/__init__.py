"""Textual-style key translation; Textual itself is not imported."""

from .controller import EditorHooks, EditorView, TextualKeyAdapter, translate_key

__all__ = ["EditorHooks", "EditorView", "TextualKeyAdapter", "translate_key"]
