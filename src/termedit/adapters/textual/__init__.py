"""Textual front end. The app module is imported lazily; it needs textual."""

from .controller import TextualEditorAdapter, TextualUIHooks
from .surface import RowSurface

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "RowSurface"]
