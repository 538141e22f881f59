"""Declarative keymap registry and default bindings."""

from .models import Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
