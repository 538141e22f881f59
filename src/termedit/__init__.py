"""Terminal text editor with coalesced undo and incremental redraw."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "modes",
    "render",
    "runtime",
    "config",
    "editor",
    "state",
    "cli",
]

__version__ = "0.1.0"
