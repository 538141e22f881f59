"""Input modes, prompt state and key-to-command translation."""

from .base import KeyInput, key_to_token
from .handler import InputHandler
from .prompt import InputMode, PROMPT_LABELS, PromptState

__all__ = [
    "KeyInput",
    "key_to_token",
    "InputHandler",
    "InputMode",
    "PromptState",
    "PROMPT_LABELS",
]
