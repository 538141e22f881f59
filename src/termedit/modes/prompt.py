"""Input mode and prompt text shown on the status line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InputMode(str, Enum):
    """Available input modes."""

    EDITING = "editing"
    FINDING = "finding"
    OPEN_FILE = "open_file"
    SAVE_FILE = "save_file"


PROMPT_LABELS = {
    InputMode.FINDING: "Find: ",
    InputMode.OPEN_FILE: "Open file: ",
    InputMode.SAVE_FILE: "Save file: ",
}


@dataclass(slots=True)
class PromptState:
    """Mode plus the in-progress text of each prompt."""

    mode: InputMode = InputMode.EDITING
    find_input: str = ""
    filename_input: str = ""
    confirmed_find_term: Optional[str] = None

    @property
    def input_text(self) -> str:
        if self.mode is InputMode.FINDING:
            return self.find_input
        if self.mode in (InputMode.OPEN_FILE, InputMode.SAVE_FILE):
            return self.filename_input
        return ""

    def type_text(self, text: str) -> None:
        if self.mode is InputMode.FINDING:
            self.find_input += text
        elif self.mode in (InputMode.OPEN_FILE, InputMode.SAVE_FILE):
            self.filename_input += text

    def erase(self) -> None:
        if self.mode is InputMode.FINDING:
            self.find_input = self.find_input[:-1]
        elif self.mode in (InputMode.OPEN_FILE, InputMode.SAVE_FILE):
            self.filename_input = self.filename_input[:-1]

    def start(self, mode: InputMode) -> None:
        self.mode = mode
        if mode is InputMode.FINDING:
            self.find_input = ""
            self.confirmed_find_term = None
        elif mode in (InputMode.OPEN_FILE, InputMode.SAVE_FILE):
            self.filename_input = ""

    def finish(self) -> None:
        self.mode = InputMode.EDITING

    def status_text(self, message: str = "") -> str:
        label = PROMPT_LABELS.get(self.mode)
        if label is None:
            return message
        return f"{label}{self.input_text}"


__all__ = ["InputMode", "PromptState", "PROMPT_LABELS"]
