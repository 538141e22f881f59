"""Editor commands and the verbs that apply them."""

from . import commands
from .commands import Command, command_name

__all__ = ["commands", "Command", "command_name"]
