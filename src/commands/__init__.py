"""
Discord bot commands for the Forever Box bot.
"""

from .lifecycle import CommandResult, before_command, after_command, invoke_with_hooks
from .ping import setup_ping_command

__all__ = [
    "CommandResult",
    "before_command",
    "after_command",
    "invoke_with_hooks",
    "setup_ping_command",
]
