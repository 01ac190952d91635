"""
Lifecycle hooks wrapped around every command.

- before_command: counts the invocation and decides whether it may run
- after_command: reports failed commands
- invoke_with_hooks: runs a command body between the two hooks
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..utils.app_state import AppState
from ..utils.logging import logger


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command body: success, or failure with its error."""
    error: Optional[BaseException] = None

    @classmethod
    def success(cls) -> "CommandResult":
        return cls()

    @classmethod
    def failure(cls, error: BaseException) -> "CommandResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


async def before_command(state: AppState, command_name: str) -> bool:
    """Increment the invocation counter for a command.

    Args:
        state: Shared application state holding the counter.
        command_name: Name of the command about to run.

    Returns:
        True to let the command run. Returning False would skip both the
        command body and the after hook.
    """
    async with state.acquire_write() as data:
        data.command_counter[command_name] = data.command_counter.get(command_name, 0) + 1
    return True


def after_command(command_name: str, result: CommandResult) -> None:
    """Log a command's error, if it failed. Successful commands are silent."""
    if result.ok:
        return
    logger.error(f"Command '{command_name}' returned error {result.error!r}")


async def invoke_with_hooks(
    state: AppState,
    command_name: str,
    body: Callable[[], Awaitable[None]]
) -> Optional[CommandResult]:
    """Run a command body between the before and after hooks.

    Errors raised by the body are captured into the result and reported by
    after_command; they are never re-raised.

    Returns:
        The command's result, or None if before_command refused to run it.
    """
    if not await before_command(state, command_name):
        return None

    try:
        await body()
    except Exception as e:
        result = CommandResult.failure(e)
    else:
        result = CommandResult.success()

    after_command(command_name, result)
    return result
