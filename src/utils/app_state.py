"""
Application state shared by every command task.

One AppState is created per bot and reached through ``bot.state``. All
reads and writes go through ``acquire_read()`` / ``acquire_write()``,
which serialize access with an asyncio read/write lock. Each acquisition
is atomic on its own; a sequence of acquisitions is not.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, Optional, Set, TYPE_CHECKING

from .rwlock import AsyncRWLock

if TYPE_CHECKING:
    import discord


@dataclass
class AppState:
    """Typed container for the bot's process-wide state."""
    command_counter: Dict[str, int] = field(default_factory=dict)
    owners: Set[int] = field(default_factory=set)
    application_id: Optional[int] = None
    # Gateway client that owns the shard connections
    shard_manager: Optional["discord.Client"] = None
    _lock: AsyncRWLock = field(default_factory=AsyncRWLock, repr=False, compare=False)

    @asynccontextmanager
    async def acquire_write(self) -> AsyncIterator["AppState"]:
        """Exclusive access to the state, released when the block exits."""
        async with self._lock.write():
            yield self

    @asynccontextmanager
    async def acquire_read(self) -> AsyncIterator["AppState"]:
        """Shared access to the state, released when the block exits.

        Callers must not mutate the state through a read handle.
        """
        async with self._lock.read():
            yield self

    async def get_command_count(self, command_name: str) -> int:
        """Return how many times a command has been invoked (0 if never)."""
        async with self.acquire_read() as state:
            return state.command_counter.get(command_name, 0)

    async def snapshot_counts(self) -> Dict[str, int]:
        """Return a copy of the command counter."""
        async with self.acquire_read() as state:
            return dict(state.command_counter)
