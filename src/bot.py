"""
Discord bot client for the Forever Box bot.
"""

import asyncio
import signal
import sys
from typing import Optional

import discord
from discord.ext import commands

from .config import TOKEN, get_setting
from .utils.app_state import AppState
from .utils.logging import logger


class ForeverBot(commands.Bot):
    """Prefix-command bot carrying the shared application state."""

    def __init__(self) -> None:
        intents = discord.Intents.default()
        intents.message_content = True  # Required for reading prefix commands
        super().__init__(
            command_prefix=get_setting("prefix"),
            intents=intents,
            help_command=None
        )
        self.state = AppState(shard_manager=self)

    async def setup_hook(self) -> None:
        """Called after login, before connecting to the gateway."""
        await self.load_owners()

    async def load_owners(self) -> None:
        """Fetch the application's owners and id from Discord.

        Raises:
            RuntimeError: If the application info cannot be retrieved.
        """
        try:
            info = await self.application_info()
        except discord.HTTPException as e:
            raise RuntimeError(f"Could not access application info: {e!r}") from e

        if info.team:
            owners = {member.id for member in info.team.members}
        else:
            owners = {info.owner.id}

        async with self.state.acquire_write() as state:
            state.owners = owners
            state.application_id = info.id
        self.owner_ids = set(owners)

    async def cleanup(self) -> None:
        """Cleanup resources before shutdown."""
        logger.info("Cleaning up resources...")
        counts = await self.state.snapshot_counts()
        if counts:
            usage = ", ".join(f"{name}={count}" for name, count in sorted(counts.items()))
            logger.info(f"Command usage this session: {usage}")
        # Close the Discord connection gracefully
        client = self.state.shard_manager
        if client is not None and not client.is_closed():
            await client.close()
        logger.info("Cleanup complete")


# Bot instance management using factory pattern
_bot_instance: Optional[ForeverBot] = None


def get_bot() -> ForeverBot:
    """Get or create the bot instance (singleton pattern)."""
    global _bot_instance
    if _bot_instance is None:
        _bot_instance = ForeverBot()
    return _bot_instance


def create_bot() -> ForeverBot:
    """Create a new bot instance (useful for testing)."""
    return ForeverBot()


def reset_bot() -> None:
    """Reset the global bot instance (useful for testing)."""
    global _bot_instance
    _bot_instance = None


async def on_ready_handler(bot: ForeverBot) -> None:
    """Handle the on_ready event, fired after every (re)connect."""
    await bot.change_presence(activity=discord.Game(name=get_setting("presence")))
    logger.info(f"{bot.user.name} is online.")


def setup_signal_handlers(bot: ForeverBot) -> None:
    """Set up signal handlers for graceful shutdown."""
    def signal_handler(sig: int, frame) -> None:
        logger.info(f"Received signal {sig}, initiating graceful shutdown...")
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is not None and loop.is_running():
            # Closing the client makes bot.run() return
            loop.create_task(bot.cleanup())
            return
        sys.exit(0)

    # Register signal handlers (SIGTERM may not exist on Windows)
    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, 'SIGTERM'):
        signal.signal(signal.SIGTERM, signal_handler)


def run_bot() -> None:
    """Start the Discord bot and block until it disconnects."""
    if not TOKEN:
        raise ValueError("TOKEN environment variable is required")

    bot = get_bot()

    @bot.event
    async def on_ready() -> None:
        """Discord event handler for when the bot is ready."""
        await on_ready_handler(bot)

    setup_signal_handlers(bot)

    logger.info("Starting Forever Box bot...")
    try:
        bot.run(TOKEN, log_handler=None)
    except discord.LoginFailure as e:
        raise SystemExit(f"Error logging in, is the token correct? {e}") from e
    except discord.DiscordException as e:
        logger.error(f"Client error: {e!r}")
