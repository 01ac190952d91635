"""
The ping command: replies "Pong!" in the channel it was invoked from.
"""

from discord.ext import commands

from ..config import PING_REPLY
from .lifecycle import invoke_with_hooks


async def send_pong(ctx: commands.Context) -> None:
    """Send the ping reply to the originating channel."""
    await ctx.send(PING_REPLY)


def setup_ping_command(bot: commands.Bot) -> commands.Command:
    """Register the ping command on the bot.

    Returns:
        The registered command.
    """
    @bot.command(name="ping", help="Replies with Pong!")
    async def ping(ctx: commands.Context) -> None:
        await invoke_with_hooks(ctx.bot.state, "ping", lambda: send_pong(ctx))

    return ping
