"""
Forever Box Bot
A Discord bot answering the f!ping command.

Entry point for the application.
"""

from src.config import init_config
from src.bot import get_bot, run_bot
from src.commands import setup_ping_command
from src.utils.startup_checks import run_startup_checks

# Initialize configuration (load .env and config.yaml)
init_config()

# Exits with an error before any network access if TOKEN is missing
run_startup_checks(exit_on_critical=True)

bot = get_bot()
setup_ping_command(bot)

if __name__ == "__main__":
    run_bot()
