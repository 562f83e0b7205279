"""Main entry point for the QuickReminder task list."""
import logging

import click

from quickreminder.cli import CLI
from quickreminder.logging_setup import setup_logging
from quickreminder.store import TaskStore

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


@click.command()
@click.option("--alt-screen/--no-alt-screen", default=None,
              help="Use the terminal's alternate screen (default: QUICKREMINDER_ALT_SCREEN or on).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", envvar="QUICKREMINDER_LOG_LEVEL", show_default=True,
              help="Logging level for stderr output.")
def main(alt_screen, log_level):
    """Interactive single-screen task list."""
    setup_logging(log_level)
    store = TaskStore()
    logger.info("starting task list")
    CLI(store, alt_screen=alt_screen).run()


if __name__ == "__main__":
    main()
