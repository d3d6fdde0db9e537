"""
Entry point: configures logging and starts the summarizer terminal UI.
"""

import logging

from meetnotes.core.config import settings
from meetnotes.core.logging import setup_logging
from meetnotes.features.ui.app import MeetNotesApp

logger = logging.getLogger("meetnotes.main")


def main():
    # Log to file so output doesn't corrupt the TUI
    setup_logging(level=settings.app.log_level, log_file=settings.app.log_file)
    logger.info("Starting meetnotes")

    app = MeetNotesApp()
    app.run()


if __name__ == "__main__":
    main()
