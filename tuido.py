# tuido.py
#
# Description:
# Entry point. Reads the settings, configures logging and runs the dashboard
# until the user quits.
#

import logging
import sys

from logging_setup import setup_logging
from settings import Settings
from storage import JsonStorage
from task_manager import TaskManager
from views import TuidoApp

logger = logging.getLogger(__name__)


def main() -> None:
    """Launch the dashboard. There are no subcommands."""
    settings = Settings.from_env()
    setup_logging(settings.log_file, settings.log_level)
    logger.info("Starting with data file %s", settings.db_file)

    # Initialize backend components
    storage = JsonStorage(settings.db_file)
    task_manager = TaskManager(storage)

    app = TuidoApp(task_manager, status_timeout=settings.status_timeout)
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
