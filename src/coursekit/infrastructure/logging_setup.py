import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Uses stderr so that log output never mixes with course data written to stdout
log_console = Console(file=sys.stderr)


def setup_logging(
    log_level_name: str,
    console_logging: bool = True,
    log_file: Path | None = None,
) -> None:
    """Configure logging for coursekit.

    Args:
        log_level_name: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_logging: If True, log to stderr via Rich
        log_file: If given, additionally log everything to this file
    """
    log_level = logging.getLevelName(log_level_name.upper())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if console_logging:
        console_handler = RichHandler(
            console=log_console,
            rich_tracebacks=True,
            show_path=False,
        )
        console_handler.setLevel(log_level)
        root_logger.addHandler(console_handler)

    if log_file is not None:
        # 10 MB max, keep 3 backups
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    # Let handlers filter
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger("coursekit").setLevel(log_level)
