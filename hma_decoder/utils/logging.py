"""Logging configuration for the hma-dump tool."""
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Union

from tqdm import tqdm

PACKAGE_LOGGER = 'hma_decoder'
FILE_HANDLER_NAME = 'hma_dump.file'
CONSOLE_HANDLER_NAME = 'hma_dump.console'


class TqdmLoggingHandler(logging.Handler):
    """Writes records through tqdm so they don't break an active progress bar."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


def setup_logging(log_dir: Union[str, Path], verbose: bool = False) -> Path:
    """Attach file and console handlers to the hma_decoder package logger.

    Args:
        log_dir: Directory for the timestamped log file
        verbose: Show DEBUG messages on the console (default: INFO)

    Returns:
        Path of the log file

    The file always records DEBUG so a failed batch can be inspected
    afterwards. Handlers from an earlier call are replaced; handlers owned
    by anything else are left alone.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            package_logger.removeHandler(handler)
            handler.close()

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_path / f'hma_dump_{timestamp}.log'
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s'
    ))
    file_handler.setLevel(logging.DEBUG)
    package_logger.addHandler(file_handler)

    console_handler = TqdmLoggingHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.addHandler(console_handler)

    package_logger.debug(f"Log file: {log_file}")
    return log_file
