"""
Configuration, logging and output helpers for the sum checker.

The environment file is loaded into os.environ with python-dotenv; values
already present in the environment win.
"""

import logging
import os

from dotenv import load_dotenv

from sum_checker import SumCheckException

TARGET_URL_VAR = "TARGET_URL"
LOG_LEVEL_VAR = "LOG_LEVEL"
LOGGER_NAME = "sum_checker"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def load_config(config_file):
    """
    Load environment variables from a .env style file.

    Args:
        config_file (str): Path to the environment file

    Raises:
        SumCheckException: If the file does not exist or cannot be read
    """
    if not os.path.isfile(config_file):
        raise SumCheckException(f"error loading config file: {config_file}: no such file")
    try:
        load_dotenv(config_file, override=False)
    except (OSError, UnicodeDecodeError) as e:
        raise SumCheckException(f"error loading config file: {e}") from e


def get_target_url():
    """
    Return the URL to check, taken from the TARGET_URL environment variable.

    Raises:
        SumCheckException: If the variable is unset or empty
    """
    url = os.environ.get(TARGET_URL_VAR, "")
    if not url:
        raise SumCheckException("URL for the HTTP request is not set in the configuration")
    return url


def _resolve_level(level):
    if level is None:
        level = os.environ.get(LOG_LEVEL_VAR, 'INFO')
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    return numeric_level


def init_logger(log_file, level=None):
    """
    Configure the sum_checker logger to append timestamped lines to a file.

    Calling this again replaces the previously installed file handler.

    Args:
        log_file (str): Path of the log file, created if missing
        level (str): Optional level name, defaults to $LOG_LEVEL or INFO

    Returns:
        logging.Logger: The configured logger

    Raises:
        SumCheckException: If the log file cannot be opened
    """
    try:
        handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    except OSError as e:
        raise SumCheckException(f"error creating log file: {e}") from e
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False
    return logger


def write_report(output_file, report):
    """
    Create (or truncate) the output file and write the report into it.

    Raises:
        SumCheckException: If the file cannot be written
    """
    try:
        with open(output_file, 'w', encoding='utf-8') as file:
            file.write(report)
    except OSError as e:
        raise SumCheckException(f"error creating output file: {e}") from e
