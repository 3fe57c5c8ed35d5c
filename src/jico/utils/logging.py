"""Logging utilities for jico.

Log records always go to stderr so that stdout carries nothing but the JSON
printed for the user.
"""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure jico logging.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured logger instance
    """
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for logger_name in ("jico", "jico.jira"):
        logging.getLogger(logger_name).setLevel(level)

    # atlassian-python-api logs every request at DEBUG; keep it one step quieter
    logging.getLogger("atlassian").setLevel(max(level, logging.INFO))

    # Return the application logger
    return logging.getLogger("jico")


def level_from_verbosity(verbose: int, very_verbose_env: bool, verbose_env: bool) -> int:
    """Map ``-v`` count and the JICO_*VERBOSE switches to a logging level."""
    if verbose == 1:
        return logging.INFO
    if verbose >= 2:
        return logging.DEBUG
    if very_verbose_env:
        return logging.DEBUG
    if verbose_env:
        return logging.INFO
    return logging.WARNING


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter at INFO, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
