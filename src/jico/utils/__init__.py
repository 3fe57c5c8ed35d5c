"""
Utility functions for jico.
"""

from .logging import log_config_param, mask_sensitive, setup_logging
from .output import format_json, print_api_error, print_json

__all__ = [
    "format_json",
    "log_config_param",
    "mask_sensitive",
    "print_api_error",
    "print_json",
    "setup_logging",
]
