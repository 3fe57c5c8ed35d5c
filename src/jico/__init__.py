"""jico - CLI helper for Jira Cloud."""

__version__ = "0.0.4"

from .cli import main  # noqa: E402

__all__ = ["main", "__version__"]
