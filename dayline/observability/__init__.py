"""
Observability module: structured logging.

Usage:
    from dayline.observability import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
"""

from .logging import HumanFormatter, JSONFormatter, configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
]
