"""
Logging configuration for the user screen
Application loggers go to stdout, httpx request lines only at WARNING and above
"""

import logging
import sys
from typing import Optional, Union


def setup_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure logging for the screen, its controller and the User API client

    Called once when user_admin.main is imported, with LOG_LEVEL from settings.

    Args:
        level: Logging level as string (e.g., 'INFO', 'DEBUG'), a logging
            constant, or None for default INFO
    """
    if level is None:
        log_level = logging.INFO
    elif isinstance(level, str):
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        # If it's already an integer (logging constant), use it directly
        log_level = level if isinstance(level, int) else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # httpx logs every request to the User API at INFO
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
