"""
Logging and argument validation helpers.
"""

from .logger import get_logger, setup_file_logging

__all__ = ["get_logger", "setup_file_logging"]
