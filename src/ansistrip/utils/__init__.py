"""Utility modules for ansistrip.

Provides:
- logger: get_logger for namespaced logging
"""

from ansistrip.utils.logger import get_logger

__all__ = ["get_logger"]
