"""Utility modules for Notula.

Provides:
- logger: get_logger for namespaced logging
"""

from notula.utils.logger import get_logger

__all__ = ["get_logger"]
