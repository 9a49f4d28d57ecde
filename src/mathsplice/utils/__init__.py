"""Utility modules for mathsplice.

Provides:
- logger: get_logger for namespaced logging
"""

from mathsplice.utils.logger import get_logger

__all__ = ["get_logger"]
