"""Utility modules for blockscan.

Provides:
- logger: get_logger for logging
"""

from blockscan.utils.logger import get_logger

__all__ = ["get_logger"]
