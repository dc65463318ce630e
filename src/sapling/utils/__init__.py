"""Utility modules for Sapling.

Provides:
- logger: get_logger for namespaced logging
"""

from sapling.utils.logger import get_logger

__all__ = ["get_logger"]
