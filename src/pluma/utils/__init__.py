"""Utility modules for Pluma.

Provides:
- logger: get_logger for namespaced logging, location_suffix for messages
"""

from pluma.utils.logger import get_logger, location_suffix

__all__ = ["get_logger", "location_suffix"]
