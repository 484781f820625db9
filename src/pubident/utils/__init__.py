"""Common utility functions for pubident."""

from pubident.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
