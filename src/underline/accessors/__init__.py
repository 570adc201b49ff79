"""
Safe navigation of nested objects.
"""

from underline.accessors.paths import get, split_path

__all__ = ["get", "split_path"]
