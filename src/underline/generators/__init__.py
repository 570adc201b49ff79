"""
Generators for numeric sequences.
"""

from underline.generators.ranges import RangeSpec, range, range_of

__all__ = ["RangeSpec", "range", "range_of"]
