"""
Core Models Package

Immutable, validated data models describing layout geometry.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. A layout pass can never mutate a frame it already handed out
2. Attributes can be compared directly in determinism checks
3. Can be used as dict keys or in sets
"""

from .geometry import EdgeInsets, Rect, Size
from .attributes import IndexPath, PlacedAttribute

__all__ = [
    "EdgeInsets",
    "IndexPath",
    "PlacedAttribute",
    "Rect",
    "Size",
]
