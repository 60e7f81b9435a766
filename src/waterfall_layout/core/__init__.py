"""Core value types shared by the engine, the image helpers and the GUI."""

from .models import EdgeInsets, IndexPath, PlacedAttribute, Rect, Size

__all__ = [
    "EdgeInsets",
    "IndexPath",
    "PlacedAttribute",
    "Rect",
    "Size",
]
