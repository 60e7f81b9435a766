"""
Module: attributes

Purpose:
    Identifies items and records where a layout pass put them.

Key Classes:
    - IndexPath: (section, item) address of an item
    - PlacedAttribute: An item's frame and column after a layout pass

Dependencies:
    - core.models.geometry: Rect

Used By:
    - engine.waterfall: Produces PlacedAttributes
    - engine.preview: Draws them
    - gui.waterfall_view: Paints and hit-tests them
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect


@dataclass(frozen=True, slots=True, order=True)
class IndexPath:
    """
    Address of an item within a sectioned collection.

    Ordering is section-major, which is also the placement order of
    a layout pass.

    Example:
        >>> IndexPath(0, 5) < IndexPath(1, 0)
        True
    """

    section: int
    item: int

    def __post_init__(self) -> None:
        """Validate indices on construction."""
        if self.section < 0:
            raise ValueError(f"section must be >= 0: {self.section}")
        if self.item < 0:
            raise ValueError(f"item must be >= 0: {self.item}")

    def __repr__(self) -> str:
        return f"IndexPath({self.section}, {self.item})"


@dataclass(frozen=True, slots=True)
class PlacedAttribute:
    """
    An item positioned by a layout pass.

    Attributes:
        index_path: The item this frame belongs to
        frame: Position and size in content coordinates
        column: Column of the item's section it was placed in
    """

    index_path: IndexPath
    frame: Rect
    column: int

    @property
    def section(self) -> int:
        return self.index_path.section

    @property
    def item(self) -> int:
        return self.index_path.item

    def to_dict(self) -> dict:
        """
        Serialize to dictionary (snapshot tests, debugging).

        Returns:
            Dict with section, item, column and frame
        """
        return {
            "section": self.index_path.section,
            "item": self.index_path.item,
            "column": self.column,
            "frame": self.frame.to_dict(),
        }
