"""
Module: engine.models

Purpose:
    Data models for a completed layout pass.
    Immutable dataclasses; a new LayoutResult is built on every pass.

Key Classes:
    - SectionLayout: Column geometry and final column heights of one section
    - LayoutResult: All placed attributes plus content size of a pass

Dependencies:
    - core.models: PlacedAttribute, IndexPath, Size
    - dataclasses (std)

Used By:
    - engine.waterfall: Produces LayoutResult
    - engine.preview: Renders LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from waterfall_layout.core.models import IndexPath, PlacedAttribute, Size


@dataclass(frozen=True)
class SectionLayout:
    """
    Geometry of one section after a pass.

    Attributes:
        index: Section index
        column_count: Columns actually used (after clamping)
        column_width: Width shared by every column in the section
        x_offsets: Left edge of each column
        y_offsets: Next free y of each column when the section finished
        item_count: Items placed in the section
        content_height: Running content height after the section
    """

    index: int
    column_count: int
    column_width: float
    x_offsets: tuple[float, ...]
    y_offsets: tuple[float, ...]
    item_count: int
    content_height: float

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0


@dataclass(frozen=True)
class LayoutResult:
    """
    Output of one layout pass.

    Attributes:
        attributes: Placed attributes in placement order
            (section-major, then item order within the section)
        sections: Per-section geometry, one per section
        content_width: Width the pass was computed for
        content_height: Total height of the laid-out content
        bounds_width: Host bounds width the pass was computed for

    Example:
        >>> result.content_size
        Size(width=100.0, height=100.0)
        >>> result.attribute_for(IndexPath(0, 2)).frame
        Rect(0, 50, 50, 50)
    """

    attributes: tuple[PlacedAttribute, ...]
    sections: tuple[SectionLayout, ...]
    content_width: float
    content_height: float
    bounds_width: float
    _by_index_path: Dict[IndexPath, PlacedAttribute] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: fill the lookup table via object.__setattr__
        object.__setattr__(
            self,
            "_by_index_path",
            {attr.index_path: attr for attr in self.attributes},
        )

    @property
    def content_size(self) -> Size:
        return Size(self.content_width, self.content_height)

    @property
    def item_count(self) -> int:
        """Number of placed items across all sections."""
        return len(self.attributes)

    def attribute_for(self, index_path: IndexPath) -> Optional[PlacedAttribute]:
        """Attribute of an item, or None if the pass did not place it."""
        return self._by_index_path.get(index_path)

    def to_dict(self) -> dict:
        """
        Serialize the pass for snapshot comparisons.

        Returns:
            Dict with content size and every attribute in placement order
        """
        return {
            "content_width": self.content_width,
            "content_height": self.content_height,
            "attributes": [attr.to_dict() for attr in self.attributes],
        }
