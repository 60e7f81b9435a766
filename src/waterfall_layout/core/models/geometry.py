"""
Module: geometry

Purpose:
    Provides the plain geometry value types used throughout the layout
    engine: Size, EdgeInsets and Rect. Coordinates are floats in the
    content coordinate space of the host (origin top-left, y grows down).

Key Classes:
    - Size: Width/height pair (intrinsic item sizes, content size)
    - EdgeInsets: Top/left/bottom/right padding
    - Rect: Axis-aligned rectangle with intersection and hit testing

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.attributes.PlacedAttribute
    - engine.waterfall: Frame computation and rect queries
    - engine.host: Host query return types
    - gui.waterfall_view: Viewport conversion

Notes:
    These types carry host-provided data, which may be degenerate
    (negative, zero or non-finite). They do not validate on
    construction; the engine sanitizes values before using them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Size:
    """
    Width/height pair.

    Example:
        >>> Size(4, 3).aspect_ratio
        0.75
    """

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """
        Height divided by width.

        Raises:
            ZeroDivisionError: If width is zero
        """
        return self.height / self.width

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class EdgeInsets:
    """
    Padding applied around a region.

    Attributes:
        top: Space above the content
        left: Space left of the content
        bottom: Space below the content
        right: Space right of the content

    Example:
        >>> EdgeInsets(top=10, left=5, bottom=10, right=5).horizontal
        10
    """

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> EdgeInsets:
        """Same inset on all four edges."""
        return cls(top=value, left=value, bottom=value, right=value)

    @property
    def horizontal(self) -> float:
        """Total of left and right insets."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Total of top and bottom insets."""
        return self.top + self.bottom


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned rectangle.

    The region is [x, max_x) x [y, max_y). Two rectangles intersect
    only when they overlap by a positive amount on both axes, so
    rectangles that merely touch along an edge do not intersect and an
    empty rectangle intersects nothing.

    Example:
        >>> a = Rect(0, 0, 50, 50)
        >>> a.intersects(Rect(50, 0, 50, 50))  # shared edge only
        False
        >>> a.intersects(Rect(10, 10, 5, 5))
        True
    """

    x: float
    y: float
    width: float
    height: float

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def max_x(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def max_y(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has no area."""
        return not (self.width > 0 and self.height > 0)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def intersects(self, other: Rect) -> bool:
        """
        Check whether two rectangles share a region of positive area.

        Args:
            other: Rectangle to test against

        Returns:
            True if the overlap is > 0 on both axes
        """
        overlap_w = min(self.max_x, other.max_x) - max(self.x, other.x)
        overlap_h = min(self.max_y, other.max_y) - max(self.y, other.y)
        return overlap_w > 0 and overlap_h > 0

    def contains_point(self, px: float, py: float) -> bool:
        """
        Check whether a point lies inside the rectangle.

        Left/top edges are inclusive, right/bottom edges exclusive.
        """
        return self.x <= px < self.max_x and self.y <= py < self.max_y

    def offset(self, dx: float, dy: float) -> Rect:
        """Copy of this rectangle translated by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def as_tuple(self) -> tuple[float, float, float, float]:
        """(x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Rect:
        """
        Deserialize from dictionary.

        Args:
            data: Dict with x, y, width, height

        Returns:
            Rect instance
        """
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
        )

    def __repr__(self) -> str:
        return f"Rect({self.x:g}, {self.y:g}, {self.width:g}, {self.height:g})"
