"""
Module: engine.waterfall

Purpose:
    Waterfall (masonry) layout engine. Places every item of every
    section into the currently shortest column of its section, scaling
    items to the column width while keeping their aspect ratio.

Key Functions:
    - compute_layout(): One full, uncached layout pass over a host
    - content_width_for(): Content width implied by a host's bounds

Key Classes:
    - WaterfallLayout: Lazily computed, cached layout bound to a host
    - LayoutHostMissingError: Raised when a pass is needed without a host

Algorithm:
    Per section, in order:
    1. column_width = (content_width - insets - spacing*(n-1)) / n
    2. x of column c = inset.left + c*(column_width + spacing)
    3. every column starts at content_height + inset.top
    4. each item goes to the column with the smallest y (lowest index
       on ties), height = column_width * (h / w)
    5. after the section's last item, inset.bottom is added once

Dependencies:
    - engine.host: LayoutHost
    - engine.config: SectionConfig
    - engine.models: LayoutResult, SectionLayout

Used By:
    - gui.waterfall_view: Drives painting and scrolling
    - engine.preview: Renders results
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from waterfall_layout.core.models import (
    EdgeInsets,
    IndexPath,
    PlacedAttribute,
    Rect,
    Size,
)

from .config import SectionConfig
from .host import LayoutHost
from .models import LayoutResult, SectionLayout

logger = logging.getLogger(__name__)


class LayoutHostMissingError(RuntimeError):
    """A layout pass was requested but no LayoutHost is attached."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Host value sanitizing
# ─────────────────────────────────────────────────────────────────────────────

def _non_negative(value: float, name: str, section: int) -> float:
    """Clamp a host-provided spacing/inset to a finite value >= 0."""
    value = float(value)
    if not math.isfinite(value) or value < 0:
        logger.warning(f"Section {section}: {name}={value} is invalid, using 0")
        return 0.0
    return value


def _section_config(host: LayoutHost, section: int) -> SectionConfig:
    """Read one section's geometry from the host, clamping bad values."""
    column_count = host.column_count(section)
    if not math.isfinite(column_count) or column_count < 1:
        logger.warning(
            f"Section {section}: column_count={column_count} is invalid, using 1"
        )
        column_count = 1

    raw_inset = host.section_inset(section)
    inset = EdgeInsets(
        top=_non_negative(raw_inset.top, "section_inset.top", section),
        left=_non_negative(raw_inset.left, "section_inset.left", section),
        bottom=_non_negative(raw_inset.bottom, "section_inset.bottom", section),
        right=_non_negative(raw_inset.right, "section_inset.right", section),
    )

    return SectionConfig(
        column_count=int(column_count),
        section_inset=inset,
        line_spacing=_non_negative(host.line_spacing(section), "line_spacing", section),
        interitem_spacing=_non_negative(
            host.interitem_spacing(section), "interitem_spacing", section
        ),
    )


def _aspect_ratio(size: Size, index_path: IndexPath) -> float:
    """
    Height/width ratio of an intrinsic size.

    Degenerate sizes (non-finite, width <= 0, height < 0) are laid out
    as zero-height items so the rest of the pass is unaffected.
    """
    width, height = float(size.width), float(size.height)
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height < 0:
        logger.warning(
            f"Item {index_path}: intrinsic size {width}x{height} is degenerate, "
            f"placing as zero height"
        )
        return 0.0
    return height / width


def content_width_for(host: LayoutHost) -> float:
    """
    Width available to sections: host bounds minus horizontal content insets.

    Never negative; non-finite widths count as 0.
    """
    bounds_width = float(host.bounds_width())
    if not math.isfinite(bounds_width):
        bounds_width = 0.0
    inset = host.content_inset()
    return max(0.0, bounds_width - (inset.left + inset.right))


# ─────────────────────────────────────────────────────────────────────────────
# Layout pass
# ─────────────────────────────────────────────────────────────────────────────

def compute_layout(host: LayoutHost) -> LayoutResult:
    """
    Run one complete layout pass.

    Queries the host for every section and item and places each item
    exactly once. The host is only read, never modified.

    Args:
        host: Source of sections, items and geometry

    Returns:
        LayoutResult with attributes in placement order

    Example:
        >>> host = StaticLayoutHost(
        ...     [SectionData.from_ratios([1, 1, 1], SectionConfig(column_count=2))],
        ...     bounds_width=100,
        ... )
        >>> [a.frame for a in compute_layout(host).attributes]
        [Rect(0, 0, 50, 50), Rect(50, 0, 50, 50), Rect(0, 50, 50, 50)]
    """
    content_width = content_width_for(host)
    content_height = 0.0

    attributes: List[PlacedAttribute] = []
    sections: List[SectionLayout] = []

    for section in range(host.section_count()):
        config = _section_config(host, section)
        item_count = max(0, host.item_count(section))

        column_width = config.column_width(content_width)
        if column_width <= 0:
            if item_count:
                logger.warning(
                    f"Section {section}: no room for {config.column_count} columns "
                    f"in width {content_width:g}, placing items with zero width"
                )
            column_width = 0.0

        x_offsets = config.column_x_offsets(column_width)
        # Every column starts below everything placed so far
        y_offsets = [content_height + config.section_inset.top] * config.column_count

        for item in range(item_count):
            index_path = IndexPath(section, item)
            # list.index returns the first minimum: lowest column wins ties
            column = y_offsets.index(min(y_offsets))
            height = column_width * _aspect_ratio(host.intrinsic_size(section, item), index_path)

            frame = Rect(x_offsets[column], y_offsets[column], column_width, height)
            attributes.append(PlacedAttribute(index_path=index_path, frame=frame, column=column))

            content_height = max(content_height, frame.max_y)
            y_offsets[column] += height + config.line_spacing

            if item == item_count - 1:
                content_height += config.section_inset.bottom

        sections.append(SectionLayout(
            index=section,
            column_count=config.column_count,
            column_width=column_width,
            x_offsets=tuple(x_offsets),
            y_offsets=tuple(y_offsets),
            item_count=item_count,
            content_height=content_height,
        ))
        logger.debug(
            f"Section {section}: {item_count} items in {config.column_count} columns "
            f"of {column_width:g}, content height now {content_height:g}"
        )

    return LayoutResult(
        attributes=tuple(attributes),
        sections=tuple(sections),
        content_width=content_width,
        content_height=content_height,
        bounds_width=float(host.bounds_width()),
    )


class WaterfallLayout:
    """
    Cached waterfall layout bound to a LayoutHost.

    The layout is computed lazily the first time geometry is queried
    and reused until invalidate() is called. Whoever changes what the
    host reports (bounds, items, configuration) must invalidate.

    Not thread-safe: drive one instance from a single thread.

    Example:
        >>> layout = WaterfallLayout(host)
        >>> layout.content_size()
        Size(width=100.0, height=100.0)
        >>> [a.index_path for a in layout.attributes_in_rect(Rect(0, 0, 10, 10))]
        [IndexPath(0, 0)]
    """

    def __init__(self, host: Optional[LayoutHost] = None):
        self._host = host
        self._result: Optional[LayoutResult] = None
        self.pass_count = 0

    # ─────────────────────────────────────────────────────────────────────────
    # Host
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def host(self) -> Optional[LayoutHost]:
        return self._host

    def attach(self, host: LayoutHost) -> None:
        """Use a new host; any cached result is discarded."""
        self._host = host
        self.invalidate()

    def detach(self) -> None:
        """Forget the host; the next pass raises LayoutHostMissingError."""
        self._host = None
        self.invalidate()

    def _require_host(self) -> LayoutHost:
        if self._host is None:
            raise LayoutHostMissingError(
                "A LayoutHost must be attached before the layout can be computed"
            )
        return self._host

    # ─────────────────────────────────────────────────────────────────────────
    # Cache lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_prepared(self) -> bool:
        """True while a computed result is cached."""
        return self._result is not None

    @property
    def content_height(self) -> float:
        """Height of the cached result, 0 when nothing is cached. Never triggers a pass."""
        return self._result.content_height if self._result is not None else 0.0

    def invalidate(self) -> None:
        """Drop the cached result; the next query recomputes everything."""
        if self._result is not None:
            logger.debug(f"Invalidating layout of {self._result.item_count} items")
        self._result = None

    def prepare(self) -> LayoutResult:
        """
        Compute the layout if nothing is cached.

        Calling this again without an intervening invalidate() is a no-op.

        Returns:
            The cached LayoutResult

        Raises:
            LayoutHostMissingError: If no host is attached
        """
        if self._result is not None:
            return self._result

        host = self._require_host()
        result = compute_layout(host)
        self._result = result
        self.pass_count += 1

        logger.info(
            f"Laid out {result.item_count} items in {len(result.sections)} sections "
            f"({result.content_width:g}x{result.content_height:g})"
        )
        return result

    @property
    def result(self) -> LayoutResult:
        """The cached result, computing it first if needed."""
        return self.prepare()

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def content_width(self) -> float:
        """Content width from the host's current bounds (not cached)."""
        return content_width_for(self._require_host())

    def content_size(self) -> Size:
        """
        Size of the scrollable content.

        Width reflects the host's current bounds; height reflects the
        last completed pass (a pass runs first if none is cached).
        """
        result = self.prepare()
        return Size(self.content_width(), result.content_height)

    def attributes_in_rect(self, rect: Rect) -> List[PlacedAttribute]:
        """
        Attributes whose frame intersects rect.

        Args:
            rect: Region in content coordinates (usually the viewport)

        Returns:
            Matching attributes in placement order (not sorted by position)
        """
        return [attr for attr in self.prepare().attributes if attr.frame.intersects(rect)]

    def attributes_for_item(self, index_path: IndexPath) -> Optional[PlacedAttribute]:
        """Attribute of a single item, or None if it does not exist."""
        return self.prepare().attribute_for(index_path)

    def attribute_at(self, x: float, y: float) -> Optional[PlacedAttribute]:
        """
        Attribute whose frame contains a point (hit testing).

        Frames of one pass never overlap, so at most one item matches.
        """
        for attr in self.prepare().attributes:
            if attr.frame.contains_point(x, y):
                return attr
        return None

    def should_invalidate_for_bounds_width(self, width: float) -> bool:
        """
        Whether a new bounds width makes the cached result stale.

        Returns False when nothing is cached (the next query computes
        against the new width anyway).
        """
        if self._result is None:
            return False
        return width != self._result.bounds_width
