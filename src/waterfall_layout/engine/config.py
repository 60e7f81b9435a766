"""
Module: engine.config

Purpose:
    Configuration for the waterfall layout engine.
    Defines per-section column geometry and the responsive column policy.

Key Classes:
    - SectionConfig: Immutable per-section geometry
    - ColumnPolicy: Immutable settings for choosing column counts by width

Dependencies:
    - dataclasses (std)
    - core.models.geometry: EdgeInsets

Used By:
    - engine.host: StaticLayoutHost answers queries from SectionConfigs
    - engine.waterfall: Builds a sanitized SectionConfig per section per pass
    - gui.waterfall_view: ColumnPolicy for viewport-driven columns
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from waterfall_layout.core.models import EdgeInsets


DEFAULT_COLUMN_COUNT = 2
DEFAULT_LINE_SPACING = 0.0
DEFAULT_INTERITEM_SPACING = 0.0

DEFAULT_MIN_COLUMN_WIDTH = 160.0
DEFAULT_MAX_COLUMNS = 12


def _check_spacing(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be finite and >= 0: {value}")


@dataclass(frozen=True)
class SectionConfig:
    """
    Geometry of one section (immutable).

    Attributes:
        column_count: Number of columns items are distributed across
        section_inset: Padding around the section's columns
        line_spacing: Vertical gap between stacked items in a column
        interitem_spacing: Horizontal gap between adjacent columns

    Example:
        >>> config = SectionConfig(column_count=3, interitem_spacing=8)
        >>> config.column_width(content_width=316)
        100.0
    """

    column_count: int = DEFAULT_COLUMN_COUNT
    section_inset: EdgeInsets = field(default_factory=EdgeInsets)
    line_spacing: float = DEFAULT_LINE_SPACING
    interitem_spacing: float = DEFAULT_INTERITEM_SPACING

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.column_count < 1:
            raise ValueError(f"column_count must be >= 1: {self.column_count}")
        _check_spacing("line_spacing", self.line_spacing)
        _check_spacing("interitem_spacing", self.interitem_spacing)
        inset = self.section_inset
        for name in ("top", "left", "bottom", "right"):
            _check_spacing(f"section_inset.{name}", getattr(inset, name))

    def column_width(self, content_width: float) -> float:
        """
        Width of one column for the given content width.

        May be zero or negative when insets and spacing exceed the
        content width; the engine clamps that case.
        """
        gaps = self.interitem_spacing * (self.column_count - 1)
        usable = content_width - self.section_inset.horizontal - gaps
        return usable / self.column_count

    def column_x_offsets(self, column_width: float) -> list[float]:
        """Left edge of each column, fixed for the lifetime of a section."""
        step = column_width + self.interitem_spacing
        return [self.section_inset.left + column * step for column in range(self.column_count)]


@dataclass(frozen=True)
class ColumnPolicy:
    """
    Settings for choosing a column count from the available width.

    Attributes:
        min_column_width: Columns are never narrower than this
        spacing: Horizontal gap between columns, counted when fitting
        max_columns: Upper bound on the column count
    """

    min_column_width: float = DEFAULT_MIN_COLUMN_WIDTH
    spacing: float = DEFAULT_INTERITEM_SPACING
    max_columns: int = DEFAULT_MAX_COLUMNS

    def __post_init__(self) -> None:
        if self.min_column_width <= 0:
            raise ValueError(f"min_column_width must be > 0: {self.min_column_width}")
        _check_spacing("spacing", self.spacing)
        if self.max_columns < 1:
            raise ValueError(f"max_columns must be >= 1: {self.max_columns}")
