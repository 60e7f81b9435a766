"""
Module: engine.host

Purpose:
    Abstract interface through which the layout engine discovers what
    to lay out. The engine never owns item data; it asks its host.

Key Classes:
    - LayoutHost: Abstract base for everything the engine queries
    - SectionData: One section's configuration and intrinsic item sizes
    - StaticLayoutHost: In-memory host backed by a list of SectionData

Dependencies:
    - core.models: Size, EdgeInsets
    - engine.config: SectionConfig

Used By:
    - engine.waterfall: Reads sections, items and geometry each pass
    - gui.waterfall_view: ViewLayoutHost implements LayoutHost
    - images.sizes: Builds SectionData from image folders
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from waterfall_layout.core.models import EdgeInsets, Size

from .config import SectionConfig


class LayoutHost(ABC):
    """
    Query interface consumed by WaterfallLayout.

    Every method is a pure, synchronous query. The engine calls them
    only while computing a pass, from the thread that drives the layout.
    """

    @abstractmethod
    def section_count(self) -> int:
        """Number of sections in the collection."""

    @abstractmethod
    def item_count(self, section: int) -> int:
        """Number of items in a section."""

    @abstractmethod
    def column_count(self, section: int) -> int:
        """Number of columns items in the section are spread across."""

    @abstractmethod
    def intrinsic_size(self, section: int, item: int) -> Size:
        """
        Intrinsic size of an item.

        Only the aspect ratio (height / width) is used; the engine scales
        every item to its column's width.
        """

    @abstractmethod
    def section_inset(self, section: int) -> EdgeInsets:
        """Padding around the section's columns."""

    @abstractmethod
    def line_spacing(self, section: int) -> float:
        """Vertical gap between stacked items in a column."""

    @abstractmethod
    def interitem_spacing(self, section: int) -> float:
        """Horizontal gap between adjacent columns."""

    @abstractmethod
    def bounds_width(self) -> float:
        """Current width of the host's visible bounds."""

    @abstractmethod
    def content_inset(self) -> EdgeInsets:
        """
        Insets applied by the host around its content.

        Only left and right matter to the engine: together with
        bounds_width() they determine the content width.
        """


@dataclass
class SectionData:
    """
    A section for StaticLayoutHost.

    Attributes:
        config: Column geometry for the section
        item_sizes: Intrinsic size of each item, in item order
    """

    config: SectionConfig = field(default_factory=SectionConfig)
    item_sizes: List[Size] = field(default_factory=list)

    @classmethod
    def from_ratios(
        cls,
        ratios: Iterable[float],
        config: Optional[SectionConfig] = None,
    ) -> SectionData:
        """
        Build a section from height/width ratios.

        Example:
            >>> SectionData.from_ratios([1.0, 1.5]).item_sizes
            [Size(width=1.0, height=1.0), Size(width=1.0, height=1.5)]
        """
        sizes = [Size(1.0, float(ratio)) for ratio in ratios]
        return cls(config=config or SectionConfig(), item_sizes=sizes)


class StaticLayoutHost(LayoutHost):
    """
    Host that answers from in-memory section data.

    Mutating the host does not notify anyone: whoever changes the
    sections or the bounds must invalidate the engine afterwards.

    Example:
        >>> host = StaticLayoutHost(
        ...     [SectionData(SectionConfig(column_count=2), [Size(1, 1)] * 3)],
        ...     bounds_width=100,
        ... )
        >>> host.item_count(0)
        3
    """

    def __init__(
        self,
        sections: Sequence[SectionData] = (),
        bounds_width: float = 0.0,
        content_inset: Optional[EdgeInsets] = None,
    ):
        self.sections: List[SectionData] = list(sections)
        self.width = bounds_width
        self.inset = content_inset or EdgeInsets()

    def section_count(self) -> int:
        return len(self.sections)

    def item_count(self, section: int) -> int:
        return len(self.sections[section].item_sizes)

    def column_count(self, section: int) -> int:
        return self.sections[section].config.column_count

    def intrinsic_size(self, section: int, item: int) -> Size:
        return self.sections[section].item_sizes[item]

    def section_inset(self, section: int) -> EdgeInsets:
        return self.sections[section].config.section_inset

    def line_spacing(self, section: int) -> float:
        return self.sections[section].config.line_spacing

    def interitem_spacing(self, section: int) -> float:
        return self.sections[section].config.interitem_spacing

    def bounds_width(self) -> float:
        return self.width

    def content_inset(self) -> EdgeInsets:
        return self.inset
