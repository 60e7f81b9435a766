"""
Waterfall scroll view.

A QAbstractScrollArea that lays its items out with WaterfallLayout and
acts as the layout's host: the viewport supplies the bounds width, the
view's sections supply items and geometry.
"""
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

from PySide6.QtCore import QRectF, Qt, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QAbstractScrollArea

from waterfall_layout.core.models import EdgeInsets, IndexPath, PlacedAttribute, Rect, Size
from waterfall_layout.engine.columns import columns_for_policy
from waterfall_layout.engine.config import ColumnPolicy
from waterfall_layout.engine.host import LayoutHost, SectionData
from waterfall_layout.engine.preview import COLUMN_COLORS
from waterfall_layout.engine.waterfall import WaterfallLayout, content_width_for

ItemPainter = Callable[[QPainter, QRectF, PlacedAttribute], None]


class ViewLayoutHost(LayoutHost):
    """
    LayoutHost answering from a WaterfallView.

    With a ColumnPolicy set on the view, column counts follow the
    viewport width instead of each section's configured count.
    """

    def __init__(self, view: WaterfallView):
        self._view = view

    def _section(self, section: int) -> SectionData:
        return self._view.section_data()[section]

    def section_count(self) -> int:
        return len(self._view.section_data())

    def item_count(self, section: int) -> int:
        return len(self._section(section).item_sizes)

    def column_count(self, section: int) -> int:
        config = self._section(section).config
        policy = self._view.column_policy()
        if policy is None:
            return config.column_count
        width = content_width_for(self) - config.section_inset.horizontal
        return columns_for_policy(width, policy)

    def intrinsic_size(self, section: int, item: int) -> Size:
        return self._section(section).item_sizes[item]

    def section_inset(self, section: int) -> EdgeInsets:
        return self._section(section).config.section_inset

    def line_spacing(self, section: int) -> float:
        return self._section(section).config.line_spacing

    def interitem_spacing(self, section: int) -> float:
        return self._section(section).config.interitem_spacing

    def bounds_width(self) -> float:
        return float(self._view.viewport().width())

    def content_inset(self) -> EdgeInsets:
        return self._view.content_margins()


class WaterfallView(QAbstractScrollArea):
    """
    Vertically scrolling waterfall of items.

    Items are painted as colored tiles by default; pass an item painter
    to draw real content (thumbnails, text) into each frame.
    """

    itemClicked = Signal(int, int)  # section, item
    layoutChanged = Signal()

    def __init__(
        self,
        parent=None,
        column_policy: Optional[ColumnPolicy] = None,
        content_margins: Optional[EdgeInsets] = None,
    ):
        super().__init__(parent)

        self._sections: List[SectionData] = []
        self._column_policy = column_policy
        self._content_margins = content_margins or EdgeInsets()
        self._item_painter: Optional[ItemPainter] = None
        self._layout = WaterfallLayout(ViewLayoutHost(self))

        # A scrollbar appearing/disappearing would change the width and relayout again
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOn)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.verticalScrollBar().setSingleStep(20)

    # ------------------------------------------------------------------
    # Data and configuration
    # ------------------------------------------------------------------

    def waterfall_layout(self) -> WaterfallLayout:
        return self._layout

    def sections(self) -> List[SectionData]:
        return list(self._sections)

    def section_data(self) -> Sequence[SectionData]:
        """The view's sections without copying; treat as read-only."""
        return self._sections

    def set_sections(self, sections: Sequence[SectionData]):
        self._sections = list(sections)
        self.relayout()

    def column_policy(self) -> Optional[ColumnPolicy]:
        return self._column_policy

    def set_column_policy(self, policy: Optional[ColumnPolicy]):
        self._column_policy = policy
        self.relayout()

    def content_margins(self) -> EdgeInsets:
        return self._content_margins

    def set_content_margins(self, margins: EdgeInsets):
        self._content_margins = margins
        self.relayout()

    def set_item_painter(self, painter: Optional[ItemPainter]):
        self._item_painter = painter
        self.viewport().update()

    def relayout(self):
        """Invalidate the layout after data, policy or margin changes."""
        self._layout.invalidate()
        self._update_scroll_range()
        self.viewport().update()
        self.layoutChanged.emit()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def visible_rect(self) -> Rect:
        """Viewport area in content coordinates."""
        margins = self._content_margins
        return Rect(
            -margins.left,
            self.verticalScrollBar().value() - margins.top,
            self.viewport().width(),
            self.viewport().height(),
        )

    def visible_index_paths(self) -> List[IndexPath]:
        return [attr.index_path for attr in self._layout.attributes_in_rect(self.visible_rect())]

    def _to_viewport(self, frame: Rect) -> QRectF:
        visible = self.visible_rect()
        return QRectF(frame.x - visible.x, frame.y - visible.y, frame.width, frame.height)

    def _update_scroll_range(self):
        content = self._layout.content_size()
        total = content.height + self._content_margins.vertical
        maximum = max(0, math.ceil(total - self.viewport().height()))
        bar = self.verticalScrollBar()
        bar.setRange(0, maximum)
        bar.setPageStep(max(1, self.viewport().height()))

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self._layout.should_invalidate_for_bounds_width(float(self.viewport().width())):
            self.relayout()
        else:
            self._update_scroll_range()

    def scrollContentsBy(self, dx, dy):
        self.viewport().update()

    def paintEvent(self, event):
        painter = QPainter(self.viewport())
        painter.fillRect(self.viewport().rect(), self.palette().base())

        for attr in self._layout.attributes_in_rect(self.visible_rect()):
            target = self._to_viewport(attr.frame)
            if self._item_painter is not None:
                self._item_painter(painter, target, attr)
            else:
                color = COLUMN_COLORS[attr.column % len(COLUMN_COLORS)]
                painter.fillRect(target, QColor(*color))
        painter.end()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            visible = self.visible_rect()
            attr = self._layout.attribute_at(pos.x() + visible.x, pos.y() + visible.y)
            if attr is not None:
                self.itemClicked.emit(attr.section, attr.item)
        super().mouseReleaseEvent(event)
