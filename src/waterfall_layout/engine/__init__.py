"""
Module: engine

Purpose:
    Waterfall (masonry) layout engine.
    Assigns every item of a sectioned collection a frame in the
    shortest column of its section.

Key Functions:
    - compute_layout(): One uncached layout pass
    - choose_columns(): Responsive column count for a width
    - render_layout_preview(): Draw a result with Pillow

Key Classes:
    - WaterfallLayout: Cached, lazily computed layout bound to a host
    - LayoutHost: Query interface the engine consumes
    - StaticLayoutHost: In-memory host
    - SectionConfig: Per-section column geometry
    - LayoutResult: Output of a pass

Dependencies:
    - PIL: Preview rendering only

Used By:
    - gui.waterfall_view: Scroll view host
"""

from .config import ColumnPolicy, SectionConfig
from .host import LayoutHost, SectionData, StaticLayoutHost
from .models import LayoutResult, SectionLayout
from .columns import choose_columns, columns_for_policy
from .waterfall import (
    LayoutHostMissingError,
    WaterfallLayout,
    compute_layout,
    content_width_for,
)
from .preview import PreviewConfig, render_layout_preview, save_layout_preview

__all__ = [
    # Config
    "ColumnPolicy",
    "SectionConfig",
    # Host
    "LayoutHost",
    "SectionData",
    "StaticLayoutHost",
    # Models
    "LayoutResult",
    "SectionLayout",
    # Engine
    "LayoutHostMissingError",
    "WaterfallLayout",
    "compute_layout",
    "content_width_for",
    # Functions
    "choose_columns",
    "columns_for_policy",
    "PreviewConfig",
    "render_layout_preview",
    "save_layout_preview",
]
