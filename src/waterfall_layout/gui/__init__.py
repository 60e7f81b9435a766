"""PySide6 widgets driven by the waterfall layout engine."""

from .waterfall_view import ViewLayoutHost, WaterfallView

__all__ = ["ViewLayoutHost", "WaterfallView"]
