"""
Module: engine.preview

Purpose:
    Debug visualization of a layout pass. Draws every placed frame,
    colored by column and labeled with its index path, on a canvas the
    size of the content. Useful for eyeballing column assignment and
    for attaching to bug reports.

Key Functions:
    - render_layout_preview(): Create the preview image
    - save_layout_preview(): Save the preview to disk

Dependencies:
    - PIL: Image drawing
    - engine.models: LayoutResult

Used By:
    - Debugging and tests
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .models import LayoutResult

logger = logging.getLogger(__name__)

# Visualization constants
COLUMN_COLORS = (
    (66, 133, 244),    # Blue
    (234, 67, 53),     # Red
    (251, 188, 5),     # Yellow
    (52, 168, 83),     # Green
    (171, 71, 188),    # Purple
    (0, 172, 193),     # Teal
)

LABEL_TEXT_COLOR = (255, 255, 255)
MIN_LABEL_HEIGHT = 14  # Frames shorter than this (after scaling) get no label


@dataclass(frozen=True)
class PreviewConfig:
    """
    Rendering options for layout previews (immutable).

    Attributes:
        scale: Pixels per content unit
        background: Canvas color
        outline: Frame border color
        outline_width: Frame border width in pixels
        show_labels: Draw "section.item" inside each frame
    """

    scale: float = 1.0
    background: Tuple[int, int, int] = (255, 255, 255)
    outline: Tuple[int, int, int] = (32, 32, 32)
    outline_width: int = 1
    show_labels: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ValueError(f"scale must be positive: {self.scale}")
        if self.outline_width < 0:
            raise ValueError(f"outline_width must be >= 0: {self.outline_width}")


def render_layout_preview(
    result: LayoutResult,
    config: Optional[PreviewConfig] = None,
) -> Image.Image:
    """
    Draw a layout result.

    Empty frames (zero width or height) are not drawn.

    Args:
        result: Layout pass to draw
        config: Rendering options (defaults to PreviewConfig())

    Returns:
        RGB image of size content_size * scale (at least 1x1)

    Example:
        >>> img = render_layout_preview(layout.result)
        >>> img.size
        (100, 100)
    """
    config = config or PreviewConfig()
    scale = config.scale

    canvas_w = max(1, math.ceil(result.content_width * scale))
    canvas_h = max(1, math.ceil(result.content_height * scale))
    img = Image.new("RGB", (canvas_w, canvas_h), color=config.background)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for attr in result.attributes:
        frame = attr.frame
        if frame.is_empty:
            continue

        x0 = frame.x * scale
        y0 = frame.y * scale
        # Pillow boxes are inclusive; keep x1 >= x0 for sub-pixel frames
        x1 = max(x0, frame.max_x * scale - 1)
        y1 = max(y0, frame.max_y * scale - 1)

        color = COLUMN_COLORS[attr.column % len(COLUMN_COLORS)]
        draw.rectangle(
            (x0, y0, x1, y1),
            fill=color,
            outline=config.outline,
            width=config.outline_width,
        )

        if config.show_labels and (y1 - y0) >= MIN_LABEL_HEIGHT:
            draw.text(
                (x0 + 3, y0 + 2),
                f"{attr.section}.{attr.item}",
                fill=LABEL_TEXT_COLOR,
                font=font,
            )

    return img


def save_layout_preview(
    result: LayoutResult,
    output_dir: Path,
    name: str,
    config: Optional[PreviewConfig] = None,
) -> Path:
    """
    Render and save a layout preview as PNG.

    Args:
        result: Layout pass to draw
        output_dir: Directory to save into (created if missing)
        name: Filename stem
        config: Rendering options

    Returns:
        Path to the saved image
    """
    img = render_layout_preview(result, config)

    output_dir.mkdir(parents=True, exist_ok=True)
    preview_path = output_dir / f"{name}_layout.png"
    img.save(preview_path, "PNG")

    logger.info(
        f"Saved layout preview for {name}: {result.item_count} items, "
        f"{img.width}x{img.height}px"
    )

    return preview_path
