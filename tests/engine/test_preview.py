"""
Tests for engine.preview

Test Coverage:
- render_layout_preview(): Canvas size, frame colors, empty frames
- save_layout_preview(): Directory creation and image saving
"""

import pytest
from PIL import Image

from waterfall_layout.core.models import Size
from waterfall_layout.engine import (
    PreviewConfig,
    SectionConfig,
    SectionData,
    StaticLayoutHost,
    compute_layout,
    render_layout_preview,
    save_layout_preview,
)
from waterfall_layout.engine.preview import COLUMN_COLORS


@pytest.fixture
def unit_square_result(unit_square_host):
    return compute_layout(unit_square_host)


def test_render_layout_preview_matches_content_size(unit_square_result):
    img = render_layout_preview(unit_square_result)

    assert img.mode == "RGB"
    assert img.size == (100, 100)


def test_render_layout_preview_scales_canvas(unit_square_result):
    img = render_layout_preview(unit_square_result, PreviewConfig(scale=2.0))

    assert img.size == (200, 200)


def test_render_layout_preview_fills_frames_with_column_color(unit_square_result):
    img = render_layout_preview(unit_square_result, PreviewConfig(show_labels=False))

    # Centers of item0 (column 0) and item1 (column 1)
    assert img.getpixel((25, 40)) == COLUMN_COLORS[0]
    assert img.getpixel((75, 40)) == COLUMN_COLORS[1]


def test_render_layout_preview_skips_empty_frames():
    host = StaticLayoutHost(
        [SectionData(SectionConfig(column_count=1), [Size(0, 1)])],
        bounds_width=30,
    )

    img = render_layout_preview(compute_layout(host))

    # Zero-height content still yields a 1px-high canvas with background only
    assert img.size == (30, 1)
    assert img.getpixel((10, 0)) == (255, 255, 255)


def test_preview_config_rejects_non_positive_scale():
    with pytest.raises(ValueError, match="scale must be positive"):
        PreviewConfig(scale=0)


def test_save_layout_preview_creates_directory(tmp_path, unit_square_result):
    output_dir = tmp_path / "nested" / "previews"
    assert not output_dir.exists()

    path = save_layout_preview(unit_square_result, output_dir, "squares")

    assert output_dir.exists()
    assert path.name == "squares_layout.png"
    with Image.open(path) as saved:
        assert saved.size == (100, 100)
