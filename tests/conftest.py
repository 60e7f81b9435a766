import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import waterfall_layout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widgets are created without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from waterfall_layout.core.models import EdgeInsets, Size
from waterfall_layout.engine import SectionConfig, SectionData, StaticLayoutHost


# Common test fixtures
@pytest.fixture
def unit_square_host():
    """1 section, 2 columns, width 100, three 1x1 items, no insets or spacing."""
    section = SectionData(
        config=SectionConfig(column_count=2),
        item_sizes=[Size(1, 1), Size(1, 1), Size(1, 1)],
    )
    return StaticLayoutHost([section], bounds_width=100)


@pytest.fixture
def mixed_host():
    """Two sections with insets, spacing and varied aspect ratios."""
    first = SectionData.from_ratios(
        [1.0, 0.5, 2.0, 1.5, 0.75, 1.25],
        SectionConfig(
            column_count=3,
            section_inset=EdgeInsets(top=10, left=8, bottom=12, right=8),
            line_spacing=4,
            interitem_spacing=6,
        ),
    )
    second = SectionData.from_ratios(
        [1.0, 1.0, 0.25],
        SectionConfig(
            column_count=2,
            section_inset=EdgeInsets(top=20, left=0, bottom=5, right=0),
            line_spacing=2,
            interitem_spacing=10,
        ),
    )
    return StaticLayoutHost(
        [first, second],
        bounds_width=340,
        content_inset=EdgeInsets(left=10, right=10),
    )


@pytest.fixture
def image_factory(tmp_path: Path):
    """Create PNG files of a given size under tmp_path."""
    def _create(name: str, size: tuple[int, int], folder: Path | None = None) -> Path:
        target_dir = folder or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        img = Image.new("RGB", size, color="white")
        img_path = target_dir / name
        img.save(img_path)
        return img_path
    return _create
