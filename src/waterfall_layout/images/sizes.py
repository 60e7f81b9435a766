"""
Module: images.sizes

Purpose:
    Intrinsic item sizes read from image files. Only the image header
    is parsed (Pillow opens lazily), so sizing a large folder is cheap.

Key Functions:
    - read_image_size(): Size of one image file
    - read_image_sizes(): Sizes of many files, in order
    - sections_from_directory(): SectionData per folder of images

Dependencies:
    - PIL: Image header parsing
    - engine.host: SectionData

Used By:
    - Hosts that lay out images from disk (StaticLayoutHost, WaterfallView)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from PIL import Image

from waterfall_layout.core.models import Size
from waterfall_layout.engine.config import SectionConfig
from waterfall_layout.engine.host import SectionData

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".tif", ".tiff"})


def read_image_size(path: Path) -> Size:
    """
    Get the pixel size of an image file.

    Unreadable or missing files are logged and reported as Size(0, 0),
    which the layout engine places as a zero-height item.

    Args:
        path: Image file

    Returns:
        Size(width, height) in pixels
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
    except (OSError, Image.DecompressionBombError) as e:
        logger.warning(f"Could not read image size of {path}: {e}")
        return Size(0, 0)
    return Size(width, height)


def read_image_sizes(paths: Iterable[Path]) -> List[Size]:
    """Sizes of several image files, in the given order."""
    return [read_image_size(path) for path in paths]


def _image_files(directory: Path) -> List[Path]:
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    )


def sections_from_directory(
    root: Path,
    config: Optional[SectionConfig] = None,
) -> List[SectionData]:
    """
    Build sections from a folder of images.

    Images directly inside root form the first section; each
    sub-directory (sorted by name) that contains images forms one more.
    Sub-directories are not searched recursively.

    Args:
        root: Folder to scan
        config: Geometry shared by every section (defaults to SectionConfig())

    Returns:
        List of SectionData, possibly empty

    Raises:
        NotADirectoryError: If root is not a directory

    Example:
        >>> sections = sections_from_directory(Path("photos"))
        >>> [len(s.item_sizes) for s in sections]
        [12, 4]
    """
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    config = config or SectionConfig()
    folders = [root] + sorted(p for p in root.iterdir() if p.is_dir())

    sections: List[SectionData] = []
    for folder in folders:
        files = _image_files(folder)
        if not files:
            continue
        sections.append(SectionData(config=config, item_sizes=read_image_sizes(files)))
        logger.debug(f"Section {len(sections) - 1}: {len(files)} images from {folder}")

    logger.info(
        f"Found {sum(len(s.item_sizes) for s in sections)} images "
        f"in {len(sections)} sections under {root}"
    )
    return sections
