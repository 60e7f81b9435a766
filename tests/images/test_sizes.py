"""
Tests for images.sizes

Test Coverage:
- read_image_size(): Pillow header read, unreadable fallback
- sections_from_directory(): One section per folder of images
"""

import logging

import pytest
from PIL import Image

from waterfall_layout.core.models import Size
from waterfall_layout.engine import SectionConfig, StaticLayoutHost, WaterfallLayout
from waterfall_layout.images import read_image_size, read_image_sizes, sections_from_directory


def test_read_image_size_returns_pixel_size(image_factory):
    path = image_factory("wide.png", (200, 100))

    assert read_image_size(path) == Size(200, 100)


def test_read_image_size_missing_file_returns_zero_size(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        size = read_image_size(tmp_path / "missing.png")

    assert size == Size(0, 0)
    assert "Could not read image size" in caplog.text


def test_read_image_size_not_an_image_returns_zero_size(tmp_path):
    bogus = tmp_path / "notes.png"
    bogus.write_text("not really a png")

    assert read_image_size(bogus) == Size(0, 0)


def test_read_image_size_over_pixel_limit_returns_zero_size(image_factory, monkeypatch, caplog):
    path = image_factory("huge.png", (200, 100))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    with caplog.at_level(logging.WARNING):
        size = read_image_size(path)

    assert size == Size(0, 0)
    assert "Could not read image size" in caplog.text


def test_read_image_sizes_keeps_order(image_factory):
    paths = [
        image_factory("a.png", (10, 20)),
        image_factory("b.png", (30, 15)),
    ]

    assert read_image_sizes(paths) == [Size(10, 20), Size(30, 15)]


def test_sections_from_directory_root_then_sorted_subfolders(tmp_path, image_factory):
    image_factory("b.png", (100, 100))
    image_factory("a.jpg", (100, 50))
    image_factory("z.png", (10, 10), folder=tmp_path / "later")
    image_factory("y.png", (10, 30), folder=tmp_path / "earlier")
    (tmp_path / "empty").mkdir()
    (tmp_path / "readme.txt").write_text("ignored")

    sections = sections_from_directory(tmp_path)

    assert [s.item_sizes for s in sections] == [
        [Size(100, 50), Size(100, 100)],  # a.jpg, b.png
        [Size(10, 30)],                   # earlier/
        [Size(10, 10)],                   # later/
    ]


def test_sections_from_directory_uses_given_config(tmp_path, image_factory):
    image_factory("a.png", (40, 80))
    config = SectionConfig(column_count=1)

    sections = sections_from_directory(tmp_path, config)

    assert sections[0].config is config


def test_sections_from_directory_rejects_files(image_factory):
    path = image_factory("a.png", (1, 1))

    with pytest.raises(NotADirectoryError):
        sections_from_directory(path)


def test_sections_from_directory_feeds_layout(tmp_path, image_factory):
    image_factory("tall.png", (50, 100))
    image_factory("square.png", (60, 60))

    host = StaticLayoutHost(
        sections_from_directory(tmp_path, SectionConfig(column_count=2)),
        bounds_width=200,
    )
    layout = WaterfallLayout(host)

    # square.png sorts first: 100x100 in column 0, tall.png 100x200 in column 1
    assert layout.content_size() == Size(200, 200)
