"""Intrinsic sizes of image files for image-backed layout hosts."""

from .sizes import IMAGE_EXTENSIONS, read_image_size, read_image_sizes, sections_from_directory

__all__ = [
    "IMAGE_EXTENSIONS",
    "read_image_size",
    "read_image_sizes",
    "sections_from_directory",
]
