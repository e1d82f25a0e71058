"""Image family: decode files to float32 and normalize to RGBA"""

from typing import Optional

from ..errors import ErrorKind, image_errors
from .channels import build_channel_map, normalize_channels
from .decoder import (
    destroy_image,
    image_bit_depth,
    image_channel_count,
    image_color_space,
    image_format,
    image_height,
    image_width,
    open_image,
    read_rgba_float32,
)
from .formats import BaseType, BitDepth, FormatDetector
from .oiio_reader import OiioImage, OiioReader
from .raw_processor import RawProcessor


def get_last_error() -> Optional[str]:
    """Last image-family error on this thread, or None"""
    return image_errors.get()


def get_last_error_kind() -> Optional[ErrorKind]:
    return image_errors.get_kind()


__all__ = [
    "get_last_error",
    "get_last_error_kind",
    "open_image",
    "destroy_image",
    "image_width",
    "image_height",
    "image_channel_count",
    "image_format",
    "image_bit_depth",
    "image_color_space",
    "read_rgba_float32",
    "normalize_channels",
    "build_channel_map",
    "BaseType",
    "BitDepth",
    "FormatDetector",
    "OiioImage",
    "OiioReader",
    "RawProcessor",
]
