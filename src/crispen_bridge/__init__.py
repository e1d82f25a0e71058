"""
crispen-bridge - Uniform access to OpenColorIO and image decoding

This library provides:
- OCIO configuration loading and index queries
- Transform resolution (color space -> color space, color space -> display/view)
- Float32 evaluators applied in place to packed RGBA buffers
- Image decoding to float32 with RGBA channel normalization
- A per-thread last-error slot for each family instead of raised exceptions

Example:
    >>> import numpy as np
    >>> from crispen_bridge import color, image
    >>>
    >>> config = color.create_config_from_builtin("ocio://default")
    >>> transform = color.resolve_by_names(config, "ACEScg", "sRGB - Texture")
    >>> evaluator = color.compile_evaluator(transform)
    >>>
    >>> handle = image.open_image("plate.exr")
    >>> if handle is None:
    ...     print(image.get_last_error())
    ... else:
    ...     w, h = image.image_width(handle), image.image_height(handle)
    ...     pixels = np.empty(w * h * 4, dtype=np.float32)
    ...     image.read_rgba_float32(handle, pixels, pixels.size)
    ...     color.apply_batch_rgba(evaluator, pixels, w, h)
"""

from .version import __version__

# Error model
from .errors import (
    BridgeError,
    BufferTooSmallError,
    CompileError,
    ConfigMissingError,
    DecodeError,
    ErrorKind,
    InvalidArgumentError,
    LoadError,
    ResolutionError,
)

# Families
from . import color, image

# Models
from .models import ConfigHandle, ConfigSummary, EvaluatorHandle, ImageHandle, ImageInfo, TransformHandle

# Settings
from .settings import BridgeSettings

# High-level API
from .api import (
    build_display_evaluator,
    build_evaluator,
    convert_image,
    describe_config,
    describe_image,
    list_color_spaces,
    list_displays,
    list_views,
    load_config,
    read_image_rgba,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "ErrorKind",
    "BridgeError",
    "InvalidArgumentError",
    "ConfigMissingError",
    "LoadError",
    "ResolutionError",
    "CompileError",
    "DecodeError",
    "BufferTooSmallError",
    # Families
    "color",
    "image",
    # Models
    "ConfigHandle",
    "TransformHandle",
    "EvaluatorHandle",
    "ImageHandle",
    "ConfigSummary",
    "ImageInfo",
    # Settings
    "BridgeSettings",
    # High-level API
    "load_config",
    "describe_config",
    "list_color_spaces",
    "list_displays",
    "list_views",
    "build_evaluator",
    "build_display_evaluator",
    "describe_image",
    "read_image_rgba",
    "convert_image",
]
