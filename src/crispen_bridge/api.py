"""
High-level API for crispen-bridge

Exception-raising conveniences over the flat color and image functions.
Each helper calls the flat function, and on a sentinel result raises the
BridgeError subclass matching the family's recorded error.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from . import color, image
from .errors import ErrorState, color_errors, error_class_for, image_errors
from .image.channels import RGBA_CHANNELS
from .models.handles import ConfigHandle, EvaluatorHandle, ImageHandle
from .models.summary import ConfigSummary, ImageInfo
from .settings import BridgeSettings


def _raise_last(errors: ErrorState, fallback: str) -> None:
    raise error_class_for(errors.get_kind())(errors.get() or fallback)


def load_config(path: Optional[Path] = None, builtin: Optional[str] = None) -> ConfigHandle:
    """
    Load an OCIO config.
    
    Lookup order: explicit path, explicit built-in URI, the OCIO
    environment variable, then BridgeSettings.DEFAULT_BUILTIN_CONFIG.
    
    Args:
        path: Path to a .ocio file
        builtin: Built-in config URI
        
    Returns:
        ConfigHandle
        
    Raises:
        BridgeError: LoadError, ConfigMissingError or InvalidArgumentError
        
    Example:
        >>> config = load_config(builtin="ocio://default")
        >>> print(list_color_spaces(config)[:3])
    """
    if path is not None:
        config = color.create_config_from_file(path)
    elif builtin is not None:
        config = color.create_config_from_builtin(builtin)
    elif os.environ.get(BridgeSettings.OCIO_ENV_VAR):
        config = color.create_config_from_env()
    else:
        config = color.create_config_from_builtin(BridgeSettings.DEFAULT_BUILTIN_CONFIG)
    
    if config is None:
        _raise_last(color_errors, "failed to load OCIO config")
    return config


def list_color_spaces(config: ConfigHandle) -> List[str]:
    count = color.get_num_color_spaces(config)
    names = (color.get_color_space_name(config, i) for i in range(max(count, 0)))
    return [name for name in names if name]


def list_displays(config: ConfigHandle) -> List[str]:
    count = color.get_num_displays(config)
    names = (color.get_display(config, i) for i in range(max(count, 0)))
    return [name for name in names if name]


def list_views(config: ConfigHandle, display: str) -> List[str]:
    count = color.get_num_views(config, display)
    names = (color.get_view(config, display, i) for i in range(max(count, 0)))
    return [name for name in names if name]


def describe_config(config: ConfigHandle) -> ConfigSummary:
    """Snapshot a config's color spaces, displays, views and known roles"""
    displays = list_displays(config)
    roles = {}
    for role in BridgeSettings.KNOWN_ROLES:
        space = color.get_role(config, role)
        if space:
            roles[role] = space
    
    return ConfigSummary(
        source=config.source,
        color_spaces=list_color_spaces(config),
        displays=displays,
        views={display: list_views(config, display) for display in displays},
        default_display=color.get_default_display(config),
        default_views={display: color.get_default_view(config, display) for display in displays},
        roles=roles,
    )


def build_evaluator(config: ConfigHandle, source: str, destination: str) -> EvaluatorHandle:
    """
    Resolve and compile a color-space to color-space evaluator.
    
    The intermediate transform is released before returning; the evaluator
    does not depend on it.
    
    Raises:
        BridgeError: InvalidArgumentError, ResolutionError or CompileError
    """
    transform = color.resolve_by_names(config, source, destination)
    if transform is None:
        _raise_last(color_errors, f"cannot resolve {source} -> {destination}")
    return _compile_and_release(transform)


def build_display_evaluator(
    config: ConfigHandle,
    source: str,
    display: Optional[str] = None,
    view: Optional[str] = None
) -> EvaluatorHandle:
    """
    Resolve and compile a display/view evaluator.
    
    Missing display or view fall back to the config's defaults.
    
    Raises:
        BridgeError: InvalidArgumentError, ResolutionError or CompileError
    """
    display = display or color.get_default_display(config)
    view = view or color.get_default_view(config, display or "")
    transform = color.resolve_display_view(config, source, display, view)
    if transform is None:
        _raise_last(color_errors, f"cannot resolve {source} -> {display}/{view}")
    return _compile_and_release(transform)


def _compile_and_release(transform) -> EvaluatorHandle:
    try:
        evaluator = color.compile_evaluator(transform)
    finally:
        color.destroy_transform(transform)
    if evaluator is None:
        _raise_last(color_errors, "cannot compile evaluator")
    return evaluator


def _info(handle: ImageHandle) -> ImageInfo:
    return ImageInfo(
        path=handle.path,
        width=image.image_width(handle),
        height=image.image_height(handle),
        channels=image.image_channel_count(handle),
        format=image.FormatDetector.format_name(image.image_format(handle)) or "UNKNOWN",
        bit_depth=image.image_bit_depth(handle).value,
        color_space=image.image_color_space(handle),
    )


def _open(path: Path) -> ImageHandle:
    handle = image.open_image(path)
    if handle is None:
        _raise_last(image_errors, f"failed to read image: {path}")
    return handle


def describe_image(path: Path) -> ImageInfo:
    """
    Decode an image and report its metadata.
    
    Raises:
        BridgeError: InvalidArgumentError or DecodeError
    """
    handle = _open(path)
    try:
        return _info(handle)
    finally:
        image.destroy_image(handle)


def read_image_rgba(path: Path) -> Tuple[ImageInfo, np.ndarray]:
    """
    Decode an image to a (height, width, 4) float32 RGBA array.
    
    Args:
        path: Image file
        
    Returns:
        (ImageInfo, pixels)
        
    Raises:
        BridgeError: InvalidArgumentError or DecodeError
        
    Example:
        >>> info, pixels = read_image_rgba(Path("plate.png"))
        >>> pixels.shape == (info.height, info.width, 4)
        True
    """
    handle = _open(path)
    try:
        info = _info(handle)
        pixels = np.empty((info.height, info.width, RGBA_CHANNELS), dtype=np.float32)
        if not image.read_rgba_float32(handle, pixels, pixels.size):
            _raise_last(image_errors, f"failed to read image: {path}")
        return info, pixels
    finally:
        image.destroy_image(handle)


def convert_image(path: Path, evaluator: EvaluatorHandle) -> Tuple[ImageInfo, np.ndarray]:
    """
    Decode an image and run its RGBA pixels through an evaluator.
    
    Args:
        path: Image file
        evaluator: Compiled evaluator
        
    Returns:
        (ImageInfo, transformed (height, width, 4) float32 pixels)
        
    Raises:
        BridgeError: DecodeError, or the color error recorded during apply
    """
    info, pixels = read_image_rgba(path)
    if color.is_noop(evaluator):
        return info, pixels
    
    # apply_batch_rgba leaves stale errors in place, so start clean
    color_errors.clear()
    color.apply_batch_rgba(evaluator, pixels, info.width, info.height)
    if color_errors.get() is not None:
        _raise_last(color_errors, "failed to apply evaluator")
    return info, pixels
