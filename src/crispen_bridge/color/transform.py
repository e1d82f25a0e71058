"""
Transform Resolution

Resolves a directional transform from a config, either between two color
spaces or from a color space to a display/view pair.

The returned TransformHandle carries its own resolved processor, so it stays
valid after the config that produced it is destroyed. Every call resolves
afresh; nothing is cached here.
"""

import logging
from typing import Optional

import PyOpenColorIO as ocio

from ..errors import ErrorKind, InvalidArgumentError, color_errors
from ..models.handles import ConfigHandle, TransformHandle

logger = logging.getLogger(__name__)


def resolve_by_names(
    config: Optional[ConfigHandle],
    source: str,
    destination: str
) -> Optional[TransformHandle]:
    """
    Resolve the transform from one color space to another.
    
    Args:
        config: Loaded config
        source: Source color space (or role)
        destination: Destination color space (or role)
        
    Returns:
        TransformHandle, or None with the last error set
    """
    color_errors.clear()
    if config is None or not source or not destination:
        color_errors.record(InvalidArgumentError("resolve_by_names: invalid args"))
        return None
    
    try:
        processor = config.engine.getProcessor(source, destination)
    except Exception as e:
        color_errors.record(e, ErrorKind.RESOLUTION_ERROR)
        return None
    
    logger.debug("Resolved transform %s -> %s", source, destination)
    return TransformHandle(processor=processor, source=source, destination=destination)


def resolve_display_view(
    config: Optional[ConfigHandle],
    source: str,
    display: str,
    view: str
) -> Optional[TransformHandle]:
    """
    Resolve the forward (scene-to-display) transform for a display/view.
    
    Args:
        config: Loaded config
        source: Source color space (or role)
        display: Display name
        view: View name for that display
        
    Returns:
        TransformHandle, or None with the last error set
    """
    color_errors.clear()
    if config is None or not source or not display or not view:
        color_errors.record(InvalidArgumentError("resolve_display_view: invalid args"))
        return None
    
    try:
        processor = config.engine.getProcessor(
            source, display, view, ocio.TRANSFORM_DIR_FORWARD
        )
    except Exception as e:
        color_errors.record(e, ErrorKind.RESOLUTION_ERROR)
        return None
    
    logger.debug("Resolved display transform %s -> %s/%s", source, display, view)
    return TransformHandle(processor=processor, source=source, display=display, view=view)


def destroy_transform(transform: Optional[TransformHandle]) -> None:
    if transform is None:
        return
    transform.release()
