"""
Opaque Handles

Objects handed to callers by the color and image families. Callers treat
them as opaque: identity is object identity, and the only supported
operations are the module-level functions that accept them.

Ownership is tree-shaped. A TransformHandle holds its own resolved
processor, never the ConfigHandle it came from, and an EvaluatorHandle
holds its own CPU processor, never its TransformHandle.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np


@dataclass(eq=False)
class ConfigHandle:
    """
    Loaded OCIO configuration plus its index, captured once at load time.
    
    Attributes:
        engine: PyOpenColorIO Config object
        source: Where the config came from (path, URI or env value)
        color_spaces: Active color-space names in config order
        displays: Active display names in config order
        views: Active view names per display
        default_views: Default view per display
        default_display: Global default display
        roles: Role name -> color-space name
    """
    engine: Any
    source: str
    color_spaces: Tuple[str, ...] = ()
    displays: Tuple[str, ...] = ()
    views: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    default_views: Dict[str, str] = field(default_factory=dict)
    default_display: str = ""
    roles: Dict[str, str] = field(default_factory=dict)
    
    def release(self) -> None:
        self.engine = None
        self.color_spaces = ()
        self.displays = ()
        self.views = {}
        self.default_views = {}
        self.default_display = ""
        self.roles = {}


@dataclass(eq=False)
class TransformHandle:
    """
    Directional transform resolved from a config.
    
    Attributes:
        processor: PyOpenColorIO Processor (self-contained)
        source: Source color space
        destination: Destination color space, or None for display/view
        display: Display name for display/view transforms
        view: View name for display/view transforms
    """
    processor: Any
    source: str
    destination: Optional[str] = None
    display: Optional[str] = None
    view: Optional[str] = None
    
    @property
    def description(self) -> str:
        if self.destination is not None:
            return f"{self.source} -> {self.destination}"
        return f"{self.source} -> {self.display}/{self.view}"
    
    def release(self) -> None:
        self.processor = None


@dataclass(eq=False)
class EvaluatorHandle:
    """Float32 CPU processor compiled from a TransformHandle"""
    cpu: Any
    description: str = ""
    
    def release(self) -> None:
        self.cpu = None


@dataclass(eq=False)
class ImageHandle:
    """
    Image decoded eagerly to float32 samples.
    
    Attributes:
        path: Path the image was opened from
        width: Width in pixels (> 0)
        height: Height in pixels (> 0)
        channels: Native channel count
        format: Native sample format as a BaseType code
        color_space: Color space detected from metadata, or None
        pixels: float32 array of shape (height, width, channels)
    """
    path: str
    width: int
    height: int
    channels: int
    format: int
    color_space: Optional[str]
    pixels: Optional[np.ndarray]
    
    def release(self) -> None:
        self.pixels = None
