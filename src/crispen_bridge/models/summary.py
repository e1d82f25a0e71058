"""
Summary Models

Plain-data descriptions of a loaded config and a decoded image, returned by
the high-level API.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ConfigSummary:
    """Everything the config index exposes, as plain lists and dicts"""
    source: str
    color_spaces: List[str] = field(default_factory=list)
    displays: List[str] = field(default_factory=list)
    views: Dict[str, List[str]] = field(default_factory=dict)
    default_display: Optional[str] = None
    default_views: Dict[str, Optional[str]] = field(default_factory=dict)
    roles: Dict[str, str] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)
    
    @property
    def has_displays(self) -> bool:
        return bool(self.displays)


@dataclass
class ImageInfo:
    """
    Metadata reported for a decoded image.
    
    Attributes:
        path: Source path
        width: Width in pixels
        height: Height in pixels
        channels: Native channel count (before RGBA normalization)
        format: Native BaseType name (e.g. "UINT8", "FLOAT")
        bit_depth: Bit depth name (e.g. "U8", "F32")
        color_space: Detected color-space tag, or None
    """
    path: str
    width: int
    height: int
    channels: int
    format: str
    bit_depth: str
    color_space: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)
    
    @property
    def pixel_count(self) -> int:
        return self.width * self.height
    
    @property
    def rgba_float_count(self) -> int:
        """Floats needed for a packed RGBA float32 copy"""
        return self.pixel_count * 4
