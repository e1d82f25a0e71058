"""
Image Format Detection and Sample Types
"""

from enum import Enum, IntEnum
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np

from ..settings import BridgeSettings
from .oiio_reader import OiioReader
from .raw_processor import RawProcessor


class BaseType(IntEnum):
    """Native sample types, numbered like OpenImageIO's TypeDesc::BASETYPE"""
    UNKNOWN = 0
    NONE = 1
    UINT8 = 2
    INT8 = 3
    UINT16 = 4
    INT16 = 5
    UINT32 = 6
    INT32 = 7
    UINT64 = 8
    INT64 = 9
    HALF = 10
    FLOAT = 11
    DOUBLE = 12


class BitDepth(Enum):
    """Bit depth of a source image"""
    U8 = "U8"
    U16 = "U16"
    F16 = "F16"
    F32 = "F32"
    
    @classmethod
    def from_basetype(cls, code: int) -> "BitDepth":
        """
        Map a BaseType code to a bit depth.
        
        Unrecognized codes map to U8.
        """
        mapping = {
            BaseType.UINT8: cls.U8,
            BaseType.UINT16: cls.U16,
            BaseType.INT16: cls.U16,
            BaseType.HALF: cls.F16,
            BaseType.FLOAT: cls.F32,
            BaseType.DOUBLE: cls.F32,
        }
        return mapping.get(code, cls.U8)


class FormatDetector:
    """Detect decodable formats and native sample types"""
    
    # (dtype kind, itemsize) -> BaseType
    DTYPE_BASETYPES: Dict[Tuple[str, int], BaseType] = {
        ('b', 1): BaseType.UINT8,
        ('u', 1): BaseType.UINT8,
        ('i', 1): BaseType.INT8,
        ('u', 2): BaseType.UINT16,
        ('i', 2): BaseType.INT16,
        ('u', 4): BaseType.UINT32,
        ('i', 4): BaseType.INT32,
        ('u', 8): BaseType.UINT64,
        ('i', 8): BaseType.INT64,
        ('f', 2): BaseType.HALF,
        ('f', 4): BaseType.FLOAT,
        ('f', 8): BaseType.DOUBLE,
    }
    
    @staticmethod
    def is_raw_format(file_path: Path) -> bool:
        return RawProcessor.is_raw_file(file_path.name)
    
    @staticmethod
    def is_supported(file_path: Path) -> bool:
        """
        Check if format is supported.
        
        Args:
            file_path: Path to image file
            
        Returns:
            True for Pillow raster formats, HDR formats and camera RAW formats
        """
        ext = file_path.suffix.lower()
        return (
            ext in BridgeSettings.RASTER_EXTENSIONS
            or ext in OiioReader.HDR_EXTENSIONS
            or ext in RawProcessor.RAW_EXTENSIONS
        )
    
    @staticmethod
    def basetype_for_dtype(dtype: np.dtype) -> BaseType:
        dtype = np.dtype(dtype)
        return FormatDetector.DTYPE_BASETYPES.get((dtype.kind, dtype.itemsize), BaseType.UNKNOWN)
    
    @staticmethod
    def to_float32(samples: np.ndarray) -> np.ndarray:
        """
        Convert native samples to float32.
        
        Integer samples are normalized by the type's maximum, so unsigned
        types land in [0, 1] and signed types in [-1, 1]. Float samples are
        cast without scaling.
        
        Args:
            samples: Array of native samples
            
        Returns:
            New float32 array of the same shape
        """
        kind = samples.dtype.kind
        if kind == 'b':
            return samples.astype(np.float32)
        if kind in ('u', 'i'):
            scale = float(np.iinfo(samples.dtype).max)
            return (samples.astype(np.float64) / scale).astype(np.float32)
        if kind == 'f':
            return samples.astype(np.float32)
        raise TypeError(f"unsupported sample type: {samples.dtype}")
    
    @staticmethod
    def format_name(code: int) -> Optional[str]:
        try:
            return BaseType(code).name
        except ValueError:
            return None
