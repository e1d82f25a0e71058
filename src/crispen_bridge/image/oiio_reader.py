"""
OpenImageIO Decoding

Reads HDR files (OpenEXR, Radiance) and high-bit-depth rasters that Pillow
would truncate to 8 bits. Samples come back as float32 together with the
file's native sample type.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import OpenImageIO as oiio

from ..errors import DecodeError


@dataclass
class OiioImage:
    """Float32 samples of shape (height, width, channels) and their native type"""
    samples: np.ndarray
    format: int
    color_space: Optional[str] = None


class OiioReader:
    """Decode images through OpenImageIO"""
    
    HDR_EXTENSIONS = {'.exr', '.hdr'}
    
    @staticmethod
    def is_hdr_file(filename: str) -> bool:
        return Path(filename).suffix.lower() in OiioReader.HDR_EXTENSIONS
    
    @staticmethod
    def read(file_path: Path) -> OiioImage:
        """
        Read every channel of the first subimage as float32.
        
        Args:
            file_path: Path to the image file
        
        Returns:
            OiioImage with samples, native BaseType code and the
            "oiio:ColorSpace" tag (None when absent)
        
        Raises:
            DecodeError: OpenImageIO could not read the file
        """
        buf = oiio.ImageBuf(str(file_path))
        if not buf.read(0, 0, True):
            raise DecodeError(buf.geterror() or oiio.geterror() or f"failed to read image: {file_path}")
        
        spec = buf.nativespec()
        pixels = buf.get_pixels(oiio.FLOAT)
        if pixels is None:
            raise DecodeError(buf.geterror() or f"failed to read image: {file_path}")
        
        samples = np.ascontiguousarray(pixels, dtype=np.float32).reshape(
            spec.height, spec.width, spec.nchannels
        )
        color_space = spec.get_string_attribute("oiio:ColorSpace") or None
        return OiioImage(
            samples=samples,
            format=int(spec.format.basetype),
            color_space=color_space,
        )
