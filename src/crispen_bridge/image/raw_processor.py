"""
RAW Image Decoding

Decodes RAW camera files (CR2, NEF, ARW, DNG) to 16-bit RGB samples.
Uses rawpy library which wraps LibRaw.
"""

from pathlib import Path
from typing import Optional, Tuple

import numpy as np

try:
    import rawpy
    RAWPY_AVAILABLE = True
except ImportError:
    RAWPY_AVAILABLE = False


class RawProcessor:
    """Decode RAW camera files"""
    
    RAW_EXTENSIONS = {
        # Nikon
        '.nef', '.nrw',
        # Canon
        '.cr2', '.cr3', '.crw',
        # Sony
        '.arw', '.srf', '.sr2',
        # Fujifilm
        '.raf',
        # Olympus/OM System
        '.orf',
        # Panasonic
        '.rw2', '.raw',
        # Pentax
        '.pef', '.ptx',
        # Sigma
        '.x3f',
        # Leica
        '.rwl',
        # Minolta
        '.mrw',
        # Samsung
        '.srw',
        # Hasselblad
        '.3fr',
        # Kodak
        '.dcr', '.kdc',
        # Mamiya
        '.mef',
        # Phase One
        '.iiq',
        # Adobe/Universal
        '.dng',
    }
    
    # Tag reported for decoded RAW data (LibRaw output_color=sRGB)
    COLOR_SPACE = "sRGB"
    
    @staticmethod
    def is_available() -> bool:
        """
        Check if rawpy is installed and available.
        
        Returns:
            True if rawpy can be imported
        """
        return RAWPY_AVAILABLE
    
    @staticmethod
    def is_raw_file(filename: str) -> bool:
        """
        Check if file extension indicates RAW format.
        
        Args:
            filename: Filename with extension
            
        Returns:
            True if filename has RAW extension
        """
        ext = filename.lower()
        return any(ext.endswith(raw_ext) for raw_ext in RawProcessor.RAW_EXTENSIONS)
    
    @staticmethod
    def decode_raw(file_path: Path) -> Tuple[bool, Optional[np.ndarray], Optional[str]]:
        """
        Decode a RAW file to a 16-bit RGB array.
        
        Args:
            file_path: Path to the RAW file
            
        Returns:
            Tuple of (success, samples, error_message)
            - success: True if decoding succeeded
            - samples: uint16 array of shape (height, width, 3), None if failed
            - error_message: Error description if failed, None if successful
        """
        if not RAWPY_AVAILABLE:
            return (False, None, "rawpy not installed - run: pip install rawpy")
        
        try:
            with rawpy.imread(str(file_path)) as raw:
                # 16-bit keeps the sensor's dynamic range for float conversion
                samples = raw.postprocess(
                    use_camera_wb=True,
                    output_bps=16,
                    no_auto_bright=True,
                    output_color=rawpy.ColorSpace.sRGB
                )
            return (True, samples, None)
        
        except rawpy.LibRawError as e:
            return (False, None, f"LibRaw error: {str(e)}")
        except Exception as e:
            return (False, None, f"RAW processing failed: {str(e)}")
