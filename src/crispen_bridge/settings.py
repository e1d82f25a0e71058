"""
Bridge Settings

Process-wide constants shared by the color and image families.
"""

from typing import Set, Tuple


class BridgeSettings:
    """Constants for configuration lookup, image validation and LUT baking"""
    
    # Environment variable naming the OCIO config to load
    OCIO_ENV_VAR = "OCIO"
    
    # Used by the high-level API when neither a path nor a URI is given
    # and the environment variable is unset
    DEFAULT_BUILTIN_CONFIG = "ocio://default"
    
    DEFAULT_LUT_SIZE = 33
    
    MAX_FILE_SIZE = 2 * 1024 * 1024 * 1024  # 2 GB
    
    # Formats Pillow decodes natively; 16-bit PNG/TIFF color data goes through OpenImageIO
    RASTER_EXTENSIONS: Set[str] = {
        '.jpg', '.jpeg', '.png', '.tiff', '.tif', '.bmp', '.gif',
        '.webp', '.tga', '.ppm', '.pgm', '.pbm', '.pnm', '.sgi', '.dds',
    }
    
    KNOWN_ROLES: Tuple[str, ...] = (
        "aces_interchange",
        "cie_xyz_d65_interchange",
        "color_picking",
        "color_timing",
        "compositing_log",
        "data",
        "default",
        "matte_paint",
        "reference",
        "rendering",
        "scene_linear",
        "texture_paint",
    )
