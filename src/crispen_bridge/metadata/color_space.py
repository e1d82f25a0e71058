"""
Color Space Tag Detection

Finds a short color-space name in image metadata. Checked in order:
embedded ICC profile, PNG sRGB chunk, PNG gamma, EXIF ColorSpace tag.
"""

from io import BytesIO
from typing import Optional

from PIL import Image, ImageCms


class ColorSpaceDetector:
    """Reads a color-space tag from an opened PIL image"""
    
    EXIF_IFD = 0x8769
    EXIF_COLOR_SPACE = 0xA001  # 1 = sRGB, 0xFFFF = uncalibrated
    
    @staticmethod
    def detect(img: Image.Image) -> Optional[str]:
        """
        Detect the color space an image declares.
        
        Args:
            img: Opened PIL image
            
        Returns:
            Short color-space name (e.g. "sRGB", "Linear"), or None
        """
        for probe in (
            ColorSpaceDetector._from_icc,
            ColorSpaceDetector._from_png,
            ColorSpaceDetector._from_exif,
        ):
            name = probe(img)
            if name:
                return name
        return None
    
    @staticmethod
    def _from_icc(img: Image.Image) -> Optional[str]:
        icc_bytes = img.info.get("icc_profile")
        if not icc_bytes:
            return None
        try:
            profile = ImageCms.ImageCmsProfile(BytesIO(icc_bytes))
            description = ImageCms.getProfileDescription(profile).strip()
        except (ImageCms.PyCMSError, OSError, ValueError):
            return None
        if "srgb" in description.lower():
            return "sRGB"
        return description or None
    
    @staticmethod
    def _from_png(img: Image.Image) -> Optional[str]:
        if "srgb" in img.info:
            return "sRGB"
        gamma = img.info.get("gamma")
        if not gamma:
            return None
        # PNG stores the encoding exponent, e.g. 0.45455 for gamma 2.2
        if abs(gamma - 1.0) < 1e-3:
            return "Linear"
        return f"Gamma{1.0 / gamma:.1f}"
    
    @staticmethod
    def _from_exif(img: Image.Image) -> Optional[str]:
        try:
            exif = img.getexif()
            if not exif:
                return None
            value = exif.get_ifd(ColorSpaceDetector.EXIF_IFD).get(ColorSpaceDetector.EXIF_COLOR_SPACE)
        except (KeyError, AttributeError, OSError, ValueError):
            return None
        return "sRGB" if value == 1 else None
