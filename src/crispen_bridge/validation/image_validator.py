"""
Image Validation Module

Validates image files before decoding.
"""

from pathlib import Path
from typing import Tuple, Optional

from ..image.formats import FormatDetector
from ..settings import BridgeSettings


class ImageValidator:
    """Validate image files before decoding"""
    
    @staticmethod
    def validate_file(file_path: Path) -> Tuple[bool, Optional[str]]:
        """
        Validate image file.
        
        Checks:
        - File exists
        - File size within limits
        - Format is supported
        
        Args:
            file_path: Path to image file
            
        Returns:
            (is_valid, error_message) tuple
        """
        if not file_path.exists():
            return False, f"File not found: {file_path}"
        
        if not file_path.is_file():
            return False, f"Not a file: {file_path}"
        
        try:
            size = file_path.stat().st_size
        except OSError as e:
            return False, f"Cannot access file: {e}"
        
        if size > BridgeSettings.MAX_FILE_SIZE:
            size_mb = size / 1024 / 1024
            max_mb = BridgeSettings.MAX_FILE_SIZE / 1024 / 1024
            return False, f"File too large: {size_mb:.1f} MB (max {max_mb:.0f} MB)"
        
        if size == 0:
            return False, "File is empty"
        
        if not FormatDetector.is_supported(file_path):
            return False, f"Unsupported format: {file_path.suffix}"
        
        return True, None
    
    @staticmethod
    def is_valid(file_path: Path) -> bool:
        valid, _ = ImageValidator.validate_file(file_path)
        return valid
