"""
Tests for image validation

Tests file validation before decoding:
- File existence
- Empty files
- Format support
"""

from pathlib import Path

from crispen_bridge.validation.image_validator import ImageValidator


class TestFileValidation:
    """Test basic file validation"""
    
    def test_validate_existing_file(self, make_image, rgb_samples):
        """Should validate existing PNG file"""
        is_valid, error = ImageValidator.validate_file(make_image("ok.png", rgb_samples))
        
        assert is_valid is True
        assert error is None
    
    def test_validate_nonexistent_file(self):
        """Should reject nonexistent file"""
        is_valid, error = ImageValidator.validate_file(Path("nonexistent.png"))
        
        assert is_valid is False
        assert "not found" in error.lower()
    
    def test_validate_directory_as_file(self, tmp_path):
        """Should reject directory"""
        is_valid, error = ImageValidator.validate_file(tmp_path)
        
        assert is_valid is False
        assert "not a file" in error.lower()
    
    def test_validate_empty_file(self, tmp_path):
        path = tmp_path / "empty.png"
        path.touch()
        is_valid, error = ImageValidator.validate_file(path)
        
        assert is_valid is False
        assert "empty" in error.lower()


class TestFormatValidation:
    """Test image format validation"""
    
    def test_validate_tiff(self, make_image, rgb_samples):
        assert ImageValidator.is_valid(make_image("ok.tif", rgb_samples)) is True
    
    def test_reject_unknown_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        is_valid, error = ImageValidator.validate_file(path)
        
        assert is_valid is False
        assert "unsupported format" in error.lower()
    
    def test_raw_extension_is_supported(self, tmp_path):
        path = tmp_path / "frame.dng"
        path.write_bytes(b"\x00" * 16)
        
        assert ImageValidator.is_valid(path) is True
    
    def test_hdr_extensions_are_supported(self, tmp_path):
        for name in ("plate.exr", "sky.hdr"):
            path = tmp_path / name
            path.write_bytes(b"\x00" * 16)
            
            assert ImageValidator.is_valid(path) is True
