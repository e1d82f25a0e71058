"""
Basic tests for crispen-bridge

Run with: pytest tests/
"""

import crispen_bridge
from crispen_bridge import (
    BridgeSettings,
    ErrorKind,
    __version__,
    color,
    image,
)


def test_version():
    """Test that version is defined"""
    assert __version__ == "0.1.0"


def test_public_surface():
    """Both families expose their flat functions and last-error accessor"""
    for name in ("create_config_from_file", "resolve_by_names", "compile_evaluator",
                 "apply_batch_rgba", "is_noop", "get_last_error"):
        assert callable(getattr(color, name))
    for name in ("open_image", "read_rgba_float32", "image_width", "get_last_error"):
        assert callable(getattr(image, name))
    
    for name in crispen_bridge.__all__:
        assert hasattr(crispen_bridge, name)


def test_error_kinds_cover_taxonomy():
    """Seven failure kinds are defined"""
    assert len(ErrorKind) == 7


def test_settings_defaults():
    """Environment variable and default URI are set"""
    assert BridgeSettings.OCIO_ENV_VAR == "OCIO"
    assert BridgeSettings.DEFAULT_BUILTIN_CONFIG.startswith("ocio://")
    assert '.png' in BridgeSettings.RASTER_EXTENSIONS
