"""
Tests for OCIO configuration loading and index queries
"""

from types import SimpleNamespace

import pytest

from crispen_bridge import color
from crispen_bridge.color import config as config_module
from crispen_bridge.errors import ErrorKind


class TestCreateFromFile:
    """Test loading a config file"""
    
    def test_load_valid_config(self, config_path):
        """Should load the minimal config"""
        config = color.create_config_from_file(config_path)
        
        assert config is not None
        assert color.get_last_error() is None
        color.destroy_config(config)
    
    def test_load_accepts_str_path(self, config_path):
        config = color.create_config_from_file(str(config_path))
        assert config is not None
    
    def test_empty_path(self):
        """Empty path fails before the engine is called"""
        assert color.create_config_from_file("") is None
        assert color.get_last_error_kind() is ErrorKind.LOAD_ERROR
        assert "empty path" in color.get_last_error()
    
    def test_none_path(self):
        assert color.create_config_from_file(None) is None
        assert color.get_last_error_kind() is ErrorKind.LOAD_ERROR
    
    def test_missing_file(self, tmp_path):
        """Unreadable file is a load error"""
        config = color.create_config_from_file(tmp_path / "missing.ocio")
        
        assert config is None
        assert color.get_last_error() is not None
        assert color.get_last_error_kind() is ErrorKind.LOAD_ERROR
    
    def test_malformed_file(self, tmp_path):
        """Malformed YAML is a load error"""
        path = tmp_path / "broken.ocio"
        path.write_text("ocio_profile_version: [not, valid\n")
        
        assert color.create_config_from_file(path) is None
        assert color.get_last_error_kind() is ErrorKind.LOAD_ERROR
    
    def test_success_clears_previous_error(self, config_path):
        """A successful load clears the stale error"""
        color.create_config_from_file("")
        assert color.get_last_error() is not None
        
        color.create_config_from_file(config_path)
        assert color.get_last_error() is None


class TestCreateFromEnv:
    """Test loading through the OCIO environment variable"""
    
    def test_unset_env_does_not_touch_engine(self, monkeypatch):
        """Missing variable fails with ConfigMissing before any load"""
        calls = []
        fake_ocio = SimpleNamespace(
            Config=SimpleNamespace(CreateFromEnv=lambda: calls.append("load"))
        )
        monkeypatch.setattr(config_module, "ocio", fake_ocio)
        monkeypatch.delenv("OCIO", raising=False)
        
        assert color.create_config_from_env() is None
        assert color.get_last_error_kind() is ErrorKind.CONFIG_MISSING
        assert "OCIO" in color.get_last_error()
        assert calls == []
    
    def test_empty_env_is_missing(self, monkeypatch):
        monkeypatch.setenv("OCIO", "")
        
        assert color.create_config_from_env() is None
        assert color.get_last_error_kind() is ErrorKind.CONFIG_MISSING
    
    def test_env_points_at_config(self, monkeypatch, config_path):
        monkeypatch.setenv("OCIO", str(config_path))
        
        config = color.create_config_from_env()
        assert config is not None
        assert config.source == str(config_path)
        assert "linear" in config.color_spaces
    
    def test_env_points_at_missing_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OCIO", str(tmp_path / "missing.ocio"))
        
        assert color.create_config_from_env() is None
        assert color.get_last_error_kind() is ErrorKind.LOAD_ERROR


class TestCreateBuiltin:
    """Test built-in configs"""
    
    def test_empty_uri(self):
        assert color.create_config_from_builtin("") is None
        assert color.get_last_error_kind() is ErrorKind.INVALID_ARGUMENT
    
    def test_unknown_uri(self):
        assert color.create_config_from_builtin("ocio://no-such-config") is None
        assert color.get_last_error_kind() is ErrorKind.LOAD_ERROR
    
    def test_default_builtin(self):
        config = color.create_config_from_builtin("ocio://default")
        
        assert config is not None
        assert color.get_num_color_spaces(config) > 0
        assert color.get_num_displays(config) > 0


class TestQueries:
    """Test index queries against the minimal config"""
    
    @pytest.fixture
    def config(self, config_path):
        handle = color.create_config_from_file(config_path)
        yield handle
        color.destroy_config(handle)
    
    def test_color_spaces(self, config):
        assert color.get_num_color_spaces(config) == 2
        names = {color.get_color_space_name(config, i) for i in range(2)}
        assert names == {"linear", "gamma22"}
    
    def test_color_space_out_of_range(self, config):
        """Out-of-range indices yield None without an error"""
        assert color.get_color_space_name(config, 2) is None
        assert color.get_color_space_name(config, -1) is None
        assert color.get_last_error() is None
    
    def test_roles(self, config):
        assert color.get_role(config, "scene_linear") == "linear"
        assert color.get_role(config, "color_picking") == "gamma22"
    
    def test_unknown_role(self, config):
        assert color.get_role(config, "no_such_role") is None
        assert color.get_role(config, "") is None
        assert color.get_last_error() is None
    
    def test_displays(self, config):
        assert color.get_num_displays(config) == 2
        displays = [color.get_display(config, i) for i in range(2)]
        assert set(displays) == {"sRGB", "Flat"}
        assert color.get_display(config, 5) is None
    
    def test_default_display(self, config):
        assert color.get_default_display(config) == "sRGB"
    
    def test_views(self, config):
        assert color.get_num_views(config, "sRGB") == 2
        views = [color.get_view(config, "sRGB", i) for i in range(2)]
        assert set(views) == {"Gamma", "Raw"}
        assert color.get_default_view(config, "sRGB") == views[0]
    
    def test_unknown_display_views(self, config):
        assert color.get_num_views(config, "Nope") == -1
        assert color.get_view(config, "Nope", 0) is None
        assert color.get_default_view(config, "Nope") is None
        assert color.get_num_views(config, "") == -1
    
    def test_null_handle_sentinels(self):
        """Queries on None return sentinels and leave the error slot alone"""
        assert color.get_num_color_spaces(None) == -1
        assert color.get_color_space_name(None, 0) is None
        assert color.get_role(None, "scene_linear") is None
        assert color.get_num_displays(None) == -1
        assert color.get_display(None, 0) is None
        assert color.get_default_display(None) is None
        assert color.get_num_views(None, "sRGB") == -1
        assert color.get_view(None, "sRGB", 0) is None
        assert color.get_default_view(None, "sRGB") is None
        assert color.get_last_error() is None
    
    def test_queries_do_not_clear_error(self, config):
        """Queries leave a stale error visible"""
        color.create_config_from_file("")
        message = color.get_last_error()
        
        color.get_num_color_spaces(config)
        color.get_display(config, 0)
        
        assert color.get_last_error() == message
    
    def test_queries_after_destroy(self, config_path, monkeypatch):
        """A destroyed config answers from its empty index without the engine"""
        handle = color.create_config_from_file(config_path)
        color.destroy_config(handle)
        monkeypatch.setattr(config_module, "ocio", None)
        
        assert color.get_num_color_spaces(handle) == 0
        assert color.get_color_space_name(handle, 0) is None
        assert color.get_role(handle, "scene_linear") is None
        assert color.get_num_displays(handle) == 0
        assert color.get_display(handle, 0) is None
        assert color.get_default_display(handle) is None
        assert color.get_num_views(handle, "sRGB") == -1
        assert color.get_view(handle, "sRGB", 0) is None
        assert color.get_default_view(handle, "sRGB") is None
        assert color.get_last_error() is None
    
    def test_destroy_none_is_noop(self):
        color.destroy_config(None)
