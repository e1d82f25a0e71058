"""
OCIO Configuration

Loads a color-management config and answers index queries against it.

Creation functions clear the color family's last error on entry and return
None on failure. Queries read the index captured at load, never reach the
engine and never touch the last error. They return a sentinel (-1 or None)
for a missing handle, an out-of-range index or an unknown key.
"""

import logging
import os
from typing import Optional

import PyOpenColorIO as ocio

from ..errors import (
    ConfigMissingError,
    ErrorKind,
    InvalidArgumentError,
    LoadError,
    color_errors,
)
from ..models.handles import ConfigHandle
from ..settings import BridgeSettings

logger = logging.getLogger(__name__)


def _index_config(engine, source: str) -> ConfigHandle:
    displays = tuple(engine.getDisplays())
    return ConfigHandle(
        engine=engine,
        source=source,
        color_spaces=tuple(engine.getColorSpaceNames()),
        displays=displays,
        views={d: tuple(engine.getViews(d)) for d in displays},
        default_views={d: engine.getDefaultView(d) for d in displays},
        default_display=engine.getDefaultDisplay(),
        roles={role: space for role, space in engine.getRoles()},
    )


def _load(loader, source: str) -> Optional[ConfigHandle]:
    """Run an engine loader and index its result, recording any failure"""
    try:
        handle = _index_config(loader(), source)
    except Exception as e:
        color_errors.record(e, ErrorKind.LOAD_ERROR)
        return None
    
    logger.debug(
        "Loaded OCIO config %s (%d color spaces, %d displays)",
        source, len(handle.color_spaces), len(handle.displays)
    )
    return handle


def create_config_from_file(path) -> Optional[ConfigHandle]:
    """
    Load a config from a .ocio file.
    
    Args:
        path: Path to the config file (str or Path)
        
    Returns:
        ConfigHandle, or None with the last error set
    """
    color_errors.clear()
    path = os.fspath(path) if path is not None else ""
    if not path:
        color_errors.record(LoadError("create_config_from_file: empty path"))
        return None
    
    return _load(lambda: ocio.Config.CreateFromFile(path), path)


def create_config_from_env() -> Optional[ConfigHandle]:
    """
    Load the config named by the OCIO environment variable.
    
    The variable is checked before the engine is called, so an unset
    variable never triggers a load attempt.
    """
    color_errors.clear()
    designation = os.environ.get(BridgeSettings.OCIO_ENV_VAR, "")
    if not designation:
        color_errors.record(
            ConfigMissingError(f"{BridgeSettings.OCIO_ENV_VAR} environment variable is not set")
        )
        return None
    
    return _load(ocio.Config.CreateFromEnv, designation)


def create_config_from_builtin(uri: str) -> Optional[ConfigHandle]:
    """
    Load one of the configs compiled into OpenColorIO.
    
    Args:
        uri: Built-in config URI, e.g. "ocio://default"
        
    Returns:
        ConfigHandle, or None with the last error set
    """
    color_errors.clear()
    if not uri:
        color_errors.record(InvalidArgumentError("create_config_from_builtin: empty config URI"))
        return None
    
    return _load(lambda: ocio.Config.CreateFromBuiltinConfig(uri), uri)


def destroy_config(config: Optional[ConfigHandle]) -> None:
    if config is None:
        return
    config.release()


def _name_at(names, index: int) -> Optional[str]:
    if index < 0 or index >= len(names):
        return None
    return names[index] or None


def get_num_color_spaces(config: Optional[ConfigHandle]) -> int:
    if config is None:
        return -1
    return len(config.color_spaces)


def get_color_space_name(config: Optional[ConfigHandle], index: int) -> Optional[str]:
    if config is None:
        return None
    return _name_at(config.color_spaces, index)


def get_role(config: Optional[ConfigHandle], role: str) -> Optional[str]:
    """Color space a role points at, or None when the role is not defined"""
    if config is None or not role:
        return None
    return config.roles.get(role) or None


def get_num_displays(config: Optional[ConfigHandle]) -> int:
    if config is None:
        return -1
    return len(config.displays)


def get_display(config: Optional[ConfigHandle], index: int) -> Optional[str]:
    if config is None:
        return None
    return _name_at(config.displays, index)


def get_default_display(config: Optional[ConfigHandle]) -> Optional[str]:
    if config is None:
        return None
    return config.default_display or None


def get_num_views(config: Optional[ConfigHandle], display: str) -> int:
    """Number of views for a display; -1 for an unknown display"""
    if config is None or not display:
        return -1
    views = config.views.get(display)
    return -1 if views is None else len(views)


def get_view(config: Optional[ConfigHandle], display: str, index: int) -> Optional[str]:
    if config is None or not display:
        return None
    return _name_at(config.views.get(display, ()), index)


def get_default_view(config: Optional[ConfigHandle], display: str) -> Optional[str]:
    if config is None or not display:
        return None
    return config.default_views.get(display) or None
