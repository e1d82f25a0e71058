"""Color family: OCIO configs, transforms and float32 evaluators"""

from typing import Optional

from ..errors import ErrorKind, color_errors
from .config import (
    create_config_from_builtin,
    create_config_from_env,
    create_config_from_file,
    destroy_config,
    get_color_space_name,
    get_default_display,
    get_default_view,
    get_display,
    get_num_color_spaces,
    get_num_displays,
    get_num_views,
    get_role,
    get_view,
)
from .evaluator import (
    apply_batch_rgba,
    apply_rgb_pixel,
    bake_3d_lut,
    compile_evaluator,
    destroy_evaluator,
    is_noop,
)
from .transform import destroy_transform, resolve_by_names, resolve_display_view


def get_last_error() -> Optional[str]:
    """Last color-family error on this thread, or None"""
    return color_errors.get()


def get_last_error_kind() -> Optional[ErrorKind]:
    return color_errors.get_kind()


__all__ = [
    "get_last_error",
    "get_last_error_kind",
    # Configuration
    "create_config_from_file",
    "create_config_from_env",
    "create_config_from_builtin",
    "destroy_config",
    "get_num_color_spaces",
    "get_color_space_name",
    "get_role",
    "get_num_displays",
    "get_display",
    "get_default_display",
    "get_num_views",
    "get_view",
    "get_default_view",
    # Transforms
    "resolve_by_names",
    "resolve_display_view",
    "destroy_transform",
    # Evaluators
    "compile_evaluator",
    "destroy_evaluator",
    "apply_batch_rgba",
    "apply_rgb_pixel",
    "is_noop",
    "bake_3d_lut",
]
