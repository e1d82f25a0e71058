"""Data models for crispen-bridge"""

from .handles import ConfigHandle, EvaluatorHandle, ImageHandle, TransformHandle
from .summary import ConfigSummary, ImageInfo

__all__ = [
    "ConfigHandle",
    "TransformHandle",
    "EvaluatorHandle",
    "ImageHandle",
    "ConfigSummary",
    "ImageInfo",
]
