"""Metadata extraction module"""

from .color_space import ColorSpaceDetector

__all__ = ["ColorSpaceDetector"]
