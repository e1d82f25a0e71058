"""
Image Decoder

Opens an image file, decodes it eagerly to float32 samples and serves the
samples as packed RGBA.

open_image() and read_rgba_float32() clear the image family's last error on
entry and return a sentinel on failure. The metadata accessors are
infallible: a missing handle yields 0 or None and leaves the last error
alone.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from ..errors import (
    BridgeError,
    BufferTooSmallError,
    DecodeError,
    ErrorKind,
    InvalidArgumentError,
    image_errors,
)
from ..metadata.color_space import ColorSpaceDetector
from ..models.handles import ImageHandle
from .channels import RGBA_CHANNELS, normalize_channels
from .formats import BaseType, BitDepth, FormatDetector
from .oiio_reader import OiioReader
from .raw_processor import RawProcessor
from ..validation.image_validator import ImageValidator

logger = logging.getLogger(__name__)

# PIL modes without a direct array layout, and the mode they decode through
_MODE_CONVERSIONS = {
    "1": "L",
    "PA": "RGBA",
    "La": "LA",
    "RGBa": "RGBA",
}

# Modes Pillow decodes 16-bit PNG/TIFF color data into, dropping the low byte
_EIGHT_BIT_MODES = {"RGB", "RGBA", "LA"}
_DEEP_FORMATS = {"PNG", "TIFF"}


def _decodable(img: Image.Image) -> Image.Image:
    if img.mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    target = _MODE_CONVERSIONS.get(img.mode)
    return img.convert(target) if target else img


def _tile_rawmodes(img: Image.Image):
    for tile in img.tile:
        args = tile[3]
        rawmode = args[0] if isinstance(args, tuple) else args
        if isinstance(rawmode, str):
            yield rawmode


def _is_deep_raster(img: Image.Image) -> bool:
    """True when Pillow would decode 16-bit color samples into an 8-bit mode"""
    if img.format not in _DEEP_FORMATS or img.mode not in _EIGHT_BIT_MODES:
        return False
    return any(";16" in rawmode for rawmode in _tile_rawmodes(img))


def _decode_oiio(file_path: Path) -> ImageHandle:
    decoded = OiioReader.read(file_path)
    height, width, channels = decoded.samples.shape
    return ImageHandle(
        path=str(file_path),
        width=width,
        height=height,
        channels=channels,
        format=decoded.format,
        color_space=decoded.color_space,
        pixels=decoded.samples,
    )


def _decode_raster(file_path: Path) -> ImageHandle:
    with Image.open(file_path) as img:
        # tile is only populated until load()
        if _is_deep_raster(img):
            logger.debug("%s has 16-bit color samples, reading through OpenImageIO", file_path)
            return _decode_oiio(file_path)
        img.load()
        color_space = ColorSpaceDetector.detect(img)
        native_format = BaseType.UINT8 if img.mode == "1" else None
        samples = np.asarray(_decodable(img))
    
    if samples.ndim == 2:
        samples = samples[:, :, np.newaxis]
    if native_format is None:
        native_format = FormatDetector.basetype_for_dtype(samples.dtype)
    
    height, width, channels = samples.shape
    return ImageHandle(
        path=str(file_path),
        width=width,
        height=height,
        channels=channels,
        format=int(native_format),
        color_space=color_space,
        pixels=FormatDetector.to_float32(samples),
    )


def _decode_raw(file_path: Path) -> ImageHandle:
    success, samples, error = RawProcessor.decode_raw(file_path)
    if not success:
        raise DecodeError(error or f"failed to read image: {file_path}")
    
    height, width, channels = samples.shape
    return ImageHandle(
        path=str(file_path),
        width=width,
        height=height,
        channels=channels,
        format=int(FormatDetector.basetype_for_dtype(samples.dtype)),
        color_space=RawProcessor.COLOR_SPACE,
        pixels=FormatDetector.to_float32(samples),
    )


def _decode(path: str) -> ImageHandle:
    file_path = Path(path)
    is_valid, error = ImageValidator.validate_file(file_path)
    if not is_valid:
        raise DecodeError(error)
    
    try:
        if FormatDetector.is_raw_format(file_path):
            handle = _decode_raw(file_path)
        elif OiioReader.is_hdr_file(file_path.name):
            handle = _decode_oiio(file_path)
        else:
            handle = _decode_raster(file_path)
    except BridgeError:
        raise
    except Exception as e:
        raise DecodeError(str(e) or f"failed to read image: {path}") from e
    
    if handle.width <= 0 or handle.height <= 0:
        raise DecodeError(f"failed to read image: {path}")
    return handle


def open_image(path) -> Optional[ImageHandle]:
    """
    Open and fully decode an image.
    
    Args:
        path: Image path (str or Path)
        
    Returns:
        ImageHandle, or None with the last error set
    """
    image_errors.clear()
    path = os.fspath(path) if path is not None else ""
    if not path:
        image_errors.record(InvalidArgumentError("open_image: empty path"))
        return None
    
    try:
        handle = _decode(path)
    except BridgeError as e:
        image_errors.record(e)
        return None
    except Exception as e:
        image_errors.record(e, ErrorKind.DECODE_ERROR)
        return None
    
    logger.debug(
        "Opened %s: %dx%d, %d channels, %s, color space %s",
        path, handle.width, handle.height, handle.channels,
        FormatDetector.format_name(handle.format), handle.color_space
    )
    return handle


def destroy_image(handle: Optional[ImageHandle]) -> None:
    if handle is None:
        return
    handle.release()


def image_width(handle: Optional[ImageHandle]) -> int:
    return handle.width if handle is not None else 0


def image_height(handle: Optional[ImageHandle]) -> int:
    return handle.height if handle is not None else 0


def image_channel_count(handle: Optional[ImageHandle]) -> int:
    return handle.channels if handle is not None else 0


def image_format(handle: Optional[ImageHandle]) -> int:
    """Native sample format as a BaseType code; 0 (UNKNOWN) without a handle"""
    return handle.format if handle is not None else int(BaseType.UNKNOWN)


def image_bit_depth(handle: Optional[ImageHandle]) -> BitDepth:
    return BitDepth.from_basetype(image_format(handle))


def image_color_space(handle: Optional[ImageHandle]) -> Optional[str]:
    if handle is None or not handle.color_space:
        return None
    return handle.color_space


def read_rgba_float32(
    handle: Optional[ImageHandle],
    dest: Optional[np.ndarray],
    capacity: int
) -> bool:
    """
    Copy the image into `dest` as packed row-major RGBA float32.
    
    Requires capacity >= width * height * 4. On any failure the
    destination is left untouched.
    
    Args:
        handle: Opened image
        dest: Writeable, C-contiguous float32 array
        capacity: Number of floats the caller allows to be written
        
    Returns:
        True on success, False with the last error set
    """
    image_errors.clear()
    try:
        if handle is None or dest is None:
            raise InvalidArgumentError("read_rgba_float32: null argument")
        
        required = handle.width * handle.height * RGBA_CHANNELS
        if capacity < required:
            raise BufferTooSmallError("read_rgba_float32: buffer too small")
        if not isinstance(dest, np.ndarray) or dest.dtype != np.float32:
            raise InvalidArgumentError("read_rgba_float32: destination must be a float32 numpy array")
        if not dest.flags.c_contiguous or not dest.flags.writeable:
            raise InvalidArgumentError("read_rgba_float32: destination must be writeable and C-contiguous")
        if dest.size < required:
            raise BufferTooSmallError(
                f"read_rgba_float32: buffer too small ({dest.size} floats, {required} required)"
            )
        
        rgba = normalize_channels(handle.pixels)
        dest.reshape(-1)[:required] = rgba.reshape(-1)
        return True
    
    except BridgeError as e:
        image_errors.record(e)
        return False
    except Exception as e:
        image_errors.record(e, ErrorKind.DECODE_ERROR)
        return False
