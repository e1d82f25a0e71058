"""
Pixel Evaluation

Compiles a resolved transform into a float32 CPU evaluator and applies it to
packed pixel buffers.

The apply functions are hot-path calls: a missing evaluator, a missing
buffer or an empty image is a silent no-op, and they do not clear the last
error on entry. A failure during apply is recorded and the call returns
normally; the buffer may be partly transformed.
"""

import logging
from typing import Optional

import numpy as np
import PyOpenColorIO as ocio

from ..errors import ErrorKind, InvalidArgumentError, color_errors
from ..models.handles import EvaluatorHandle, TransformHandle
from ..settings import BridgeSettings

logger = logging.getLogger(__name__)


def compile_evaluator(transform: Optional[TransformHandle]) -> Optional[EvaluatorHandle]:
    """
    Build a float32 CPU evaluator for a transform.
    
    Args:
        transform: Resolved transform
        
    Returns:
        EvaluatorHandle, or None with the last error set
    """
    color_errors.clear()
    if transform is None:
        color_errors.record(InvalidArgumentError("compile_evaluator: null transform"))
        return None
    
    try:
        cpu = transform.processor.getDefaultCPUProcessor()
    except Exception as e:
        color_errors.record(e, ErrorKind.COMPILE_ERROR)
        return None
    
    return EvaluatorHandle(cpu=cpu, description=transform.description)


def destroy_evaluator(evaluator: Optional[EvaluatorHandle]) -> None:
    if evaluator is None:
        return
    evaluator.release()


def _packed_view(buffer, count: int) -> np.ndarray:
    """Flat float32 view over the first `count` samples of `buffer`"""
    if not isinstance(buffer, np.ndarray) or buffer.dtype != np.float32:
        raise InvalidArgumentError("pixel buffer must be a float32 numpy array")
    if not buffer.flags.c_contiguous or not buffer.flags.writeable:
        raise InvalidArgumentError("pixel buffer must be writeable and C-contiguous")
    if buffer.size < count:
        raise InvalidArgumentError(
            f"pixel buffer holds {buffer.size} floats, {count} required"
        )
    return buffer.reshape(-1)[:count]


def apply_batch_rgba(
    evaluator: Optional[EvaluatorHandle],
    buffer: Optional[np.ndarray],
    width: int,
    height: int
) -> None:
    """
    Transform a packed RGBA float32 image in place.
    
    The buffer holds width * height * 4 samples, row-major, with no padding
    between pixels or rows.
    """
    if evaluator is None or buffer is None or width <= 0 or height <= 0:
        return
    
    try:
        pixels = _packed_view(buffer, width * height * 4)
        evaluator.cpu.apply(ocio.PackedImageDesc(pixels, width, height, 4))
    except InvalidArgumentError as e:
        color_errors.record(e)
    except Exception as e:
        color_errors.record(e, ErrorKind.COMPILE_ERROR)


def apply_rgb_pixel(evaluator: Optional[EvaluatorHandle], pixel) -> None:
    """
    Transform one RGB triplet in place.
    
    Args:
        evaluator: Compiled evaluator
        pixel: float32 array of at least 3 samples, or a mutable sequence
    """
    if evaluator is None or pixel is None:
        return
    
    try:
        if isinstance(pixel, np.ndarray):
            evaluator.cpu.applyRGB(_packed_view(pixel, 3))
        else:
            pixel[0:3] = evaluator.cpu.applyRGB([float(v) for v in pixel[0:3]])
    except InvalidArgumentError as e:
        color_errors.record(e)
    except Exception as e:
        color_errors.record(e, ErrorKind.COMPILE_ERROR)


def is_noop(evaluator: Optional[EvaluatorHandle]) -> bool:
    """True when applying the evaluator would leave pixels unchanged"""
    if evaluator is None:
        return True
    try:
        return bool(evaluator.cpu.isNoOp())
    except Exception as e:
        color_errors.record(e, ErrorKind.COMPILE_ERROR)
        return True


def bake_3d_lut(
    evaluator: Optional[EvaluatorHandle],
    size: int = BridgeSettings.DEFAULT_LUT_SIZE
) -> np.ndarray:
    """
    Sample the evaluator on a size^3 RGB lattice.
    
    Entries run red-fastest, then green, then blue, with lattice values
    i / (size - 1). Alpha is 1.0.
    
    Args:
        evaluator: Compiled evaluator
        size: Lattice points per axis
        
    Returns:
        float32 array of shape (size**3, 4)
    """
    if size < 2:
        return np.array([[0.0, 0.0, 0.0, 1.0]], dtype=np.float32)
    
    axis = np.linspace(0.0, 1.0, size, dtype=np.float32)
    blue, green, red = np.meshgrid(axis, axis, axis, indexing="ij")
    rgb = np.ascontiguousarray(
        np.stack([red.ravel(), green.ravel(), blue.ravel()], axis=1), dtype=np.float32
    )
    
    if evaluator is not None:
        try:
            evaluator.cpu.applyRGB(rgb.reshape(-1))
        except Exception as e:
            color_errors.record(e, ErrorKind.COMPILE_ERROR)
    
    lut = np.ones((rgb.shape[0], 4), dtype=np.float32)
    lut[:, :3] = rgb
    logger.debug("Baked %d^3 LUT for %s", size, evaluator.description if evaluator else "identity")
    return lut
