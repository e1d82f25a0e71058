"""
Channel Normalization

Every decoded image is exposed as 4-channel RGBA regardless of its native
channel count. A single remap table drives the conversion: each output slot
either copies a native channel or is filled with a constant.

    native channels   output
    1                 (c0, 0, 0, 1)
    2                 (c0, c1, 0, 1)
    3                 (c0, c1, c2, 1)
    4                 (c0, c1, c2, c3)
    5+                (c0, c1, c2, c3)
"""

from typing import Tuple

import numpy as np

from ..errors import DecodeError

RGBA_CHANNELS = 4

# Marks an output slot that is filled rather than copied
SYNTHESIZE = -1

FILL_VALUES: Tuple[float, ...] = (0.0, 0.0, 0.0, 1.0)


def build_channel_map(nchannels: int) -> Tuple[Tuple[int, ...], Tuple[float, ...]]:
    """
    Remap table for an image with `nchannels` native channels.
    
    Returns:
        (order, fill) where order[i] is the native channel copied into
        output slot i, or SYNTHESIZE, and fill[i] is the constant used
        when the slot is synthesized
    """
    order = tuple(i if i < nchannels else SYNTHESIZE for i in range(RGBA_CHANNELS))
    return order, FILL_VALUES


def normalize_channels(samples: np.ndarray) -> np.ndarray:
    """
    Convert (height, width[, channels]) samples to (height, width, 4) float32.
    
    Args:
        samples: Native samples; a 2-D array is treated as one channel
        
    Returns:
        float32 RGBA array (a new array unless the input is already
        4-channel float32)
        
    Raises:
        DecodeError: If the array has no channels or an unexpected shape
    """
    if samples.ndim == 2:
        samples = samples[:, :, np.newaxis]
    if samples.ndim != 3:
        raise DecodeError(f"cannot remap samples of shape {samples.shape}")
    
    height, width, nchannels = samples.shape
    if nchannels == 0:
        raise DecodeError("image has no channels")
    if nchannels == RGBA_CHANNELS:
        return samples.astype(np.float32, copy=False)
    
    order, fill = build_channel_map(nchannels)
    rgba = np.empty((height, width, RGBA_CHANNELS), dtype=np.float32)
    for slot, (source, value) in enumerate(zip(order, fill)):
        if source == SYNTHESIZE:
            rgba[:, :, slot] = value
        else:
            rgba[:, :, slot] = samples[:, :, source]
    return rgba
