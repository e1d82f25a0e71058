"""
Shared fixtures: a minimal OCIO config and generated test images.
"""

import struct
import zlib
from pathlib import Path

import numpy as np
import OpenImageIO as oiio
import pytest
from PIL import Image

from crispen_bridge.errors import color_errors, image_errors


MINIMAL_CONFIG = """\
ocio_profile_version: 1

search_path: ""
strictparsing: true
luma: [0.2126, 0.7152, 0.0722]

roles:
  default: linear
  reference: linear
  scene_linear: linear
  color_picking: gamma22

displays:
  sRGB:
    - !<View> {name: Gamma, colorspace: gamma22}
    - !<View> {name: Raw, colorspace: linear}
  Flat:
    - !<View> {name: Raw, colorspace: linear}

active_displays: []
active_views: []

colorspaces:
  - !<ColorSpace>
    name: linear
    family: ""
    equalitygroup: ""
    bitdepth: 32f
    isdata: false
    allocation: uniform

  - !<ColorSpace>
    name: gamma22
    family: ""
    equalitygroup: ""
    bitdepth: 32f
    isdata: false
    allocation: uniform
    to_reference: !<ExponentTransform> {value: [2.2, 2.2, 2.2, 1]}
"""


@pytest.fixture(autouse=True)
def clean_error_state():
    """Each test starts with empty last-error slots on the main thread"""
    color_errors.clear()
    image_errors.clear()
    yield
    color_errors.clear()
    image_errors.clear()


@pytest.fixture
def config_path(tmp_path) -> Path:
    path = tmp_path / "minimal.ocio"
    path.write_text(MINIMAL_CONFIG)
    return path


@pytest.fixture
def make_image(tmp_path):
    """Factory: write a numpy array as an image file and return its path"""
    def _make(name: str, samples: np.ndarray, **save_kwargs) -> Path:
        path = tmp_path / name
        img = Image.fromarray(samples)
        img.save(path, **save_kwargs)
        return path
    return _make


@pytest.fixture
def rgb_samples() -> np.ndarray:
    """3x2 RGB uint8 samples with distinct values per channel"""
    return np.array(
        [
            [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
            [[51, 102, 153], [204, 0, 255], [0, 0, 0]],
        ],
        dtype=np.uint8,
    )


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data)) + kind + data
        + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)
    )


@pytest.fixture
def make_png16(tmp_path):
    """Factory: write (height, width, 3) uint16 samples as a 16-bit RGB PNG"""
    def _make(name: str, samples: np.ndarray) -> Path:
        height, width, _ = samples.shape
        rows = b"".join(
            b"\x00" + samples[y].astype(">u2").tobytes() for y in range(height)
        )
        header = struct.pack(">IIBBBBB", width, height, 16, 2, 0, 0, 0)
        path = tmp_path / name
        path.write_bytes(
            b"\x89PNG\r\n\x1a\n"
            + _png_chunk(b"IHDR", header)
            + _png_chunk(b"IDAT", zlib.compress(rows))
            + _png_chunk(b"IEND", b"")
        )
        return path
    return _make


@pytest.fixture
def make_exr(tmp_path):
    """Factory: write (height, width, channels) float samples as an OpenEXR file"""
    def _make(name: str, samples: np.ndarray, pixel_type=oiio.HALF) -> Path:
        height, width, channels = samples.shape
        path = tmp_path / name
        output = oiio.ImageOutput.create(str(path))
        assert output, oiio.geterror()
        assert output.open(str(path), oiio.ImageSpec(width, height, channels, pixel_type))
        assert output.write_image(np.ascontiguousarray(samples, dtype=np.float32))
        output.close()
        return path
    return _make
