"""Pixel sampler — answers "does this cell contain visible content?".

Only one scan-line per cell is read: the row at the vertical midpoint of the
region. A pixel counts as content when it is not pure white and not fully
transparent.
"""

from __future__ import annotations

import io
import logging
from typing import Protocol

import cairosvg
import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Channel value of a fully lit sub-pixel; anything below it is "colour".
_FULL_BRIGHTNESS = 255

# Alpha values: fully transparent pixels are ignored regardless of colour.
_TRANSPARENT = 0
_OPAQUE = 255


class SamplerUnavailableError(RuntimeError):
    """Raised when there is no usable pixel surface to sample from."""


class PixelSampler(Protocol):
    """Anything that can report image size and per-region occupancy."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def occupied(self, x: int, y: int, width: int, height: int) -> bool: ...


class ImageSampler:
    """Pixel sampler backed by an (H, W, 4) uint8 RGBA array."""

    def __init__(self, pixels: NDArray[np.uint8] | None) -> None:
        if pixels is None:
            raise SamplerUnavailableError("No pixel data supplied")
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise SamplerUnavailableError(f"Expected an RGB(A) pixel array, got shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise SamplerUnavailableError("Image has zero area")
        if arr.shape[2] == 3:
            # Promote RGB to opaque RGBA
            alpha = np.full(arr.shape[:2] + (1,), _OPAQUE, dtype=arr.dtype)
            arr = np.concatenate([arr, alpha], axis=2)
        self._pixels = arr

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def occupied(self, x: int, y: int, width: int, height: int) -> bool:
        """True if the mid scan-line of the region has a visible non-white pixel.

        Regions reaching past the image edge read only the in-bounds part;
        pixels outside the image count as transparent.
        """
        row = y + height // 2
        if row < 0 or row >= self.height or width <= 0:
            return False
        x0 = max(x, 0)
        x1 = min(x + width, self.width)
        if x0 >= x1:
            return False

        line = self._pixels[row, x0:x1]
        visible = line[:, 3] != _TRANSPARENT
        coloured = np.any(line[:, :3] < _FULL_BRIGHTNESS, axis=1)
        return bool(np.any(visible & coloured))


def _check_size(width: int, height: int, max_size: int | None) -> None:
    if max_size is not None and (width > max_size or height > max_size):
        raise SamplerUnavailableError(
            f"Image {width}x{height} exceeds the {max_size}px size limit"
        )


def load_image(data: bytes, max_size: int | None = None) -> NDArray[np.uint8]:
    """Decode raster image bytes (PNG, JPEG, WebP, ...) into an RGBA array.

    The size limit is checked from the header, before pixel data is decoded.
    """
    try:
        img = Image.open(io.BytesIO(data))
        _check_size(img.width, img.height, max_size)
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise SamplerUnavailableError(f"Could not decode image: {e}") from e
    logger.debug("Decoded %s image %dx%d (%s)", img.format, img.width, img.height, img.mode)
    return np.array(img.convert("RGBA"))


def rasterize_svg(
    svg_code: str | bytes,
    width: int | None = None,
    height: int | None = None,
    max_size: int | None = None,
) -> NDArray[np.uint8]:
    """Rasterize SVG markup to an RGBA array using CairoSVG.

    With no explicit size the SVG's intrinsic dimensions are used; either way
    the rendered size must fit within ``max_size``.
    """
    requested = [side for side in (width, height) if side is not None]
    if any(side <= 0 for side in requested):
        raise SamplerUnavailableError(f"Raster size must be positive, got {width}x{height}")
    if requested and max_size is not None and max(requested) > max_size:
        raise SamplerUnavailableError(
            f"Requested raster {width}x{height} exceeds the {max_size}px size limit"
        )
    raw = svg_code.encode("utf-8") if isinstance(svg_code, str) else svg_code
    try:
        png_data = cairosvg.svg2png(bytestring=raw, output_width=width, output_height=height)
    except Exception as e:
        raise SamplerUnavailableError(f"Could not rasterize SVG: {e}") from e
    return load_image(png_data, max_size)
