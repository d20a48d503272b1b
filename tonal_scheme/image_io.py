# tonal_scheme/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import SAMPLE_WIDTH
from .core_types import U8Pixels, assert_u8_image_rgba
from .errors import ImageDecodeError

"""
Image loading (RGBA in sRGB) and bounded sampling for quantization.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im.convert("RGBA"),
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is not None:
                return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            # Broken or unsupported profile: fall back to the raw channels.
            pass

    return im.convert("RGBA")


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Open and fully decode an image as sRGB RGBA.

    Raises ImageDecodeError when the file is missing, unreadable or not an image.
    """
    path = Path(path)
    try:
        with Image.open(path) as im0:
            im0.load()
            return _convert_to_srgb_rgba(im0)
    except FileNotFoundError:
        raise ImageDecodeError(f"image not found: {path}") from None
    except UnidentifiedImageError:
        raise ImageDecodeError(f"not a recognised image format: {path}") from None
    except (OSError, ValueError) as e:
        raise ImageDecodeError(f"failed to decode image {path}: {e}") from e


def sample_size(
    width: int, height: int, target_width: int = SAMPLE_WIDTH
) -> Tuple[int, int]:
    """
    Size the image is reduced to before quantization.

    Width is capped at target_width and the height follows the aspect ratio,
    rounded and never below 1. Narrower images keep their size.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"image dimensions must be positive, got {width}x{height}")
    if width <= target_width:
        return width, height
    dst_h = int(round(height * (target_width / float(width))))
    return target_width, max(1, dst_h)


def sample_pixels(image: Image.Image, target_width: int = SAMPLE_WIDTH) -> U8Pixels:
    """
    Reduce an image to a bounded pixel set in ARGB channel order.

    Returns a uint8 array of shape (N, 4), N = sampled width * sampled height.
    Resizing uses Lanczos to avoid aliasing that would bias quantization.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    dst_w, dst_h = sample_size(image.width, image.height, target_width)
    if (dst_w, dst_h) != image.size:
        image = image.resize((dst_w, dst_h), resample=Image.Resampling.LANCZOS)

    rgba = assert_u8_image_rgba(np.array(image, dtype=np.uint8))
    # RGBA -> ARGB
    argb = rgba[..., [3, 0, 1, 2]].reshape(-1, 4)
    return np.ascontiguousarray(argb, dtype=np.uint8)


def load_and_sample(path: Union[str, Path], target_width: int = SAMPLE_WIDTH) -> U8Pixels:
    """load_image followed by sample_pixels."""
    return sample_pixels(load_image(path), target_width)


__all__ = [
    "load_image",
    "sample_size",
    "sample_pixels",
    "load_and_sample",
]
