"""
Photo Preparation

Shrinks field photos before they are attached to a window.
Uses Pillow for decoding, resizing and JPEG re-encoding.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from ..config import Config, default_config

logger = logging.getLogger(__name__)


class PhotoProcessingError(ValueError):
    """The photo claimed to be an image but could not be decoded."""


@dataclass
class PreparedPhoto:
    """A photo ready for upload."""
    data: bytes
    file_name: str
    content_type: str
    width: Optional[int] = None
    height: Optional[int] = None
    compressed: bool = False


def scaled_size(width: int, height: int, max_dimension: int):
    """Fit (width, height) inside a max_dimension square, keeping aspect."""
    if width <= max_dimension and height <= max_dimension:
        return width, height
    ratio = min(max_dimension / width, max_dimension / height)
    return round(width * ratio), round(height * ratio)


def prepare_photo(
    data: bytes,
    file_name: str,
    content_type: str,
    config: Config = default_config,
) -> PreparedPhoto:
    """
    Downscale and re-encode a photo when it is too large.

    Non-image files and images at or under photo_max_bytes pass through
    untouched. Larger images are scaled so neither side exceeds
    photo_max_dimension and saved as JPEG.

    Args:
        data: Raw file bytes
        file_name: Original file name
        content_type: MIME type reported by the client
        config: Size and quality limits

    Returns:
        PreparedPhoto

    Raises:
        PhotoProcessingError: If an image/* file cannot be decoded
    """
    if not content_type.startswith("image/") or len(data) <= config.photo_max_bytes:
        return PreparedPhoto(data=data, file_name=file_name, content_type=content_type)

    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise PhotoProcessingError(f"Failed to load image for compression: {file_name}") from e

    # Phone cameras store rotation in EXIF; bake it in before resizing
    image = ImageOps.exif_transpose(image)
    if image.mode != "RGB":
        image = image.convert("RGB")

    width, height = scaled_size(image.width, image.height, config.photo_max_dimension)
    if (width, height) != image.size:
        image = image.resize((width, height), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=config.photo_jpeg_quality)
    compressed = buffer.getvalue()

    # Pasted images and blobs may arrive without a name
    jpeg_name = f"{PurePath(file_name).stem or 'photo'}.jpg"
    logger.debug("Compressed %s: %d -> %d bytes (%dx%d)", file_name, len(data), len(compressed), width, height)

    return PreparedPhoto(
        data=compressed,
        file_name=jpeg_name,
        content_type="image/jpeg",
        width=width,
        height=height,
        compressed=True,
    )
