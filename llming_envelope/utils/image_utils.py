"""
Image utilities for tool responses.

Images attached to a tool response arrive as base64 strings, optionally as data
URLs. The media type is determined from the file signature of the decoded bytes.

Key functions:
- sniff_image_type: Media type from the leading magic bytes, or None
- detect_image_media_type: Same, falling back to a default media type
- is_likely_image_data: Detect if a string contains base64 image data
"""

import base64
import binascii
import logging
import re
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX_RE = re.compile(r"^data:image/\w+;base64,")

# 8 base64 characters decode to 6 bytes, enough for every signature below
_SNIFF_CHARS = 8
_SNIFF_BYTES = 4


class ImageFormat(str, Enum):
    """Image formats recognized by their file signature."""
    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    WEBP = "image/webp"


# Checked in order, first match wins.
# RIFF is the generic container signature, so WAV or AVI data is reported as WEBP.
IMAGE_SIGNATURES: list[tuple[bytes, ImageFormat]] = [
    (b"\xff\xd8\xff", ImageFormat.JPEG),
    (b"\x89PNG", ImageFormat.PNG),
    (b"GIF", ImageFormat.GIF),
    (b"RIFF", ImageFormat.WEBP),
]


def strip_data_url_prefix(value: str) -> str:
    """Remove a leading ``data:image/<type>;base64,`` header if present."""
    return _DATA_URL_PREFIX_RE.sub("", value, count=1)


def _leading_bytes(value: str) -> bytes:
    chunk = strip_data_url_prefix(value.strip())[:_SNIFF_CHARS]
    chunk += "=" * (-len(chunk) % 4)
    try:
        return base64.b64decode(chunk, validate=True)[:_SNIFF_BYTES]
    except (binascii.Error, ValueError):
        return b""


def sniff_image_type(value: str) -> Optional[ImageFormat]:
    """Determine the image format of base64 data from its magic bytes.

    Args:
        value: Raw base64 string or data URL

    Returns:
        The matching ImageFormat (a str subclass holding the MIME type),
        or None if no known signature matches or the data is not base64
    """
    head = _leading_bytes(value)
    for signature, image_format in IMAGE_SIGNATURES:
        if head.startswith(signature):
            return image_format
    logger.debug("No image signature matches leading bytes %r", head)
    return None


def detect_image_media_type(value: str, default: str = ImageFormat.JPEG.value) -> str:
    """Get the media type for base64 image data, using ``default`` for unknown formats."""
    image_format = sniff_image_type(value)
    if image_format is None:
        logger.warning("Unknown image format, falling back to %s", default)
        return default
    return image_format.value


def is_likely_image_data(value: str) -> bool:
    """
    Check if a string looks like base64 image data.

    Args:
        value: String to check

    Returns:
        True if the string appears to be base64-encoded image data
    """
    if not isinstance(value, str):
        return False
    if len(value) < 1000:  # Too small to be a meaningful image
        return False

    if value.startswith("data:image/"):
        return True

    return sniff_image_type(value) is not None
