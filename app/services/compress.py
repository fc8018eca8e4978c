"""
Media compression for gallery uploads.

Images are re-encoded to a low-quality JPEG to keep storage small; videos are
stored as uploaded. Either way the object gets a freshly generated filename
that becomes its storage key.
"""

import io
import random
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError
from slugify import slugify

from app.config import settings
from app.core.exceptions import CompressionError
from app.models.gallery import MEDIA_IMAGE, MEDIA_VIDEO

IMAGE_EXT = ".jpg"
VIDEO_EXT = ".mp4"
SUFFIX_MIN = 1_000_000
SUFFIX_MAX = 1_999_999


@dataclass
class CompressedMedia:
    filename: str
    data: bytes
    media_kind: str
    content_type: str


def is_video(content_type: str | None) -> bool:
    return (content_type or "").lower().startswith("video")


def generate_filename(original_name: str | None, ext: str) -> str:
    """Stem of the original name plus a random numeric suffix.

    Collisions with existing keys are not checked.
    """
    stem = slugify((original_name or "").split(".")[0]) or "file"
    return f"{stem}{random.randint(SUFFIX_MIN, SUFFIX_MAX)}{ext}"


def compress_image_bytes(img_bytes: bytes, quality: int) -> bytes:
    with Image.open(io.BytesIO(img_bytes)) as im:
        if im.mode != "RGB":
            im = im.convert("RGB")
        buf = io.BytesIO()
        im.save(buf, format="JPEG", quality=quality, optimize=True)
        return buf.getvalue()


def compress_media(original_name: str | None, content_type: str | None, data: bytes,
                   quality: int | None = None) -> CompressedMedia:
    if is_video(content_type):
        return CompressedMedia(
            filename=generate_filename(original_name, VIDEO_EXT),
            data=data,
            media_kind=MEDIA_VIDEO,
            content_type=content_type or "video/mp4",
        )

    try:
        out = compress_image_bytes(data, quality or settings.IMAGE_QUALITY)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise CompressionError(details={"cause": str(exc)}) from exc

    return CompressedMedia(
        filename=generate_filename(original_name, IMAGE_EXT),
        data=out,
        media_kind=MEDIA_IMAGE,
        content_type="image/jpeg",
    )
