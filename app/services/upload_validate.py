from fastapi import HTTPException, UploadFile

from app.config import settings
from app.services.gallery_service import MediaUpload

CHUNK_SIZE = 1024 * 1024


def _too_large() -> HTTPException:
    return HTTPException(413, "File too large")


async def read_upload(file: UploadFile | None) -> MediaUpload | None:
    """Read a multipart file into memory; None when no file was sent.

    The size cap is checked against the declared size first and then while
    reading, so an oversized body is never held in full.
    """
    if file is None or not file.filename:
        return None
    limit = settings.MAX_UPLOAD_BYTES
    if file.size is not None and file.size > limit:
        raise _too_large()

    buf = bytearray()
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > limit:
            raise _too_large()
    if not buf:
        return None
    return MediaUpload(filename=file.filename, content_type=file.content_type, data=bytes(buf))
