"""
Gallery media lifecycle: upload, signed reads, replacement and deletion.

Records live in the database and payloads in object storage. The two are not
transactional; the ordering of each operation decides which partial state a
failure can leave behind:

* create: object is written before the record, so a failed write leaves
  nothing and a failed insert leaves an orphaned object.
* update: the new object is written and the record switched before the old
  object is deleted; a failed delete leaks the old object.
* delete: object first, then record; a crash in between leaves a record
  pointing at a missing object.

None of these states are reconciled; they are logged.

Image re-encoding and driver calls block, so they run in the worker thread
pool and are awaited.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from starlette.concurrency import run_in_threadpool

from app.core.exceptions import AppException, NotFound, ValidationFailed
from app.models.gallery import GalleryItem
from app.schemas.gallery import GalleryItemOut, SignedGalleryItemOut
from app.services.compress import compress_media

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Send all required fields: imgTitle, image"


@dataclass
class MediaUpload:
    filename: Optional[str]
    content_type: Optional[str]
    data: bytes


def to_out(item: GalleryItem) -> GalleryItemOut:
    return GalleryItemOut.from_record(item)


class GalleryService:
    def __init__(self, storage):
        self.storage = storage

    def _sign(self, item: GalleryItem) -> SignedGalleryItemOut:
        return SignedGalleryItemOut(
            **to_out(item).model_dump(),
            image_url=self.storage.signed_url(item.image),
        )

    async def _store(self, upload: MediaUpload):
        media = await run_in_threadpool(
            compress_media, upload.filename, upload.content_type, upload.data
        )
        await run_in_threadpool(self.storage.put, media.filename, media.data, media.content_type)
        return media

    async def _remove(self, key: str) -> None:
        await run_in_threadpool(self.storage.delete, key)

    async def _load(self, item_id: UUID) -> GalleryItem:
        item = await GalleryItem.filter(id=item_id).first()
        if not item:
            raise NotFound("Gallery item not found")
        return item

    async def create(self, monument_id: UUID, title: Optional[str],
                     upload: Optional[MediaUpload]) -> GalleryItem:
        if not title or not upload or not upload.data:
            raise ValidationFailed(MISSING_FIELDS)

        media = await self._store(upload)
        try:
            return await GalleryItem.create(
                monument_id=monument_id,
                img_title=title,
                image=media.filename,
                media_kind=media.media_kind,
                content_type=media.content_type,
            )
        except Exception as exc:
            logger.error("Gallery record insert failed; object %s is orphaned", media.filename)
            raise AppException("Gallery record insert failed", details={"orphan": media.filename}) from exc

    async def list_for_monument(self, monument_id: UUID) -> List[SignedGalleryItemOut]:
        items = await GalleryItem.filter(monument_id=monument_id).all()
        return [self._sign(item) for item in items]

    async def get(self, item_id: UUID) -> SignedGalleryItemOut:
        return self._sign(await self._load(item_id))

    async def update(self, item_id: UUID, title: Optional[str] = None,
                     upload: Optional[MediaUpload] = None) -> GalleryItem:
        item = await self._load(item_id)
        old_key = None

        if upload and upload.data:
            media = await self._store(upload)
            old_key = item.image
            item.image = media.filename
            item.media_kind = media.media_kind
            item.content_type = media.content_type

        if title:
            item.img_title = title

        await item.save()

        if old_key:
            try:
                await self._remove(old_key)
            except Exception:
                logger.exception("Failed to delete replaced object %s; leaking it", old_key)
        return item

    async def delete(self, item_id: UUID) -> None:
        item = await self._load(item_id)
        await self._remove(item.image)
        await item.delete()

    async def delete_for_monument(self, monument_id: UUID) -> int:
        items = await GalleryItem.filter(monument_id=monument_id).all()
        for item in items:
            await self._remove(item.image)
            await item.delete()
        if items:
            logger.info("Removed %d gallery items of monument %s", len(items), monument_id)
        return len(items)
