import logging
from typing import List
from uuid import UUID

from app.config import settings
from app.core.exceptions import NotFound, ValidationFailed
from app.models.monument import Monument, UNVERIFIED, VERIFIED
from app.schemas.monument import MonumentCreate, MonumentOut, MonumentUpdate
from app.services.gallery_service import GalleryService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "short_description", "long_description", "place", "state")


def to_out(monument: Monument) -> MonumentOut:
    return MonumentOut.from_record(monument)


class MonumentService:
    def __init__(self, gallery: GalleryService):
        self.gallery = gallery

    @staticmethod
    async def get(monument_id: UUID) -> Monument:
        monument = await Monument.filter(id=monument_id).first()
        if not monument:
            raise NotFound("Monument not found")
        return monument

    @staticmethod
    async def list_all() -> List[Monument]:
        return await Monument.all()

    @staticmethod
    async def create(payload: MonumentCreate, user_id: str) -> Monument:
        data = payload.model_dump()
        missing = [f for f in REQUIRED_FIELDS if not (data.get(f) or "").strip()]
        if missing:
            raise ValidationFailed(f"Send all required fields: {', '.join(missing)}")
        return await Monument.create(**data, status=UNVERIFIED, user_id=user_id)

    async def update(self, monument_id: UUID, payload: MonumentUpdate) -> Monument:
        monument = await self.get(monument_id)
        changes = payload.model_dump(exclude_none=True)
        for field in REQUIRED_FIELDS:
            if field in changes and not changes[field].strip():
                raise ValidationFailed(f"{field} cannot be blank")
        monument.update_from_dict(changes)
        await monument.save()
        return monument

    async def set_status(self, monument_id: UUID, verified: bool) -> Monument:
        monument = await self.get(monument_id)
        monument.status = VERIFIED if verified else UNVERIFIED
        await monument.save()
        logger.info("Monument %s marked %s", monument_id, "verified" if verified else "unverified")
        return monument

    async def delete(self, monument_id: UUID) -> None:
        monument = await self.get(monument_id)
        if settings.CASCADE_GALLERY_ON_MONUMENT_DELETE:
            await self.gallery.delete_for_monument(monument.id)
        await monument.delete()
