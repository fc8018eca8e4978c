"""Read-only composition for anonymous visitors."""

import logging
from typing import List
from uuid import UUID

from app.core.exceptions import AppException, NotFound
from app.models.monument import Monument, VERIFIED
from app.models.user import User
from app.schemas.gallery import SignedGalleryItemOut
from app.schemas.monument import Coordinates, MonumentDetailOut
from app.services.gallery_service import GalleryService
from app.services.monument_service import to_out
from app.utils.geo import maps_url, parse_location

logger = logging.getLogger(__name__)


class PublicService:
    def __init__(self, gallery: GalleryService):
        self.gallery = gallery

    @staticmethod
    async def list_verified() -> List[Monument]:
        return await Monument.filter(status=VERIFIED).all()

    @staticmethod
    async def list_latest(n: int = 3, verified_only: bool = True) -> List[Monument]:
        query = Monument.filter(status=VERIFIED) if verified_only else Monument.all()
        return await query.order_by("-created_at").limit(n)

    @staticmethod
    async def get_one(monument_id: UUID) -> MonumentDetailOut:
        monument = await Monument.filter(id=monument_id).first()
        if not monument:
            raise NotFound("Monument not found")
        user = await User.filter(id=monument.user_id).first()
        if not user:
            # owner is required for the composite view
            raise AppException(f"Owner {monument.user_id} of monument {monument_id} not found")

        coords = parse_location(monument.location)
        return MonumentDetailOut(
            monument=to_out(monument),
            user_name=user.name,
            coordinates=Coordinates(latitude=coords[0], longitude=coords[1]) if coords else None,
            maps_url=maps_url(monument.location),
        )

    async def get_gallery(self, monument_id: UUID) -> List[SignedGalleryItemOut]:
        return await self.gallery.list_for_monument(monument_id)
