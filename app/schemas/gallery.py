from datetime import datetime
from uuid import UUID

from app.schemas.common import CamelOut


class GalleryItemOut(CamelOut):
    id: UUID
    monument_id: UUID
    img_title: str
    image: str
    media_kind: str
    content_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SignedGalleryItemOut(GalleryItemOut):
    image_url: str
