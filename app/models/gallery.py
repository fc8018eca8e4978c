from tortoise import fields
from .base import BaseModel

MEDIA_IMAGE = "image"
MEDIA_VIDEO = "video"


class GalleryItem(BaseModel):
    # Plain reference, not a FK: items are not bound to the monument row
    monument_id = fields.UUIDField(index=True)
    img_title = fields.CharField(max_length=255)
    image = fields.CharField(max_length=1024)  # storage key
    media_kind = fields.CharField(max_length=16, default=MEDIA_IMAGE)
    content_type = fields.CharField(max_length=100, null=True)

    class Meta:
        table = "galleries"
