# Import all models for Tortoise ORM registration
from .base import BaseModel
from .user import User
from .monument import Monument, VERIFIED, UNVERIFIED
from .gallery import GalleryItem, MEDIA_IMAGE, MEDIA_VIDEO

__all__ = [
    "BaseModel",
    "User",
    "Monument",
    "GalleryItem",
    "VERIFIED",
    "UNVERIFIED",
    "MEDIA_IMAGE",
    "MEDIA_VIDEO",
]
