from fastapi import Depends

from app.services.gallery_service import GalleryService
from app.services.monument_service import MonumentService
from app.services.public_service import PublicService
from app.services.storage import get_storage


def get_gallery_service(storage=Depends(get_storage)) -> GalleryService:
    return GalleryService(storage)


def get_monument_service(gallery: GalleryService = Depends(get_gallery_service)) -> MonumentService:
    return MonumentService(gallery)


def get_public_service(gallery: GalleryService = Depends(get_gallery_service)) -> PublicService:
    return PublicService(gallery)
