# app/routers/gallery.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.core.deps import get_gallery_service
from app.schemas.common import MessageOut
from app.schemas.gallery import GalleryItemOut, SignedGalleryItemOut
from app.services.gallery_service import GalleryService, to_out
from app.services.security import require_user
from app.services.upload_validate import read_upload

router = APIRouter(prefix="/gallery", tags=["gallery"], dependencies=[Depends(require_user)])


@router.post("/{monument_id}", response_model=GalleryItemOut, status_code=201)
async def create_gallery_item(
    monument_id: UUID,
    image: Optional[UploadFile] = File(None),
    img_title: Optional[str] = Form(None, alias="imgTitle"),
    gallery: GalleryService = Depends(get_gallery_service),
):
    upload = await read_upload(image)
    item = await gallery.create(monument_id, img_title, upload)
    return to_out(item)


@router.get("/monument/{monument_id}", response_model=List[SignedGalleryItemOut])
async def list_gallery_items(monument_id: UUID, gallery: GalleryService = Depends(get_gallery_service)):
    return await gallery.list_for_monument(monument_id)


@router.get("/{item_id}", response_model=SignedGalleryItemOut)
async def get_gallery_item(item_id: UUID, gallery: GalleryService = Depends(get_gallery_service)):
    return await gallery.get(item_id)


@router.put("/{item_id}", response_model=GalleryItemOut)
async def update_gallery_item(
    item_id: UUID,
    image: Optional[UploadFile] = File(None),
    img_title: Optional[str] = Form(None, alias="imgTitle"),
    gallery: GalleryService = Depends(get_gallery_service),
):
    upload = await read_upload(image)
    item = await gallery.update(item_id, title=img_title, upload=upload)
    return to_out(item)


@router.delete("/{item_id}", response_model=MessageOut)
async def delete_gallery_item(item_id: UUID, gallery: GalleryService = Depends(get_gallery_service)):
    await gallery.delete(item_id)
    return MessageOut(message="Gallery item deleted successfully")
