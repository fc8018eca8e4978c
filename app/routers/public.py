# app/routers/public.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.deps import get_public_service
from app.schemas.gallery import SignedGalleryItemOut
from app.schemas.monument import MonumentDetailOut, MonumentOut
from app.services.monument_service import to_out
from app.services.public_service import PublicService

router = APIRouter(prefix="/public", tags=["public"])

LATEST_COUNT = 3


@router.get("/", response_model=List[MonumentOut])
async def list_verified_monuments():
    return [to_out(m) for m in await PublicService.list_verified()]


@router.get("/latest3/", response_model=List[MonumentOut])
@router.get("/latest3", response_model=List[MonumentOut], include_in_schema=False)
async def list_latest_monuments():
    return [to_out(m) for m in await PublicService.list_latest(LATEST_COUNT)]


@router.get("/monument/{monument_id}", response_model=List[SignedGalleryItemOut])
async def public_gallery(monument_id: UUID, public: PublicService = Depends(get_public_service)):
    return await public.get_gallery(monument_id)


@router.get("/{monument_id}", response_model=MonumentDetailOut)
async def public_monument(monument_id: UUID):
    return await PublicService.get_one(monument_id)
