# app/routers/monuments.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends

from app.core.deps import get_monument_service
from app.schemas.common import MessageOut
from app.schemas.monument import MonumentCreate, MonumentOut, MonumentUpdate
from app.services.monument_service import MonumentService, to_out
from app.services.security import AuthUser, require_admin, require_user

router = APIRouter(prefix="/monuments", tags=["monuments"])


@router.post("/", response_model=MonumentOut, status_code=201)
async def create_monument(
    payload: MonumentCreate = Body(...),
    auth: AuthUser = Depends(require_user),
):
    monument = await MonumentService.create(payload, auth.user_id)
    return to_out(monument)


@router.get("/", response_model=List[MonumentOut])
async def list_monuments(auth: AuthUser = Depends(require_user)):
    return [to_out(m) for m in await MonumentService.list_all()]


@router.get("/{monument_id}", response_model=MonumentOut)
async def get_monument(monument_id: UUID, auth: AuthUser = Depends(require_user)):
    return to_out(await MonumentService.get(monument_id))


@router.put("/verify/{monument_id}", response_model=MonumentOut)
async def verify_monument(
    monument_id: UUID,
    auth: AuthUser = Depends(require_admin),
    monuments: MonumentService = Depends(get_monument_service),
):
    return to_out(await monuments.set_status(monument_id, verified=True))


@router.put("/unverify/{monument_id}", response_model=MonumentOut)
async def unverify_monument(
    monument_id: UUID,
    auth: AuthUser = Depends(require_admin),
    monuments: MonumentService = Depends(get_monument_service),
):
    return to_out(await monuments.set_status(monument_id, verified=False))


@router.put("/{monument_id}", response_model=MonumentOut)
async def update_monument(
    monument_id: UUID,
    payload: MonumentUpdate = Body(...),
    auth: AuthUser = Depends(require_user),
    monuments: MonumentService = Depends(get_monument_service),
):
    return to_out(await monuments.update(monument_id, payload))


@router.delete("/{monument_id}", response_model=MessageOut)
async def delete_monument(
    monument_id: UUID,
    auth: AuthUser = Depends(require_user),
    monuments: MonumentService = Depends(get_monument_service),
):
    await monuments.delete(monument_id)
    return MessageOut(message="Monument deleted successfully")
