# app/routers/media.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from starlette.concurrency import run_in_threadpool

from app.models.gallery import GalleryItem
from app.services.signing import verify_media_signature
from app.services.storage import get_storage

router = APIRouter(prefix="/media", tags=["media"])


@router.get("/{key}")
async def signed_media(key: str, exp: int = Query(...), sig: str = Query(...), storage=Depends(get_storage)):
    """Serve a locally stored object behind a time-limited signature."""
    if getattr(storage, "driver", "") != "local":
        raise HTTPException(status_code=404, detail="Not found")
    if not verify_media_signature(key, exp, sig):
        raise HTTPException(status_code=403, detail="Invalid or expired signature")

    data = await run_in_threadpool(storage.read, key)
    item = await GalleryItem.filter(image=key).first()
    return Response(
        content=data,
        media_type=(item.content_type if item and item.content_type else "application/octet-stream"),
        headers={"Cache-Control": "private, max-age=3600"},
    )
