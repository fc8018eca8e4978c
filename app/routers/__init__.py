from fastapi import APIRouter
import logging


def build_router() -> APIRouter:
    router = APIRouter()
    log = logging.getLogger("routers")

    from .users import router as users_router
    from .monuments import router as monuments_router
    from .gallery import router as gallery_router
    from .public import router as public_router
    from .media import router as media_router
    from .health import router as health_router

    for name, r in (
        ("users", users_router),
        ("monuments", monuments_router),
        ("gallery", gallery_router),
        ("public", public_router),
        ("media", media_router),
        ("health", health_router),
    ):
        router.include_router(r)
        log.info("Loaded router: %s", name)
    return router


# Export module-level router so app.main can import it
router = build_router()
