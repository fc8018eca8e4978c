import logging
from contextlib import asynccontextmanager

import uvicorn
import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.core.errors import register_exception_handlers
from app.core.middleware import ErrorEnvelopeMiddleware, SecurityHeadersMiddleware
from app.core.rate_limit import limiter
from app.db import init_db, close_db

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

if settings.SENTRY_DSN:
    sentry_sdk.init(dsn=settings.SENTRY_DSN, traces_sample_rate=0.1, environment=settings.APP_ENV)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.info("Starting Historical Monuments API...")
    env = (settings.APP_ENV or "").strip().lower()
    if env == "production":
        for k in ("JWT_SECRET", "MEDIA_SIGNING_KEY"):
            v = getattr(settings, k, "")
            if not v or "change-me" in v or len(v) < 32:
                raise RuntimeError(f"Insecure {k}; set a real secret in production")
    await init_db()

    yield

    logging.info("Shutting down Historical Monuments API...")
    await close_db()


app = FastAPI(
    title="Historical Monuments API",
    description="Monument records, media galleries and public browsing for historical monuments",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

from app.routers import router  # noqa: E402

app.include_router(router)
logging.info("Registered routes count: %s", len(app.routes))

app.add_middleware(GZipMiddleware, minimum_size=1024)
app.add_middleware(ErrorEnvelopeMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "welcome to Historical monuments project"


@app.get("/health")
async def health():
    return {"status": "healthy", "storage": settings.STORAGE_DRIVER}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
