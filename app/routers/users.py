# app/routers/users.py
from fastapi import APIRouter, HTTPException, Body, Request
import logging

from app.core.rate_limit import limiter
from app.schemas.auth import RegisterPayload, LoginPayload, TokenOut
from app.models.user import User
from app.services.security import hash_password, verify_password, create_token

log = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=TokenOut, status_code=201)
@limiter.limit("10/minute")
async def register(request: Request, payload: RegisterPayload = Body(...)):
    """Create a (non-admin) account and return a bearer token."""
    exists = await User.filter(email=payload.email).first()
    if exists:
        raise HTTPException(status_code=400, detail="Email already registered")

    user = await User.create(
        email=payload.email,
        name=payload.name,
        password_hash=hash_password(payload.password),
        is_admin=False,
    )
    log.info("Registered user %s", user.id)
    return TokenOut(access_token=create_token(str(user.id), user.is_admin))


@router.post("/login", response_model=TokenOut)
@limiter.limit("10/minute")
async def login(request: Request, payload: LoginPayload = Body(...)):
    user = await User.filter(email=payload.email).first()
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return TokenOut(access_token=create_token(str(user.id), user.is_admin))
