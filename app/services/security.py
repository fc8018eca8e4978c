import datetime as dt
from jose import jwt
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from app.config import settings
from app.models.user import User


bearer = HTTPBearer()
ph = PasswordHasher()


class AuthUser:
    def __init__(self, user_id: str, is_admin: bool = False):
        self.user_id = user_id
        self.is_admin = is_admin


def _jwt_secret() -> str:
    secret = (settings.JWT_SECRET or "").strip()
    if len(secret) < 32 and (settings.APP_ENV or "").strip().lower() == "production":
        raise ValueError("JWT_SECRET must be at least 32 characters long")
    return secret


def create_token(user_id: str, is_admin: bool = False) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    exp = now + dt.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRES_MIN)
    payload = {
        "sub": user_id,
        "adm": bool(is_admin),
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, _jwt_secret(), algorithm="HS256")


def verify_password(pw: str, pw_hash: str) -> bool:
    try:
        return ph.verify(pw_hash, pw)
    except (VerificationError, InvalidHashError):
        return False


def hash_password(pw: str) -> str:
    return ph.hash(pw)


async def require_user(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> AuthUser:
    """Bearer-token gate for protected routes; no handler logic runs on failure."""
    if not creds or creds.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid auth")

    try:
        payload = jwt.decode(
            creds.credentials,
            _jwt_secret(),
            algorithms=["HS256"],
            options={"leeway": 30},  # clock skew
        )
        user_id = str(payload["sub"])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except (jwt.JWTError, KeyError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    db_user = await User.filter(id=user_id).first()
    if not db_user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return AuthUser(str(db_user.id), bool(db_user.is_admin))


async def require_admin(user: AuthUser = Depends(require_user)) -> AuthUser:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin only")
    return user
