import time
import hmac
import hashlib
import base64
from urllib.parse import urlencode, quote

from app.config import settings


def _signature(path: str, exp: int) -> str:
    payload = f"{path}{exp}".encode()
    sig = hmac.new(settings.MEDIA_SIGNING_KEY.encode(), payload, hashlib.sha256).digest()
    return base64.urlsafe_b64encode(sig).decode().rstrip("=")


def media_path(storage_key: str) -> str:
    return f"/media/{quote(storage_key.lstrip('/'))}"


def signed_media_url(storage_key: str, *, expires_s: int, base_url: str | None = None) -> str:
    """Time-limited URL for a locally stored object, served by the /media route."""
    base = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")
    path = media_path(storage_key)
    exp = int(time.time()) + int(expires_s)
    query = {"exp": str(exp), "sig": _signature(path, exp)}
    return f"{base}{path}?{urlencode(query)}"


def verify_media_signature(storage_key: str, exp: int, sig: str) -> bool:
    if exp < int(time.time()):
        return False
    expected = _signature(media_path(storage_key), exp)
    return hmac.compare_digest(expected, sig)
