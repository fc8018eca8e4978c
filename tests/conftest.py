"""
Pytest configuration and fixtures for the monuments API tests
"""

import io
import os

# Test-friendly environment before any app import reads settings
os.environ.setdefault("APP_ENV", "test")
os.environ["STORAGE_DRIVER"] = "local"
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ["CASCADE_GALLERY_ON_MONUMENT_DELETE"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from PIL import Image as PILImage  # noqa: E402

from app.db import init_db, close_db, TEST_DB_PATH  # noqa: E402
from app.main import app  # noqa: E402
from app.models.monument import Monument  # noqa: E402
from app.models.user import User  # noqa: E402
from app.services.security import create_token, hash_password  # noqa: E402
from app.services.storage import LocalStorage, get_storage  # noqa: E402


def _png(color=(200, 30, 30, 255), size=(64, 48)) -> bytes:
    buf = io.BytesIO()
    PILImage.new("RGBA", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def make_png():
    return _png


@pytest.fixture(scope="function")
async def db_setup():
    """Initialize a fresh SQLite test database for each test."""
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)
    await init_db()
    try:
        yield
    finally:
        await close_db()
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)


@pytest.fixture
def storage(tmp_path):
    store = LocalStorage(tmp_path / "objects", base_url="http://test")
    app.dependency_overrides[get_storage] = lambda: store
    try:
        yield store
    finally:
        app.dependency_overrides.pop(get_storage, None)


@pytest.fixture
async def client(db_setup, storage):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def admin(db_setup):
    return await User.create(
        email="admin@example.com",
        name="Site Admin",
        password_hash=hash_password("AdminPass123"),
        is_admin=True,
    )


@pytest.fixture
async def member(db_setup):
    return await User.create(
        email="member@example.com",
        name="Member",
        password_hash=hash_password("MemberPass123"),
    )


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {create_token(str(admin.id), True)}"}


@pytest.fixture
def member_headers(member):
    return {"Authorization": f"Bearer {create_token(str(member.id))}"}


@pytest.fixture
async def monument(admin):
    return await Monument.create(
        title="Taj Mahal",
        short_description="Ivory-white marble mausoleum",
        long_description="Commissioned in 1631 by Shah Jahan.",
        place="Agra",
        state="UP",
        location="27.1751,78.0421",
        user=admin,
    )
