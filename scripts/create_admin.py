#!/usr/bin/env python3
"""
Create (or promote) an administrator account.

Usage: python scripts/create_admin.py EMAIL NAME PASSWORD
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.db import init_db, close_db  # noqa: E402
from app.models.user import User  # noqa: E402
from app.services.security import hash_password  # noqa: E402


async def create_admin(email: str, name: str, password: str) -> User:
    await init_db()
    try:
        user = await User.filter(email=email).first()
        if user:
            user.is_admin = True
            await user.save()
            print(f"Promoted existing user {email} to admin")
        else:
            user = await User.create(
                email=email,
                name=name,
                password_hash=hash_password(password),
                is_admin=True,
            )
            print(f"Created admin {email}")
        return user
    finally:
        await close_db()


if __name__ == "__main__":
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(2)
    asyncio.run(create_admin(*sys.argv[1:]))
