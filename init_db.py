#!/usr/bin/env python3
"""
Initialize the monuments database schema
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from app.db import init_db, close_db


async def initialize_database():
    print("Initializing monuments database...")
    try:
        await init_db()
        print("Database initialized successfully!")
        return True
    except Exception as e:
        print(f"Database initialization failed: {e}")
        return False
    finally:
        await close_db()


if __name__ == "__main__":
    success = asyncio.run(initialize_database())
    if not success:
        sys.exit(1)
