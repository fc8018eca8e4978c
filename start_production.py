#!/usr/bin/env python3
"""
Historical Monuments API production startup script
"""

import uvicorn
from app.config import settings


def start_production_server():
    """Start the production server"""
    print("Starting Historical Monuments API...")
    print(f"API Documentation: http://localhost:{settings.PORT}/docs")
    print("=" * 60)

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=False,
        workers=2,
        log_level="info",
        access_log=True
    )


if __name__ == "__main__":
    start_production_server()
