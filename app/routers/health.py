from fastapi import APIRouter
from tortoise import Tortoise

router = APIRouter(prefix="/ops", tags=["ops"])


@router.get("/db-health")
async def db_health():
    """Simple database health check using Tortoise ORM"""
    try:
        await Tortoise.get_connection("default").execute_query("SELECT 1")
        return {"db_ok": True}
    except Exception as e:
        return {"db_ok": False, "error": str(e)}
