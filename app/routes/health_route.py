from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from app.config.settings import settings
from app.database.connection import MongoConnection, get_connection
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


# check database connection status
@router.get("")
async def health_check(mongo: MongoConnection = Depends(get_connection)):
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        connected = await mongo.ping()
        return {
            "success": True,
            "data": {
                "database": {
                    "connected": connected,
                    "status": mongo.status,
                    "timestamp": timestamp,
                },
                "api": {
                    "status": "operational",
                    "version": settings.API_VERSION,
                },
            },
        }

    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Health check failed",
                "data": {
                    "database": {"connected": False, "status": "error", "timestamp": timestamp},
                    "api": {"status": "error", "version": settings.API_VERSION},
                },
            },
        )
