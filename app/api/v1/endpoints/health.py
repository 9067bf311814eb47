from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from app.core.config import settings
from app.core.http_client import HTTPClient

router = APIRouter()

@router.get("/")
async def health_check():
    """Health check endpoint"""
    client = HTTPClient.shared_client
    client_status = "ready" if client is not None and not client.is_closed else "not started"

    return ORJSONResponse({
        "status": "ok",
        "http_client": client_status,
        "federation_enabled": settings.FEDERATION_ENABLED,
        "service": settings.PROJECT_NAME
    }, headers={"Cache-Control": "public, max-age=5"})
