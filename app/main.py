from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
import logging
import uvicorn

from app.core.config import settings
from app.api.v1.api import api_router
from app.core.activitypub import activitypub_router
from app.core.http_client import HTTPClient

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="ActivityPub outbox delivery service",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    default_response_class=ORJSONResponse,
)

# CORS settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_V1_STR)

# Include ActivityPub routes
app.include_router(activitypub_router, prefix="/activitypub", tags=["activitypub"])

@app.on_event("startup")
async def startup_event():
    """Initialize resources on application startup"""
    # 建立共享 httpx AsyncClient（連線池、User-Agent）供所有投遞共用
    HTTPClient.set_shared_client(HTTPClient.build())

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup resources on application shutdown"""
    client = HTTPClient.shared_client
    if client is not None:
        await client.aclose()
    HTTPClient.set_shared_client(None)

@app.get("/")
async def root():
    """Root path"""
    return {"message": settings.PROJECT_NAME}

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
