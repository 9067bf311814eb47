from fastapi import APIRouter
from app.core.activitypub.outbox import outbox_router

# routers
activitypub_router = APIRouter()

# 將 outbox 置於 /activitypub 底下
activitypub_router.include_router(outbox_router)
