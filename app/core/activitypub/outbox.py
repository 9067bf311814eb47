from fastapi import APIRouter, Request, HTTPException
from fastapi.responses import ORJSONResponse
import logging

from app.core.config import settings
from app.core.http_client import HTTPClient
from app.core.activitypub.errors import SomeDeliveriesFailed
from app.core.activitypub.federation import target_and_deliver
from app.core.activitypub.targets import as2_object_is_activity
from app.core.activitypub.utils import create_activity_object
from app.models.activitypub import DeliveryFailureModel, DeliveryResponse

logger = logging.getLogger(__name__)

outbox_router = APIRouter()

@outbox_router.post("/outbox")
async def post_to_outbox(request: Request):
    """Accept an activity (or bare object) and deliver it to its targets"""
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Expected a JSON object")

    # https://www.w3.org/TR/activitypub/#object-without-create
    activity = body if as2_object_is_activity(body) else create_activity_object(body)

    if not settings.FEDERATION_ENABLED:
        logger.info("Federation disabled, not delivering %s", activity.get("id"))
        return ORJSONResponse(DeliveryResponse(activity=activity).model_dump(mode="json"), status_code=201)

    try:
        deliveries = await target_and_deliver(activity, client=HTTPClient.shared_client)
    except SomeDeliveriesFailed as e:
        result = DeliveryResponse(
            activity=activity,
            deliveries=e.deliveries,
            failures=[DeliveryFailureModel.from_error(f) for f in e.failures],
        )
        return ORJSONResponse(result.model_dump(mode="json"), status_code=502)

    result = DeliveryResponse(activity=activity, deliveries=deliveries)
    return ORJSONResponse(result.model_dump(mode="json"), status_code=201)
