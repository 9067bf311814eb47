import logging
from typing import Any, Dict, Optional

import httpx

from app.core.http_client import use_client
from app.core.activitypub.errors import DeliveryError, DeliveryErrorKind
from app.core.activitypub.utils import delivery_headers

logger = logging.getLogger(__name__)


async def deliver(activity: Dict[str, Any], inbox: str, client: Optional[httpx.AsyncClient] = None) -> None:
    """POST an activity to an inbox.

    Only transport errors fail the delivery; the response body is discarded.
    No retry or timeout is applied here.
    """
    async with use_client(client) as http:
        try:
            response = await http.post(inbox, json=activity, headers=delivery_headers())
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise DeliveryError(DeliveryErrorKind.DELIVERY_REQUEST_FAILED, str(e), inbox) from e

    if response.is_success:
        logger.debug("Delivered %s to %s: %s", activity.get("id"), inbox, response.status_code)
    else:
        logger.warning("Inbox %s answered %s to delivery of %s", inbox, response.status_code, activity.get("id"))
