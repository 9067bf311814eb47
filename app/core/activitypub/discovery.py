"""
Inbox discovery for delivery targets.
"""

import logging
from typing import Any, Optional
from urllib.parse import urljoin

import httpx

from app.core.http_client import use_client
from app.core.activitypub.errors import DeliveryError, DeliveryErrorKind
from app.core.activitypub.utils import client_headers

logger = logging.getLogger(__name__)


async def fetch_profile(target: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """
    Fetch and parse the JSON profile of a target.

    Raises:
        DeliveryError: TargetRequestFailed on transport errors,
            TargetParseFailed when the body isn't JSON
    """
    async with use_client(client) as http:
        try:
            response = await http.get(target, headers=client_headers())
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise DeliveryError(DeliveryErrorKind.TARGET_REQUEST_FAILED, str(e), target) from e

    logger.debug("Fetched profile %s: %s", target, response.status_code)
    try:
        return response.json()
    except ValueError as e:
        raise DeliveryError(DeliveryErrorKind.TARGET_PARSE_FAILED, str(e), target) from e


def inbox_from_profile(target: str, profile: Any) -> str:
    """Absolute inbox URI of a profile, resolved against the target URI"""
    # plain property lookup, no JSON-LD context processing
    inbox = profile.get("inbox") if isinstance(profile, dict) else None
    if not inbox or not isinstance(inbox, str):
        raise DeliveryError(
            DeliveryErrorKind.INBOX_DISCOVERY_FAILED,
            f"No .inbox found for target {target}",
            target,
        )
    try:
        return urljoin(target, inbox)
    except ValueError as e:
        raise DeliveryError(
            DeliveryErrorKind.INBOX_DISCOVERY_FAILED,
            f"Invalid .inbox {inbox!r} for target {target}: {e}",
            target,
        ) from e


async def discover_inbox(target: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Resolve a target identifier to the inbox activities should be POSTed to"""
    profile = await fetch_profile(target, client)
    inbox = inbox_from_profile(target, profile)
    logger.debug("Discovered inbox %s for %s", inbox, target)
    return inbox
