import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import httpx

from app.core.http_client import use_client
from app.core.activitypub.discovery import discover_inbox
from app.core.activitypub.errors import DeliveryError, DeliveryErrorKind, SomeDeliveriesFailed
from app.core.activitypub.targets import PUBLIC_COLLECTION_ID, resolve_targets, unique_targets
from app.core.activitypub.transport import deliver

logger = logging.getLogger(__name__)

DeliveryOutcome = Union[str, DeliveryError]


async def deliver_activity(activity: Dict[str, Any], target: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Discover a target's inbox and deliver the activity to it"""
    inbox = await discover_inbox(target, client)
    await deliver(activity, inbox, client)
    return target


async def _attempt(activity: Dict[str, Any], target: Any, client: httpx.AsyncClient) -> DeliveryOutcome:
    # the public collection is a broadcast marker, not an endpoint
    if target == PUBLIC_COLLECTION_ID:
        return target
    try:
        if not isinstance(target, str):
            raise DeliveryError(DeliveryErrorKind.TARGET_REQUEST_FAILED, f"Invalid target {target!r}", target)
        return await deliver_activity(activity, target, client)
    except DeliveryError as e:
        e.target = target
        logger.info("Delivery to %s failed (%s): %s", target, e.kind.value, e.message)
        return e


async def target_and_deliver(
    activity: Dict[str, Any],
    targets: Optional[Iterable[str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[str]:
    """
    Deliver an activity to the inbox of each of its targets.

    Every target is attempted concurrently and independently; the batch
    settles only once all attempts have finished.

    Args:
        activity: The activity to deliver
        targets: Targets to deliver to, defaults to resolve_targets(activity)
        client: HTTP client to use; a temporary one is opened if omitted

    Returns:
        The delivered targets

    Raises:
        SomeDeliveriesFailed: if any target failed. Carries the failures and
            the targets that were delivered alongside them.
    """
    targets = resolve_targets(activity) if targets is None else unique_targets(targets)
    if not targets:
        return []

    async with use_client(client) as http:
        outcomes = await asyncio.gather(*(_attempt(activity, target, http) for target in targets))

    deliveries = [o for o in outcomes if not isinstance(o, DeliveryError)]
    failures = [o for o in outcomes if isinstance(o, DeliveryError)]

    if failures:
        logger.warning(
            "Delivered %s to %d of %d targets",
            activity.get("id"), len(deliveries), len(outcomes),
        )
        raise SomeDeliveriesFailed(failures, deliveries)
    return deliveries
