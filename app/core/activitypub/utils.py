import uuid
from datetime import datetime
from typing import Dict, Any, Optional
from app.core.config import settings

# ActivityPub mandates the JSON-LD media type with the AS2 profile for both
# client GETs (Accept) and server-to-server POSTs (Content-Type)
ACTIVITYPUB_MEDIA_TYPE = 'application/ld+json; profile="https://www.w3.org/ns/activitystreams#"'
AS2_CONTEXT = "https://www.w3.org/ns/activitystreams"

def client_headers(headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Headers for an ActivityPub client request, with any extra headers merged in.

    The Accept header is fixed by the protocol, so callers may not supply one.
    """
    headers = dict(headers or {})
    if any(name.lower() == "accept" for name in headers):
        raise ValueError(
            "ActivityPub client requests can't include a custom Accept header. "
            f'It must always be "{ACTIVITYPUB_MEDIA_TYPE}"'
        )
    requirements = {"Accept": ACTIVITYPUB_MEDIA_TYPE}
    requirements.update(headers)
    return requirements

def delivery_headers() -> Dict[str, str]:
    """Headers for POSTing an activity to an inbox"""
    return {"Content-Type": ACTIVITYPUB_MEDIA_TYPE}

def generate_activity_id(activity_type: str) -> str:
    """Generate an Activity ID under the local domain"""
    timestamp = datetime.utcnow().strftime("%Y%m%d%H%M%S")
    unique_id = str(uuid.uuid4())[:8]
    return f"{settings.ACTIVITYPUB_PROTOCOL}://{settings.ACTIVITYPUB_DOMAIN}/activities/{activity_type.lower()}/{timestamp}-{unique_id}"

def create_activity_object(object_data: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a bare object in a Create activity.

    Addressing and authorship are copied up from the object so the
    activity is delivered to the same audience.
    """
    activity = {
        "@context": object_data.get("@context", AS2_CONTEXT),
        "id": generate_activity_id("Create"),
        "type": "Create",
        "object": object_data,
        "published": object_data.get("published") or datetime.utcnow().isoformat() + "Z",
    }

    actor = object_data.get("attributedTo")
    if actor:
        activity["actor"] = actor

    for field in ("to", "cc", "bcc"):
        if object_data.get(field):
            activity[field] = object_data[field]

    return activity
