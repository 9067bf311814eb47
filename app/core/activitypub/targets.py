"""
Delivery target resolution.

Works only on an activity's addressing fields; no I/O.
"""

from typing import Any, Dict, Iterable, List, Set

PUBLIC_COLLECTION_ID = "https://www.w3.org/ns/activitystreams#Public"

# https://www.w3.org/TR/activitystreams-vocabulary/#activity-types
ACTIVITY_TYPES = frozenset([
    "Accept", "Add", "Announce", "Arrive", "Block", "Create", "Delete",
    "Dislike", "Flag", "Follow", "Ignore", "Invite", "Join", "Leave", "Like",
    "Listen", "Move", "Offer", "Question", "Reject", "Read", "Remove",
    "TentativeReject", "TentativeAccept", "Travel", "Undo", "Update", "View",
])

ADDRESSING_FIELDS = ("to", "cc", "bcc")


def as2_object_is_activity(obj: Dict[str, Any]) -> bool:
    """Whether an AS2 object is one of the core Activity types"""
    # TODO: extension activities that declare themselves Activity subtypes via rdfs
    return obj.get("type") in ACTIVITY_TYPES


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def target_id(entry: Any) -> Any:
    """Identifier of an addressing entry; embedded objects are addressed by their id"""
    if isinstance(entry, dict):
        return target_id(entry.get("id"))
    if isinstance(entry, (list, tuple)):
        return None
    return entry


def unique_targets(targets: Iterable[Any]) -> List[Any]:
    """Deduplicate targets, keeping first-seen order"""
    unique: List[Any] = []
    for target in targets:
        target = target_id(target)
        if target and target not in unique:
            unique.append(target)
    return unique


def primary_targets(activity: Dict[str, Any]) -> List[Any]:
    """Targets named in to/cc/bcc, in field order, falsy entries dropped"""
    found: List[Any] = []
    for field in ADDRESSING_FIELDS:
        found.extend(_as_list(activity.get(field)))
    return unique_targets(found)


def notification_targets(activity: Dict[str, Any]) -> List[str]:
    """Implicit notification targets such as reply parents.

    Always empty until ActivityPub specifies them:
    https://github.com/w3c/activitypub/issues/161
    """
    return []


def resolve_targets(activity: Dict[str, Any]) -> Set[str]:
    """Return the set of targets an activity should be delivered to"""
    targets: Iterable[str] = primary_targets(activity) + notification_targets(activity)
    return set(targets)


def is_public_activity(activity: Dict[str, Any]) -> bool:
    """Whether the activity is addressed to the public collection"""
    return PUBLIC_COLLECTION_ID in resolve_targets(activity)
