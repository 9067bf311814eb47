"""
Delivery error taxonomy.

Every failure carries a ``kind`` so callers can branch on it instead of
on the exception class.
"""

from enum import Enum
from typing import Any, List, Optional


class DeliveryErrorKind(str, Enum):
    # Failed to send HTTP request to a target
    TARGET_REQUEST_FAILED = "TargetRequestFailed"
    # Failed to parse target HTTP response as JSON
    TARGET_PARSE_FAILED = "TargetParseFailed"
    # Target could be fetched, but no .inbox could be determined
    INBOX_DISCOVERY_FAILED = "InboxDiscoveryFailed"
    # Found an inbox, but failed to POST delivery to it
    DELIVERY_REQUEST_FAILED = "DeliveryRequestFailed"
    # At least one delivery in a batch did not succeed
    SOME_DELIVERIES_FAILED = "SomeDeliveriesFailed"


class DeliveryError(Exception):
    """A delivery failure of a given kind, optionally bound to one target."""

    def __init__(self, kind: DeliveryErrorKind, message: str, target: Optional[Any] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.target = target

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "target": self.target,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value}, {self.message!r}, target={self.target!r})"


class SomeDeliveriesFailed(DeliveryError):
    """
    Aggregate failure for a delivery batch.

    Attributes:
        failures: one DeliveryError per failed target
        deliveries: targets that were delivered in the same batch
    """

    def __init__(self, failures: List[DeliveryError], deliveries: Optional[List[str]] = None):
        failed = ", ".join(str(f.target) for f in failures)
        super().__init__(
            DeliveryErrorKind.SOME_DELIVERIES_FAILED,
            f"{len(failures)} deliveries failed: {failed}",
        )
        self.failures = list(failures)
        self.deliveries = list(deliveries or [])
