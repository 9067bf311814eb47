from pydantic import BaseModel
from typing import Any, Dict, List, Optional

class DeliveryFailureModel(BaseModel):
    kind: str
    target: Optional[Any] = None
    message: str

    @classmethod
    def from_error(cls, error) -> "DeliveryFailureModel":
        return cls(**error.to_dict())

class DeliveryResponse(BaseModel):
    activity: Dict[str, Any]
    deliveries: List[str] = []
    failures: List[DeliveryFailureModel] = []
