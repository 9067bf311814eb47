from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Basic settings
    PROJECT_NAME: str = "distbin ActivityPub Delivery"
    API_V1_STR: str = "/api/v1"

    # ActivityPub settings
    ACTIVITYPUB_DOMAIN: str = "localhost"
    ACTIVITYPUB_PROTOCOL: str = "http"

    # Outbound HTTP settings
    USER_AGENT: str = "distbin-delivery/1.0"
    HTTP_TIMEOUT: Optional[float] = None  # None disables timeouts
    MAX_CONNECTIONS: int = 100

    # CORS settings
    ALLOWED_HOSTS: List[str] = ["*"]

    # Federation settings
    FEDERATION_ENABLED: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
