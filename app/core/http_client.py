import httpx
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from app.core.config import settings

class HTTPClient:
    """Outbound HTTP client holder"""
    # 共享 httpx AsyncClient（由應用啟動時注入）
    shared_client: Optional[httpx.AsyncClient] = None

    @classmethod
    def set_shared_client(cls, client: Optional[httpx.AsyncClient]) -> None:
        cls.shared_client = client

    @staticmethod
    def build() -> httpx.AsyncClient:
        """Build a client from settings (connection pool, optional timeout, User-Agent)"""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(settings.HTTP_TIMEOUT),
            limits=httpx.Limits(
                max_connections=settings.MAX_CONNECTIONS,
                max_keepalive_connections=settings.MAX_CONNECTIONS,
            ),
            headers={"User-Agent": settings.USER_AGENT},
        )

@asynccontextmanager
async def use_client(client: Optional[httpx.AsyncClient] = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the given client, else the shared one, else a temporary one closed on exit"""
    client = client or HTTPClient.shared_client
    if client is not None:
        yield client
        return
    async with HTTPClient.build() as temp_client:
        yield temp_client
