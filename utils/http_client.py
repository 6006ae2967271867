"""
HTTP client utilities with connection pooling.
Provides a reusable httpx client for OpenAI API calls.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages the shared httpx client with connection pooling."""

    _openai_client: httpx.AsyncClient | None = None

    @classmethod
    def get_openai_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for OpenAI API calls.

        Features:
        - Connection pooling (reuses TCP connections)
        - HTTP/2 when the server supports it

        Returns:
            Configured httpx.AsyncClient
        """
        if cls._openai_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONNECTIONS,
                max_keepalive_connections=Config.MAX_KEEPALIVE_CONNECTIONS,
                keepalive_expiry=30.0
            )

            cls._openai_client = httpx.AsyncClient(
                timeout=Config.OPENAI_TIMEOUT,
                limits=limits,
                http2=True
            )

        return cls._openai_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close the managed client and clean up connections.
        """
        if cls._openai_client is not None:
            await cls._openai_client.aclose()
            cls._openai_client = None
