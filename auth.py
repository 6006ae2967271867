"""
Authentication middleware for the HTTP tool endpoints.
"""
import secrets

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from config import Config
from utils.logger import app_logger


class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Checks the X-API-Key header against BRIDGE_API_KEY.
    When no key is configured the endpoints are open (local use).
    """

    EXCLUDED_PATHS = {"/", "/docs", "/openapi.json"}
    API_KEY: str = Config.BRIDGE_API_KEY

    async def dispatch(self, request: Request, call_next):
        """
        Verify the caller's key before handing the request on.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler or error response
        """
        if not self.API_KEY or request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        api_key = request.headers.get("x-api-key")
        client_host = request.client.host if request.client else "unknown"

        if not api_key:
            app_logger.warning(f"Unauthorized request from {client_host} - Missing API key")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "error": "unauthorized",
                    "message": "Missing API key. Include 'X-API-Key' header in your request.",
                },
                headers={"WWW-Authenticate": "ApiKey"},
            )

        if not secrets.compare_digest(api_key.encode(), self.API_KEY.encode()):
            app_logger.warning(f"Forbidden request from {client_host} - Invalid API key")
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"error": "forbidden", "message": "Invalid API key"},
            )

        return await call_next(request)
