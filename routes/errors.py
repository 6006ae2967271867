"""
Exception handlers that turn classified tool errors into JSON responses.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from utils.errors import (
    BridgeError,
    ConfigurationError,
    RemoteAPIError,
    TransportError,
    UnknownOperationError,
    ValidationError,
)
from utils.logger import app_logger


STATUS_BY_ERROR = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UnknownOperationError: status.HTTP_404_NOT_FOUND,
    RemoteAPIError: status.HTTP_502_BAD_GATEWAY,
    TransportError: status.HTTP_504_GATEWAY_TIMEOUT,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: BridgeError) -> int:
    """HTTP status used to report a classified error."""
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BridgeError)
    async def handle_bridge_error(request: Request, exc: BridgeError) -> JSONResponse:
        app_logger.error(f"Tool call to {request.url.path} failed: {exc.kind}")
        return JSONResponse(
            status_code=status_for(exc),
            content=exc.to_payload(),
        )
