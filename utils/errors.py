"""
Error types surfaced by tool invocations.
Every failure a caller can see is one of the BridgeError subclasses below.
"""
from typing import Any, List, Optional, Tuple

from utils.logger import redact


class BridgeError(Exception):
    """Base class for all classified tool-call failures."""

    kind: str = "bridge_error"

    def __init__(self, message: str):
        message = redact(message)
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"

    def to_payload(self) -> dict[str, Any]:
        """Render the error as a JSON-safe dict for callers."""
        return {"error": self.kind, "message": self.message}


class ValidationError(BridgeError):
    """Caller-supplied arguments do not match the operation schema."""

    kind = "validation_error"

    def __init__(self, violations: List[Tuple[str, str]]):
        self.violations = list(violations)
        details = "; ".join(f"{path}: {reason}" for path, reason in self.violations)
        super().__init__(f"Invalid input ({len(self.violations)} violation(s)): {details}")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["violations"] = [
            {"field": path, "reason": reason} for path, reason in self.violations
        ]
        return payload


class UnknownOperationError(BridgeError):
    """The requested tool name is not registered."""

    kind = "unknown_operation"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class RemoteAPIError(BridgeError):
    """The OpenAI API answered with a non-2xx status (or an unusable body)."""

    kind = "remote_api_error"

    def __init__(self, status_code: int, body_text: str):
        self.status_code = status_code
        self.body_text = redact(body_text)
        super().__init__(f"OpenAI API Error: {status_code} - {self.body_text}")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["status_code"] = self.status_code
        return payload


class TransportError(BridgeError):
    """The request never produced a response (DNS, connect, timeout...)."""

    kind = "transport_error"

    def __init__(self, cause: Exception, url: Optional[str] = None):
        self.cause = cause
        self.url = url
        target = f" calling {url}" if url else ""
        reason = str(cause) or type(cause).__name__
        super().__init__(f"Network failure{target}: {reason}")


class ConfigurationError(BridgeError):
    """The bridge is missing required configuration (e.g. the API key)."""

    kind = "configuration_error"
