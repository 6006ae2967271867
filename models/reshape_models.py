"""
Data models for request processing.
Contains the reshaped Responses input, per-call state and the tool-call outcome.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from models.api_models import ConversationMessage


@dataclass(frozen=True)
class ReshapedInput:
    """
    Conversation converted to the Responses API input shape.
    `context` holds the non-system messages before the selected input; it is
    kept for inspection only and never sent upstream.
    """
    input: str
    instructions: Optional[str] = None
    context: tuple[ConversationMessage, ...] = ()
    previous_response_id: Optional[str] = None


class OperationState(Enum):
    """Lifecycle of a single tool invocation."""
    VALIDATING = "validating"
    FORWARDING = "forwarding"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ToolCallOutcome:
    """Tagged result of a tool invocation: success content or a classified error."""
    ok: bool
    content: Optional[dict[str, Any]] = None
    error_kind: Optional[str] = None
    message: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, content: dict[str, Any]) -> "ToolCallOutcome":
        return cls(ok=True, content=content)

    @classmethod
    def failure(cls, error_kind: str, message: str, **details: Any) -> "ToolCallOutcome":
        return cls(ok=False, error_kind=error_kind, message=message, details=details)
