"""
Operation dispatcher: routes a tool name through validate -> (reshape) -> forward.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from models.reshape_models import OperationState, ToolCallOutcome
from services.forwarder import Endpoint, RequestForwarder
from services.request_builder import RequestBuilder
from services.validator import SchemaValidator
from utils.constants import TOOL_DESCRIPTIONS, ToolName
from utils.errors import BridgeError, UnknownOperationError
from utils.logger import app_logger


@dataclass(frozen=True)
class Operation:
    """A registered tool: where it forwards to and how its body is built."""
    name: str
    description: str
    endpoint: Endpoint
    build_body: Callable[[Any], Dict[str, Any]]


DEFAULT_OPERATIONS = (
    Operation(
        name=ToolName.CHAT_COMPLETION,
        description=TOOL_DESCRIPTIONS[ToolName.CHAT_COMPLETION],
        endpoint=Endpoint.CHAT_COMPLETIONS,
        build_body=RequestBuilder.build_chat_completion_body,
    ),
    Operation(
        name=ToolName.RESPONSES,
        description=TOOL_DESCRIPTIONS[ToolName.RESPONSES],
        endpoint=Endpoint.RESPONSES,
        build_body=RequestBuilder.build_responses_body,
    ),
)


class OperationDispatcher:
    """Single entry point for tool invocations. Holds no per-call state."""

    def __init__(
        self,
        forwarder: RequestForwarder,
        validator: Optional[SchemaValidator] = None,
        operations: tuple[Operation, ...] = DEFAULT_OPERATIONS,
    ):
        self.forwarder = forwarder
        self.validator = validator or SchemaValidator()
        self.operations = {operation.name: operation for operation in operations}

    def list_tools(self) -> List[Dict[str, Any]]:
        """Tool definitions with their input JSON Schemas."""
        return [
            {
                "name": operation.name,
                "description": operation.description,
                "inputSchema": self.validator.json_schema(operation.name),
            }
            for operation in self.operations.values()
        ]

    async def dispatch(self, name: str, arguments: Any) -> Dict[str, Any]:
        """
        Run one tool invocation.

        Args:
            name: Tool name
            arguments: Raw, untyped tool arguments

        Returns:
            {"content": <remote JSON body>}

        Raises:
            UnknownOperationError, ValidationError, ConfigurationError,
            RemoteAPIError or TransportError, unchanged.
        """
        operation = self.operations.get(name)
        if operation is None:
            app_logger.warning(f"Unknown tool requested: {name}")
            raise UnknownOperationError(name)

        state = OperationState.VALIDATING
        app_logger.debug(f"{name}: {state.value}")
        try:
            params: BaseModel = self.validator.validate(name, arguments)
            body = operation.build_body(params)

            state = OperationState.FORWARDING
            app_logger.debug(f"{name}: {state.value}")
            result = await self.forwarder.forward(operation.endpoint, body)
        except BridgeError as e:
            app_logger.error(f"{name}: {OperationState.FAILED.value} while {state.value} ({e.kind})")
            raise

        app_logger.debug(f"{name}: {OperationState.COMPLETED.value}")
        return {"content": result}

    async def invoke(self, name: str, arguments: Any) -> ToolCallOutcome:
        """Like dispatch(), but returns a tagged outcome instead of raising classified errors."""
        try:
            payload = await self.dispatch(name, arguments)
        except BridgeError as e:
            details = e.to_payload()
            details.pop("error")
            details.pop("message")
            return ToolCallOutcome.failure(e.kind, e.message, **details)
        return ToolCallOutcome.success(payload["content"])
