"""
Models package exports.
"""
from models.api_models import (
    ConversationMessage,
    ApproximateLocation,
    WebSearchOptions,
    ChatCompletionParams,
    WebSearchTool,
    ResponsesParams,
)
from models.reshape_models import ReshapedInput, OperationState, ToolCallOutcome

__all__ = [
    'ConversationMessage',
    'ApproximateLocation',
    'WebSearchOptions',
    'ChatCompletionParams',
    'WebSearchTool',
    'ResponsesParams',
    'ReshapedInput',
    'OperationState',
    'ToolCallOutcome',
]
