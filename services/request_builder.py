"""
Builds outbound OpenAI request bodies from validated tool arguments.
"""
from typing import Any, Dict, Optional

from models.api_models import ChatCompletionParams, ResponsesParams
from models.reshape_models import ReshapedInput
from services.reshaper import MessageReshaper


class RequestBuilder:
    """Maps validated parameters onto the Chat Completions and Responses payloads."""

    CHAT_OPTIONAL_FIELDS = (
        "temperature",
        "max_completion_tokens",
        "top_p",
        "presence_penalty",
        "frequency_penalty",
        "seed",
        "logprobs",
        "top_logprobs",
        "response_format",
        "stop",
        "user",
        "service_tier",
        "reasoning_effort",
        "store",
        "parallel_tool_calls",
    )

    # tool argument name -> Responses API field name
    RESPONSES_OPTIONAL_FIELDS = {
        "temperature": "temperature",
        "max_tokens": "max_output_tokens",
        "top_p": "top_p",
        "presence_penalty": "presence_penalty",
        "frequency_penalty": "frequency_penalty",
        "truncation": "truncation",
        "user": "user",
        "parallel_tool_calls": "parallel_tool_calls",
        "store": "store",
    }

    @staticmethod
    def build_chat_completion_body(params: ChatCompletionParams) -> Dict[str, Any]:
        """Chat Completions body; messages are forwarded exactly as received."""
        body: Dict[str, Any] = {
            "model": params.model,
            "messages": [message.model_dump() for message in params.messages],
            "web_search_options": params.web_search_options.model_dump(exclude_none=True),
        }

        for name in RequestBuilder.CHAT_OPTIONAL_FIELDS:
            value = getattr(params, name)
            if value is None:
                continue
            if name == "response_format":
                value = value.model_dump(exclude_none=True)
            body[name] = value

        return body

    @staticmethod
    def resolve_input(params: ResponsesParams) -> ReshapedInput:
        """Reshape message-list input; plain string input is used unchanged."""
        if isinstance(params.input, str):
            return ReshapedInput(
                input=params.input,
                instructions=params.instructions,
                previous_response_id=params.previous_response_id,
            )

        reshaped = MessageReshaper.reshape(params.input, params.previous_response_id)
        if reshaped.instructions is None and params.instructions is not None:
            return ReshapedInput(
                input=reshaped.input,
                instructions=params.instructions,
                context=reshaped.context,
                previous_response_id=reshaped.previous_response_id,
            )
        return reshaped

    @staticmethod
    def build_responses_body(
        params: ResponsesParams,
        reshaped: Optional[ReshapedInput] = None,
    ) -> Dict[str, Any]:
        """Responses body with the resolved input fields and any set options."""
        if reshaped is None:
            reshaped = RequestBuilder.resolve_input(params)

        body: Dict[str, Any] = {
            "model": params.model,
            "tools": [tool.model_dump(exclude_none=True) for tool in params.tools],
            "input": reshaped.input,
        }

        if reshaped.instructions is not None:
            body["instructions"] = reshaped.instructions
        if reshaped.previous_response_id is not None:
            body["previous_response_id"] = reshaped.previous_response_id

        for name, api_name in RequestBuilder.RESPONSES_OPTIONAL_FIELDS.items():
            value = getattr(params, name)
            if value is not None:
                body[api_name] = value

        if params.response_format is not None:
            body["text"] = {"format": params.response_format.model_dump(exclude_none=True)}

        return body
