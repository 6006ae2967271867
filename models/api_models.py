"""
Pydantic models describing the accepted arguments of each tool.
"""
from typing import Any, List, Literal, Optional, Union
from pydantic import BaseModel, Field


RoleName = Literal["user", "assistant", "system", "developer"]
SearchContextSize = Literal["low", "medium", "high"]


class ConversationMessage(BaseModel):
    """Chat message model."""
    role: RoleName
    content: str


class ApproximateLocationDetails(BaseModel):
    """Partial geographic hint, every field optional."""
    country: Optional[str] = Field(None, min_length=2, max_length=2, description="Two-letter ISO country code (e.g., 'US')")
    city: Optional[str] = Field(None, description="City name (e.g., 'San Francisco')")
    region: Optional[str] = Field(None, description="Region or state (e.g., 'California')")
    timezone: Optional[str] = Field(None, description="IANA timezone (e.g., 'America/Los_Angeles')")


class ApproximateLocation(BaseModel):
    """User location used to bias search results."""
    type: Literal["approximate"]
    approximate: ApproximateLocationDetails


class WebSearchOptions(BaseModel):
    """Search configuration for the Chat Completions API."""
    user_location: Optional[ApproximateLocation] = Field(None, description="Optional user location to refine search results")
    search_context_size: Optional[SearchContextSize] = Field(None, description="Amount of context retrieved from the web")


class ChatResponseFormat(BaseModel):
    type: Literal["json_object", "text", "json_schema"] = Field(..., description="Format of the response")
    json_schema: Optional[Any] = Field(None, description="JSON schema for structured outputs")


class ChatCompletionParams(BaseModel):
    """Arguments of the web_search_chat_completion tool."""
    model: Literal["gpt-4o-search-preview", "gpt-4o-mini-search-preview"] = Field(..., description="Model to use for web search")
    messages: List[ConversationMessage] = Field(..., description="Conversation messages")
    web_search_options: WebSearchOptions = Field(default_factory=WebSearchOptions, description="Configuration options for web search")

    temperature: Optional[float] = Field(None, description="Controls randomness in the response (between 0 and 2)")
    max_completion_tokens: Optional[int] = Field(None, description="Maximum number of tokens for completion")
    top_p: Optional[float] = Field(None, description="Controls diversity via nucleus sampling")
    presence_penalty: Optional[float] = Field(None, description="Penalty for tokens based on presence in text (-2.0 to 2.0)")
    frequency_penalty: Optional[float] = Field(None, description="Penalty for tokens based on frequency in text (-2.0 to 2.0)")
    seed: Optional[int] = Field(None, description="Seed for deterministic sampling")
    logprobs: Optional[bool] = Field(None, description="Whether to return log probabilities of output tokens")
    top_logprobs: Optional[int] = Field(None, description="Number of most likely tokens to return (0-20)")
    response_format: Optional[ChatResponseFormat] = Field(None, description="Format of model's response")
    stop: Optional[Union[str, List[str]]] = Field(None, description="Sequences to stop generation")
    user: Optional[str] = Field(None, description="A unique identifier representing your end-user")
    service_tier: Optional[Literal["auto", "default"]] = Field(None, description="Latency tier to use for processing")
    reasoning_effort: Optional[Literal["low", "medium", "high"]] = Field(None, description="Effort on reasoning for reasoning models")
    store: Optional[bool] = Field(None, description="Whether to store the output for model distillation")
    parallel_tool_calls: Optional[bool] = Field(None, description="Whether to enable parallel function calling during tool use")


class WebSearchTool(BaseModel):
    """A web search tool entry for the Responses API."""
    type: Literal["web_search_preview", "web_search_preview_2025_03_11"]
    user_location: Optional[ApproximateLocation] = Field(None, description="Optional user location to refine search results")
    search_context_size: Optional[SearchContextSize] = Field(None, description="Amount of context retrieved from the web")


class TextResponseFormat(BaseModel):
    type: Optional[Literal["text", "json_object"]] = Field(None, description="Format of the response")


class ResponsesParams(BaseModel):
    """Arguments of the web_search_responses tool."""
    model: str = Field(..., description="Model to use for response generation")
    tools: List[WebSearchTool] = Field(..., description="Tools the model can use")
    input: Union[str, List[ConversationMessage]] = Field(
        ...,
        description="Plain text input, or conversation messages (converted to input/instructions format)"
    )

    temperature: Optional[float] = Field(None, description="Controls randomness in the response")
    max_tokens: Optional[int] = Field(None, description="Maximum number of tokens to generate")
    top_p: Optional[float] = Field(None, description="Controls diversity via nucleus sampling")
    presence_penalty: Optional[float] = Field(None, description="Penalty for new tokens based on presence in text")
    frequency_penalty: Optional[float] = Field(None, description="Penalty for new tokens based on frequency in text")
    response_format: Optional[TextResponseFormat] = Field(None, description="Format of model's response")
    truncation: Optional[Literal["auto", "disabled"]] = Field(None, description="Truncation strategy for long inputs")
    user: Optional[str] = Field(None, description="A unique identifier representing your end-user")
    instructions: Optional[str] = Field(None, description="System-level instructions for the model")
    store: Optional[bool] = Field(None, description="Whether to store the response for later retrieval")
    parallel_tool_calls: Optional[bool] = Field(None, description="Whether to allow parallel tool calls")
    previous_response_id: Optional[str] = Field(None, description="ID of the previous response for multi-turn conversations")
