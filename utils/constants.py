"""
Constants for the OpenAI Web Search Bridge: tool names, model ids and tool descriptions.
"""


# Tool name constants
class ToolName:
    """Externally visible operation names."""
    CHAT_COMPLETION, RESPONSES = "web_search_chat_completion", "web_search_responses"


# Message role constants
class Role:
    """Conversation message roles."""
    USER, ASSISTANT, SYSTEM, DEVELOPER = "user", "assistant", "system", "developer"


TOOL_DESCRIPTIONS = {
    ToolName.CHAT_COMPLETION: (
        "Perform a web search using OpenAI's Chat Completions API with search-enabled models"
    ),
    ToolName.RESPONSES: (
        "Perform a web search using OpenAI's Responses API with the web_search_preview tool. "
        "A message list is converted to instructions (last system message) and input "
        "(last user message)."
    ),
}
