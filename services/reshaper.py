"""
Conversion of a role/content conversation into the Responses API input shape.
"""
from typing import Optional, Sequence

from models.api_models import ConversationMessage
from models.reshape_models import ReshapedInput
from utils.constants import Role
from utils.logger import app_logger


class MessageReshaper:
    """Turns a message list into instructions + input (+ unsent context)."""

    @staticmethod
    def reshape(
        messages: Sequence[ConversationMessage],
        previous_response_id: Optional[str] = None,
    ) -> ReshapedInput:
        """
        Reshape a conversation for the Responses API.

        The last system message becomes the instructions; earlier ones are
        dropped. The last user message becomes the input and the non-system
        messages before it become the context. Without any user message the
        most recent non-system message is used instead.

        Args:
            messages: Conversation in chronological order
            previous_response_id: Caller-supplied id, passed through unchanged

        Returns:
            ReshapedInput for the request body
        """
        system_messages = [m for m in messages if m.role == Role.SYSTEM]
        other_messages = [m for m in messages if m.role != Role.SYSTEM]

        instructions = system_messages[-1].content if system_messages else None

        input_index = MessageReshaper._find_input_index(other_messages)
        if input_index is None:
            text = ""
            context: tuple[ConversationMessage, ...] = ()
        else:
            text = other_messages[input_index].content
            context = tuple(other_messages[:input_index])

        if len(system_messages) > 1:
            app_logger.debug(f"Discarded {len(system_messages) - 1} earlier system message(s), last one wins")
        if not other_messages:
            app_logger.debug("Conversation has no non-system messages, forwarding empty input")

        return ReshapedInput(
            input=text,
            instructions=instructions,
            context=context,
            previous_response_id=previous_response_id,
        )

    @staticmethod
    def _find_input_index(messages: Sequence[ConversationMessage]) -> Optional[int]:
        """Index of the last user message, else of the last message, else None."""
        for i in range(len(messages) - 1, -1, -1):
            if messages[i].role == Role.USER:
                return i
        if messages:
            return len(messages) - 1
        return None
