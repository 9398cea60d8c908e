"""
Completion Agent - turns a persona, new input and context into reply messages.

The model answers in one piece; [BREAK] markers split it into separate
Telegram messages and [NO_RESPONSE] marks a part that needs no reply.
"""

from typing import Any, Dict, List, Optional

from core import get_logger, CompletionServiceError
from prompts import (
    SYSTEM_FRAME,
    MESSAGE_BREAK,
    NO_RESPONSE,
    PREVIOUS_MESSAGE_PREFIX,
    PHOTO_WITHOUT_CAPTION,
    get_persona,
)
from utils.llm_client import LLMClient

logger = get_logger(__name__)


def split_messages(raw: str) -> List[str]:
    """
    Split a raw model response into reply messages.

    Parts are stripped; a part that is blank or [NO_RESPONSE] becomes "" so
    the caller can tell "no response for this part" from a real message.
    """
    messages = []
    for part in raw.split(MESSAGE_BREAK):
        part = part.strip()
        if part == NO_RESPONSE:
            part = ""
        messages.append(part)
    return messages


class CompletionAgent:
    """
    Completion client used by the conversation pipeline.

    Flow:
    1. Build the system prompt from the persona
    2. Put context lines before the new inputs
    3. Ask the model
    4. Split the answer into messages
    """

    def __init__(
        self,
        llm: LLMClient,
        model: str,
        vision_model: Optional[str] = None,
        temperature: float = 0.7,
    ):
        self.llm = llm
        self.model = model
        self.vision_model = vision_model or model
        self.temperature = temperature
        logger.info("Completion agent initialized", model=model, vision_model=self.vision_model)

    def _system_prompt(self, persona: str) -> str:
        return SYSTEM_FRAME.format(persona=get_persona(persona))

    @staticmethod
    def _user_text(inputs: List[str], context: List[str]) -> str:
        lines = [f"{PREVIOUS_MESSAGE_PREFIX}{line}" for line in context]
        lines.extend(inputs)
        return "\n".join(lines)

    async def complete(
        self, persona: str, inputs: List[str], context: List[str]
    ) -> List[str]:
        """
        Generate replies to text input.

        Args:
            persona: Persona name, e.g. "friend"
            inputs: New user messages
            context: Earlier messages the user replied to

        Returns:
            Ordered reply messages; "" entries mean no response for that part

        Raises:
            CompletionServiceError: If the model request fails
        """
        system_prompt = self._system_prompt(persona)
        user_text = self._user_text(inputs, context)

        try:
            raw = await self.llm.chat_with_system(
                model=self.model,
                system_prompt=system_prompt,
                user_content=user_text,
                temperature=self.temperature,
            )
        except Exception as e:
            raise CompletionServiceError(model=self.model, details=str(e)) from e

        messages = split_messages(raw)
        logger.debug(
            "Completion generated",
            persona=persona,
            context_count=len(context),
            message_count=len(messages),
        )
        return messages

    async def complete_with_image(
        self, persona: str, inputs: List[str], image_url: str
    ) -> Optional[str]:
        """
        Generate a single reply to a photo.

        Returns:
            Reply text, or None when the model had nothing to say

        Raises:
            CompletionServiceError: If the model request fails
        """
        system_prompt = self._system_prompt(persona)
        content: List[Dict[str, Any]] = [
            {"type": "text", "text": "\n".join(inputs) if inputs else PHOTO_WITHOUT_CAPTION},
            {"type": "image_url", "image_url": {"url": image_url}},
        ]

        try:
            raw = await self.llm.chat_with_system(
                model=self.vision_model,
                system_prompt=system_prompt,
                user_content=content,
                temperature=self.temperature,
            )
        except Exception as e:
            raise CompletionServiceError(model=self.vision_model, details=str(e)) from e

        reply = "\n".join(message for message in split_messages(raw) if message)
        return reply or None
