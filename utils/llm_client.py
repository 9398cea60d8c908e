"""
LLM Client using LiteLLM for multi-provider support.

Supports: OpenAI, Anthropic, Cohere, and 100+ other providers.
Switch providers by changing the model string.

Examples:
    - "gpt-4o-mini" (OpenAI)
    - "claude-3-5-sonnet-20241022" (Anthropic)
"""

from typing import List, Dict, Any, Optional
import litellm
from tenacity import retry, stop_after_attempt, wait_exponential

from core import get_logger

logger = get_logger(__name__)

# Configure LiteLLM
litellm.suppress_debug_info = True


class LLMClient:
    """
    Unified LLM client supporting multiple providers via LiteLLM.

    Usage:
        client = LLMClient()
        response = await client.chat("gpt-4o-mini", messages=[...])
    """

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize LLM client.

        Args:
            api_key: Explicit provider key. When None, LiteLLM reads the
                provider's environment variable (OPENAI_API_KEY, ...).
        """
        self.api_key = api_key
        logger.info("LLM client initialized")

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def chat(
        self,
        model: str,
        messages: List[Dict[str, Any]],
        temperature: float = 0.7,
        max_tokens: int = 1000,
        **kwargs: Any,
    ) -> str:
        """
        Generate a chat completion.

        Args:
            model: Model identifier
            messages: List of message dicts (content may be a list of parts for images)
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response
            **kwargs: Additional parameters

        Returns:
            Generated response text, "" when the model returned no content
        """
        if self.api_key and "api_key" not in kwargs:
            kwargs["api_key"] = self.api_key

        logger.debug(
            "LLM request",
            model=model,
            message_count=len(messages),
            temperature=temperature,
        )

        try:
            response = await litellm.acompletion(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
                **kwargs,
            )

            content = response.choices[0].message.content or ""
            finish_reason = response.choices[0].finish_reason

            logger.debug(
                "LLM response",
                model=model,
                tokens_used=response.usage.total_tokens if getattr(response, "usage", None) else None,
                response_length=len(content),
                finish_reason=finish_reason,
            )

            return content

        except Exception as e:
            logger.error("LLM request failed", model=model, error=str(e))
            raise

    async def chat_with_system(
        self,
        model: str,
        system_prompt: str,
        user_content: str | List[Dict[str, Any]],
        conversation_history: Optional[List[Dict[str, str]]] = None,
        **kwargs: Any,
    ) -> str:
        """
        Convenience method for chat with system prompt.
        user_content may be a plain string or a list of content parts (text + image_url).
        """
        messages: List[Dict[str, Any]] = [{"role": "system", "content": system_prompt}]

        if conversation_history:
            messages.extend(conversation_history)

        messages.append({"role": "user", "content": user_content})

        return await self.chat(model=model, messages=messages, **kwargs)
