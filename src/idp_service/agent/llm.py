"""
OpenAI-compatible chat completions client.

Any endpoint speaking the OpenAI chat API works; point LLM_BASE_URL at it.
The SDK client is created on first use so the service starts without LLM
credentials and only the chat route fails when they are missing.
"""
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from idp_service.config.settings import Settings
from idp_service.domain.exceptions import LLMError
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Thin wrapper over AsyncOpenAI returning the first choice's content.

    Example:
        client = LLMClient(model="gpt-4o-mini", api_key="sk-...")
        content = await client.complete([{"role": "user", "content": "hi"}])
    """

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
    ):
        self._model = model
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[AsyncOpenAI] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClient":
        return cls(
            model=settings.llm_model,
            api_key=settings.llm_api_key.get_secret_value() if settings.llm_api_key else None,
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout,
        )

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise LLMError(
                    "The AI assistant is not configured",
                    suggested_action="Set LLM_API_KEY and restart the service",
                )
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, messages: List[Dict[str, str]]) -> Any:
        """
        Send a chat completion request.

        Returns:
            The first choice's message content, or None when the response
            has no choices.

        Raises:
            LLMError: If the client is not configured or the call fails
        """
        client = self._get_client()

        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=messages,
            )
        except OpenAIError as e:
            logger.error("LLM request failed", model=self._model, error=str(e))
            raise LLMError(details={"model": self._model, "reason": type(e).__name__}) from e

        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
