"""Google Gemini LLM provider implementation.

Talks to the Gemini REST API directly with httpx:
POST /v1beta/models/{model}:generateContent?key={api_key}

Note: Gemini can return candidates without text parts (e.g. after safety
filtering). Such replies are normalized to an empty message rather than
treated as errors; only non-success HTTP statuses and transport failures
raise.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

import httpx

from ... import settings
from ...config import PROVIDER_TIMEOUT_SECONDS
from ..base import FunctionDescriptor, LLMProvider, Streamer, emit
from ..catalog import GEMINI_MODELS, ModelCatalog
from ..errors import MissingAPIKeyError, ProviderError
from ..models import ChatMessage, ChatRequest, ChatResponse, ResponseChunk, TextChunk

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"

_KEY_PARAM = re.compile(r"([?&]key=)[^&\s\"']+")


class RedactKeyFilter(logging.Filter):
    """Masks the ``key`` query credential in log records.

    httpx logs every request URL at INFO, and Gemini takes the API key in
    the query string.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _KEY_PARAM.sub(r"\1***", message)
        if redacted != message:
            record.msg, record.args = redacted, ()
        return True


_redact_key = RedactKeyFilter()
logging.getLogger("httpx").addFilter(_redact_key)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - Wire format of generateContent requests and responses
    - API key passed as the ``key`` query credential
    - Streaming delivered as two ordered chunks after a single request
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = settings.DEFAULT_MODEL,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = PROVIDER_TIMEOUT_SECONDS,
        catalog: ModelCatalog = GEMINI_MODELS,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key (default: GEMINI_API_KEY)
            model: Default model (gemini-2.5-pro, gemini-2.5-flash, ...)
            base_url: API base URL
            timeout: Request timeout in seconds
            catalog: Models this provider accepts
            **client_kwargs: Additional kwargs for httpx.AsyncClient

        Raises:
            MissingAPIKeyError: If no API key is given or configured
        """
        api_key = api_key if api_key is not None else settings.gemini_api_key()
        if not api_key or not api_key.strip():
            raise MissingAPIKeyError("Missing Gemini API key")

        self._api_key = api_key
        self._model = model
        self._catalog = catalog
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    def _build_payload(self, request: ChatRequest) -> dict[str, Any]:
        """Convert a chat request to the generateContent body."""
        payload: dict[str, Any] = {
            "contents": [
                {"role": "user", "parts": [{"text": request.prompt}]}
            ]
        }
        if request.instructions and request.instructions.strip():
            payload["systemInstruction"] = {
                "role": "system",
                "parts": [{"text": request.instructions}],
            }
        return payload

    def _extract_text(self, data: Any) -> str:
        """Join the text parts of the first candidate, tolerating bad shapes.

        Args:
            data: Decoded response body

        Returns:
            Reply text or empty string
        """
        if not isinstance(data, dict):
            return ""
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return ""

        candidate = candidates[0]
        content = candidate.get("content") if isinstance(candidate, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return ""

        texts = [
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ]
        return "".join(texts)

    async def chat_response(
        self,
        prompt: str,
        model: str | None = None,
        instructions: str | None = None,
        functions: Sequence[FunctionDescriptor] = (),
        function_results: Sequence[Any] = (),
        previous_response_id: str | None = None,
        streamer: Streamer | None = None,
    ) -> ChatResponse:
        """Generate a chat response using Google Gemini.

        Function declarations, function results and the previous response id
        are accepted for interface compatibility but are not sent: this
        integration does not surface function calls yet.

        Args:
            prompt: User prompt
            model: Model to use (overrides default)
            instructions: System instruction text
            functions: Functions the model may call
            function_results: Results of earlier function calls
            previous_response_id: Id of the response being followed up
            streamer: Optional callback receiving a text chunk (if any text)
                then a response chunk

        Returns:
            ChatResponse with a single message
        """
        model_to_use = self._catalog.require(model or self._model)
        request = ChatRequest(
            prompt=prompt,
            instructions=instructions,
            functions=[f.function_name for f in functions],
            previous_response_id=previous_response_id,
        )
        if request.functions or function_results or previous_response_id:
            logger.debug(
                "Gemini ignores %d functions, %d function results, previous response %s",
                len(request.functions), len(function_results), previous_response_id
            )

        logger.debug("Sending Gemini request to model %s", model_to_use)
        try:
            response = await self._client.post(
                f"/v1beta/models/{model_to_use}:generateContent",
                params={"key": self._api_key},
                json=self._build_payload(request),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise ProviderError("Gemini request failed", details=str(e)) from e

        if not response.is_success:
            logger.warning("Gemini API error %s for model %s", response.status_code, model_to_use)
            raise ProviderError("Gemini API error", details=response.text)

        try:
            data = response.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body for model %s", model_to_use)
            data = None

        text = self._extract_text(data)
        chat_response = ChatResponse(
            model=model_to_use,
            messages=[ChatMessage(text=text)],
            function_calls=[],
        )

        if streamer is not None:
            if text:
                await emit(streamer, TextChunk(text=text))
            await emit(streamer, ResponseChunk(response=chat_response))

        return chat_response

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
