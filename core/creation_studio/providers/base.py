"""
Base AI Provider Abstract Class
All vendor adapters must inherit from this class
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Optional

import httpx

from config.settings import Settings, get_settings, PLACEHOLDER_MARKER
from ..exceptions import ProviderError, ProviderNotConfiguredError
from ..models import GenerateOptions, Prompt, Vendor, prompt_text


class Capability:
    """Capability tags advertised by adapters"""
    TEXT = "text"
    JSON_MODE = "json_mode"
    MULTIMODAL = "multimodal"
    LONG_CONTEXT = "long_context"
    IMAGES = "images"
    EMBEDDINGS = "embeddings"


class AIProvider(ABC):
    """
    Abstract base class for all vendor adapters.

    All adapters must implement:
    - name / display_name / env_var properties
    - generate_text() method
    - _probe() method (minimal live call used by check_availability)

    Adapters never retry across vendors; that is the job of
    ResilientGenerator.
    """

    capabilities: FrozenSet[str] = frozenset({Capability.TEXT})

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        if api_key is None:
            api_key = self.settings.api_key_for(self.name.value)
        self.api_key = api_key or ""
        self.timeout = self.settings.request_timeout
        self.probe_timeout = self.settings.probe_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self.logger = logging.getLogger(f"CreationStudio.Provider.{self.name.value}")

        if self.is_configured():
            self.logger.info(f"{self.display_name} provider configured")
        else:
            self.logger.debug(f"{self.display_name}: no API key configured")

    @property
    @abstractmethod
    def name(self) -> Vendor:
        """Vendor identity"""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable vendor name"""
        pass

    @property
    @abstractmethod
    def env_var(self) -> str:
        """Environment variable holding the credential"""
        pass

    def is_configured(self) -> bool:
        """Credential present (no network call)."""
        return bool(self.api_key) and PLACEHOLDER_MARKER not in self.api_key

    @abstractmethod
    async def generate_text(
        self,
        prompt: Prompt,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Plain text or an ordered sequence of content parts
            options: System prompt, temperature, max tokens, response format

        Returns:
            Generated text (may be empty)

        Raises:
            ProviderError: on non-2xx status or transport failure
        """
        pass

    @abstractmethod
    async def _probe(self) -> None:
        """Smallest possible live call; raises on failure."""
        pass

    async def check_availability(self) -> bool:
        """Configured and the endpoint answers. Never raises."""
        if not self.is_configured():
            return False
        try:
            await self._probe()
            return True
        except Exception as e:
            self.logger.info(f"{self.display_name} availability probe failed: {e}")
            return False

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _require_key(self) -> None:
        if not self.is_configured():
            raise ProviderNotConfiguredError(self.name.value, self.env_var)

    async def _post(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """POST JSON; transport errors become ProviderError."""
        client = self._get_client()
        try:
            return await client.post(
                url,
                json=payload,
                headers=headers,
                params=params,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.RequestError as e:
            raise ProviderError(
                self.name.value,
                f"{self.display_name} request failed: {type(e).__name__}: {e}",
            ) from e

    def _error_message(self, response: httpx.Response) -> str:
        """Raw error body; subclasses may extract a nicer message."""
        return response.text

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        body = response.text
        raise ProviderError(
            self.name.value,
            f"{self.display_name} API error ({response.status_code}): "
            f"{self._error_message(response)}",
            status_code=response.status_code,
            body=body,
        )

    def _json(self, response: httpx.Response) -> Any:
        """Decode a successful response body; malformed JSON becomes ProviderError."""
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                self.name.value,
                f"{self.display_name} returned invalid JSON: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    @staticmethod
    def _text_only(prompt: Prompt) -> str:
        """Graceful degradation for text-only vendors: keep text parts, drop binaries."""
        return prompt_text(prompt)

    def get_info(self) -> dict:
        """Get adapter information for API/UI"""
        return {
            "id": self.name.value,
            "name": self.display_name,
            "configured": self.is_configured(),
            "capabilities": sorted(self.capabilities),
        }


class OpenAICompatibleProvider(AIProvider):
    """
    Shared implementation for vendors exposing an OpenAI-style
    ``/chat/completions`` endpoint.
    """

    API_URL: str = ""
    DEFAULT_MODEL: str = ""
    DEFAULT_MAX_TOKENS: int = 4096
    DEFAULT_TEMPERATURE: float = 0.7

    capabilities = frozenset({Capability.TEXT, Capability.JSON_MODE})

    def __init__(self, *args, model: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.model = model or self.DEFAULT_MODEL

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, prompt: Prompt, options: GenerateOptions) -> Dict[str, Any]:
        messages = []
        if options.system_prompt:
            messages.append({"role": "system", "content": options.system_prompt})
        messages.append({"role": "user", "content": self._text_only(prompt)})

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": (
                options.temperature
                if options.temperature is not None
                else self.DEFAULT_TEMPERATURE
            ),
            "max_tokens": options.max_tokens or self.DEFAULT_MAX_TOKENS,
        }
        if options.wants_json:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def generate_text(
        self,
        prompt: Prompt,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        self._require_key()
        options = options or GenerateOptions()

        response = await self._post(
            self.API_URL,
            self._build_payload(prompt, options),
            headers=self._headers(),
        )
        self._raise_for_status(response)

        data = self._json(response)
        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content")
        return content or ""

    async def _probe(self) -> None:
        response = await self._post(
            self.API_URL,
            {
                "model": self.model,
                "messages": [{"role": "user", "content": "Hi"}],
                "max_tokens": 5,
            },
            headers=self._headers(),
            timeout=self.probe_timeout,
        )
        self._raise_for_status(response)
