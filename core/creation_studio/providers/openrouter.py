"""
OpenRouter Provider
Access to 100+ models through one OpenAI-compatible API.
"""

from typing import Dict

import httpx

from .base import OpenAICompatibleProvider
from ..models import Vendor


# Model IDs grouped by price tier
OPENROUTER_MODELS: Dict[str, Dict[str, str]] = {
    "free": {
        "mistral7b": "mistralai/mistral-7b-instruct:free",
        "llama3": "meta-llama/llama-3-8b-instruct:free",
        "gemma": "google/gemma-7b-it:free",
        "phi3": "microsoft/phi-3-mini-128k-instruct:free",
    },
    "cheap": {
        "claude3haiku": "anthropic/claude-3-haiku",
        "gpt35turbo": "openai/gpt-3.5-turbo",
        "mistralSmall": "mistralai/mistral-small",
        "geminiFlash": "google/gemini-flash-1.5",
    },
    "premium": {
        "claude3opus": "anthropic/claude-3-opus",
        "gpt4": "openai/gpt-4-turbo",
        "deepseek": "deepseek/deepseek-chat",
    },
}


class OpenRouterProvider(OpenAICompatibleProvider):
    """OpenRouter adapter; the routed model can be switched at runtime"""

    API_URL = "https://openrouter.ai/api/v1/chat/completions"
    DEFAULT_MODEL = OPENROUTER_MODELS["free"]["mistral7b"]
    DEFAULT_MAX_TOKENS = 2048

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.site_url = self.settings.openrouter_site_url
        self.site_name = self.settings.openrouter_site_name

    @property
    def name(self) -> Vendor:
        return Vendor.OPENROUTER

    @property
    def display_name(self) -> str:
        return "OpenRouter (Multi-Model)"

    @property
    def env_var(self) -> str:
        return "OPENROUTER_API_KEY"

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["HTTP-Referer"] = self.site_url
        headers["X-Title"] = self.site_name
        return headers

    def _error_message(self, response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return response.text

    def set_model(self, model_id: str) -> None:
        """Switch the model used for subsequent calls."""
        self.logger.info(f"OpenRouter model: {self.model} -> {model_id}")
        self.model = model_id

    def get_current_model(self) -> str:
        return self.model

    @staticmethod
    def get_available_models() -> Dict[str, Dict[str, str]]:
        return {tier: dict(models) for tier, models in OPENROUTER_MODELS.items()}

    def get_info(self) -> dict:
        info = super().get_info()
        info["model"] = self.model
        return info
