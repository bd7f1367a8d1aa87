"""
Mistral Provider
"""

from .base import OpenAICompatibleProvider
from ..models import Vendor


class MistralProvider(OpenAICompatibleProvider):
    """Mistral AI adapter; the default for long-form creative writing"""

    API_URL = "https://api.mistral.ai/v1/chat/completions"
    DEFAULT_MODEL = "mistral-large-latest"
    DEFAULT_MAX_TOKENS = 4096

    @property
    def name(self) -> Vendor:
        return Vendor.MISTRAL

    @property
    def display_name(self) -> str:
        return "Mistral AI"

    @property
    def env_var(self) -> str:
        return "MISTRAL_API_KEY"
