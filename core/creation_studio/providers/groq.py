"""
Groq Provider
Ultra-fast inference for Llama models, used for quick passes and critique.
"""

from .base import OpenAICompatibleProvider
from ..models import Vendor


class GroqProvider(OpenAICompatibleProvider):
    """Groq adapter (Llama 3.3 70B by default)"""

    API_URL = "https://api.groq.com/openai/v1/chat/completions"
    DEFAULT_MODEL = "llama-3.3-70b-versatile"
    DEFAULT_MAX_TOKENS = 4096

    @property
    def name(self) -> Vendor:
        return Vendor.GROQ

    @property
    def display_name(self) -> str:
        return "Groq"

    @property
    def env_var(self) -> str:
        return "GROQ_API_KEY"
