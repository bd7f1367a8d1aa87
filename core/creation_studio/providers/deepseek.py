"""
DeepSeek Provider
OpenAI-compatible chat completions; strong at reasoning and planning.
"""

from .base import OpenAICompatibleProvider, Capability
from ..models import Vendor


class DeepSeekProvider(OpenAICompatibleProvider):
    """DeepSeek V3 adapter"""

    API_URL = "https://api.deepseek.com/v1/chat/completions"
    DEFAULT_MODEL = "deepseek-chat"
    DEFAULT_MAX_TOKENS = 4096

    capabilities = frozenset({Capability.TEXT, Capability.JSON_MODE, Capability.LONG_CONTEXT})

    @property
    def name(self) -> Vendor:
        return Vendor.DEEPSEEK

    @property
    def display_name(self) -> str:
        return "DeepSeek"

    @property
    def env_var(self) -> str:
        return "DEEPSEEK_API_KEY"
