"""
Vendor adapters

Each adapter translates the uniform generate_text contract into one
vendor's HTTP API.
"""

from .base import AIProvider, OpenAICompatibleProvider, Capability
from .gemini import GeminiProvider
from .groq import GroqProvider
from .deepseek import DeepSeekProvider
from .mistral import MistralProvider
from .openrouter import OpenRouterProvider, OPENROUTER_MODELS
from .huggingface import HuggingFaceProvider, HF_MODELS

# Registration order; also the tail order for fallback
PROVIDER_CLASSES = (
    GeminiProvider,
    GroqProvider,
    DeepSeekProvider,
    MistralProvider,
    OpenRouterProvider,
    HuggingFaceProvider,
)

__all__ = [
    "AIProvider",
    "OpenAICompatibleProvider",
    "Capability",
    "GeminiProvider",
    "GroqProvider",
    "DeepSeekProvider",
    "MistralProvider",
    "OpenRouterProvider",
    "HuggingFaceProvider",
    "OPENROUTER_MODELS",
    "HF_MODELS",
    "PROVIDER_CLASSES",
]
