"""
Provider Registry

Process-wide map of vendor adapters plus the static model catalog.
Populated once at startup, read-mostly afterwards: only model
availability flags change at runtime.
"""

import asyncio
import copy
import logging
from typing import Dict, List, Optional

from config.settings import Settings, get_settings
from .models import ModelDescriptor, Vendor
from .providers import AIProvider, PROVIDER_CLASSES

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Static model catalog
# ---------------------------------------------------------------------------

MODEL_CATALOG: List[ModelDescriptor] = [
    # Gemini
    ModelDescriptor(
        vendor=Vendor.GEMINI,
        model_id="gemini-2.5-flash",
        display_name="Gemini 2.5 Flash",
        description="Balanced speed and quality, supports image generation",
        strengths=["images", "balanced", "multimodal"],
    ),
    ModelDescriptor(
        vendor=Vendor.GEMINI,
        model_id="gemini-1.5-pro",
        display_name="Gemini 1.5 Pro",
        description="Long context (1M tokens), best for complex documents",
        strengths=["long_context", "reasoning", "analysis"],
    ),
    # Groq (ultra-fast)
    ModelDescriptor(
        vendor=Vendor.GROQ,
        model_id="llama-3.3-70b-versatile",
        display_name="Llama 3.3 70B (Groq)",
        description="Ultra-fast inference, strong general capabilities",
        strengths=["speed", "reasoning", "general"],
    ),
    ModelDescriptor(
        vendor=Vendor.GROQ,
        model_id="mixtral-8x7b-32768",
        display_name="Mixtral 8x7B (Groq)",
        description="Fast, multilingual, 32k context",
        strengths=["speed", "multilingual", "balanced"],
    ),
    # DeepSeek (reasoning)
    ModelDescriptor(
        vendor=Vendor.DEEPSEEK,
        model_id="deepseek-chat",
        display_name="DeepSeek V3",
        description="Excellent reasoning and coding capabilities",
        strengths=["reasoning", "coding", "analysis", "planning"],
    ),
    # Mistral (prose)
    ModelDescriptor(
        vendor=Vendor.MISTRAL,
        model_id="mistral-large-latest",
        display_name="Mistral Large",
        description="High quality text generation, excellent for prose",
        strengths=["writing", "prose", "creative", "quality"],
    ),
    ModelDescriptor(
        vendor=Vendor.MISTRAL,
        model_id="mistral-small-latest",
        display_name="Mistral Small",
        description="Efficient, good for quick tasks",
        strengths=["speed", "efficiency", "quick_tasks"],
    ),
    # OpenRouter (multi-model gateway)
    ModelDescriptor(
        vendor=Vendor.OPENROUTER,
        model_id="mistralai/mistral-7b-instruct:free",
        display_name="Mistral 7B Instruct (OpenRouter)",
        description="Free community-hosted model through OpenRouter",
        strengths=["free", "general"],
    ),
    # HuggingFace (free inference)
    ModelDescriptor(
        vendor=Vendor.HUGGINGFACE,
        model_id="mistralai/Mistral-7B-Instruct-v0.3",
        display_name="Mistral 7B Instruct (HuggingFace)",
        description="Free inference API, also hosts image and embedding models",
        strengths=["free", "images", "embeddings"],
    ),
]


class ProviderRegistry:
    """
    Vendor adapters keyed by vendor name, one per vendor.

    Usage:
        registry = create_default_registry()
        adapter = registry.get(Vendor.MISTRAL)
        vendors = registry.available_vendors()
    """

    def __init__(self, catalog: Optional[List[ModelDescriptor]] = None):
        self._providers: Dict[Vendor, AIProvider] = {}
        # Each registry mutates its own copy of the flags
        self._models: List[ModelDescriptor] = copy.deepcopy(
            catalog if catalog is not None else MODEL_CATALOG
        )

    def register(self, provider: AIProvider) -> None:
        """Register an adapter, replacing any previous one for the same vendor."""
        vendor = Vendor(provider.name)
        if vendor in self._providers:
            logger.warning(f"Replacing registered provider: {vendor.value}")
        self._providers[vendor] = provider
        self.update_model_availability(vendor, provider.is_configured())
        logger.info(
            f"Registered provider: {provider.display_name} "
            f"(configured={provider.is_configured()})"
        )

    def get(self, name) -> Optional[AIProvider]:
        try:
            return self._providers.get(Vendor(name))
        except ValueError:
            return None

    def available_vendors(self) -> List[Vendor]:
        """Vendors with a credential, in registration order."""
        return [
            vendor
            for vendor, provider in self._providers.items()
            if provider.is_configured()
        ]

    def providers(self) -> List[AIProvider]:
        return list(self._providers.values())

    # ------------------------------------------------------------------
    # Model catalog
    # ------------------------------------------------------------------

    def update_model_availability(self, vendor, is_available: bool) -> None:
        """Set the availability flag on every model of a vendor."""
        vendor = Vendor(vendor)
        for model in self._models:
            if model.vendor == vendor:
                model.is_available = is_available

    def get_models_by_provider(self, vendor) -> List[ModelDescriptor]:
        vendor = Vendor(vendor)
        return [m for m in self._models if m.vendor == vendor]

    def first_available_model(self, vendor) -> Optional[ModelDescriptor]:
        for model in self.get_models_by_provider(vendor):
            if model.is_available:
                return model
        return None

    def get_all_models(self) -> List[ModelDescriptor]:
        return list(self._models)

    async def refresh_availability(self) -> Dict[Vendor, bool]:
        """
        Probe every configured adapter concurrently and store the results
        in the model flags.

        Never called implicitly: routing normally relies on configuration
        alone.
        """
        vendors = self.available_vendors()
        results = await asyncio.gather(
            *(self._providers[v].check_availability() for v in vendors)
        )
        status = dict(zip(vendors, results))
        for vendor, ok in status.items():
            self.update_model_availability(vendor, ok)
            if not ok:
                logger.warning(f"{vendor.value} is configured but did not answer the probe")
        return status

    def get_info(self) -> List[dict]:
        """Adapter information for API/UI"""
        return [p.get_info() for p in self._providers.values()]

    async def aclose(self) -> None:
        for provider in self._providers.values():
            await provider.aclose()

    def __contains__(self, name) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._providers)


def create_default_registry(settings: Optional[Settings] = None, **provider_kwargs) -> ProviderRegistry:
    """
    Build a registry with all six vendor adapters.

    Args:
        settings: Credentials and tunables (defaults to the global settings)
        **provider_kwargs: Passed to every adapter (e.g. ``transport``)
    """
    settings = settings or get_settings()
    registry = ProviderRegistry()
    for provider_cls in PROVIDER_CLASSES:
        registry.register(provider_cls(settings=settings, **provider_kwargs))

    configured = [v.value for v in registry.available_vendors()]
    if configured:
        logger.info(f"Configured vendors: {', '.join(configured)}")
    else:
        logger.warning("No AI providers configured. Add API keys to .env")
    return registry
