"""
Resilient Generation Facade

Single entry point for every model call: choose a vendor order for the
task, retry each vendor a bounded number of times, fall through to the
next vendor, and report every failure if all of them are exhausted.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from .config import StudioConfig
from .exceptions import AllProvidersFailedError, NoProvidersConfiguredError
from .models import (
    GenerateOptions,
    GenerationRequest,
    GenerationResult,
    Prompt,
    TaskCategory,
    Vendor,
)
from .registry import ProviderRegistry
from .router import TaskRouter

logger = logging.getLogger(__name__)

# Failure messages that deserve a pause before the retry
RATE_LIMIT_MARKERS = ("429", "rate", "overload")


def is_rate_limited(message: str) -> bool:
    lowered = message.lower()
    return any(marker in lowered for marker in RATE_LIMIT_MARKERS)


class ResilientGenerator:
    """
    Retry-then-fallback generation over the registered vendors.

    Vendor attempts are strictly sequential; vendors are never raced.

    Usage:
        generator = ResilientGenerator(registry)
        result = await generator.generate("Write a haiku", TaskCategory.WRITING)
        print(result.vendor_used, result.text)
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        router: Optional[TaskRouter] = None,
        config: Optional[StudioConfig] = None,
    ):
        self.registry = registry
        self.router = router or TaskRouter(registry)
        self.config = config or StudioConfig()
        self.attempts = 0
        """Total vendor calls made by this generator"""

    def try_order(
        self,
        task: TaskCategory,
        available: List[Vendor],
        preferred_vendor: Optional[Vendor] = None,
    ) -> List[Vendor]:
        """Override, then router pick, then the task's preferences, then everyone else."""
        order: List[Vendor] = []

        def add(vendor: Vendor) -> None:
            if vendor in available and vendor not in order:
                order.append(vendor)

        if preferred_vendor is not None:
            try:
                add(Vendor(preferred_vendor))
            except ValueError:
                logger.warning(f"Unknown preferred vendor ignored: {preferred_vendor}")

        selected = self.router.select_vendor(task, available)
        if selected is not None:
            add(selected.vendor)

        for vendor in self.router.preference_list(task):
            add(vendor)
        for vendor in available:
            add(vendor)
        return order

    def _model_name(self, vendor: Vendor) -> str:
        provider = self.registry.get(vendor)
        model_id = getattr(provider, "model", None)
        if model_id:
            return model_id
        model = self.registry.first_available_model(vendor)
        return model.model_id if model else vendor.value

    async def generate(
        self,
        prompt: Prompt,
        task: TaskCategory,
        options: Optional[GenerateOptions] = None,
        preferred_vendor: Optional[Vendor] = None,
    ) -> GenerationResult:
        """
        Generate text with automatic vendor fallback.

        Args:
            prompt: Plain text or an ordered sequence of content parts
            task: Task category used to order vendors
            options: System prompt, temperature, max tokens, response format
            preferred_vendor: Tried first when it is available

        Returns:
            GenerationResult with the first non-empty text

        Raises:
            NoProvidersConfiguredError: no vendor has a credential
            AllProvidersFailedError: every vendor/attempt failed
        """
        task = TaskCategory(task)
        options = options or GenerateOptions()

        available = self.registry.available_vendors()
        if not available:
            raise NoProvidersConfiguredError()

        order = self.try_order(task, available, preferred_vendor)
        failures: Dict[str, List[str]] = {}
        max_attempts = max(1, self.config.max_attempts_per_vendor)

        for index, vendor in enumerate(order):
            provider = self.registry.get(vendor)
            if index > 0:
                logger.info(f"[{task.value}] Falling back to {vendor.value}")

            for attempt in range(1, max_attempts + 1):
                self.attempts += 1
                try:
                    text = await provider.generate_text(prompt, options)
                except Exception as e:
                    reason = str(e) or type(e).__name__
                else:
                    if text and text.strip():
                        logger.info(
                            f"[{task.value}] {vendor.value} succeeded "
                            f"(attempt {attempt}/{max_attempts})"
                        )
                        return GenerationResult(
                            text=text,
                            vendor_used=vendor,
                            model_used=self._model_name(vendor),
                        )
                    reason = "Empty response"

                failures.setdefault(vendor.value, []).append(reason)
                logger.warning(
                    f"[{task.value}] {vendor.value} attempt {attempt}/{max_attempts} failed: {reason}"
                )

                if attempt < max_attempts and is_rate_limited(reason):
                    await asyncio.sleep(self.config.retry_backoff_seconds)

        logger.error(f"[{task.value}] All providers failed ({len(order)} tried)")
        raise AllProvidersFailedError(failures)

    async def generate_request(
        self,
        request: GenerationRequest,
        task: TaskCategory,
        preferred_vendor: Optional[Vendor] = None,
    ) -> GenerationResult:
        """Same as generate() for a prepared request."""
        return await self.generate(
            request.prompt,
            task,
            options=request.options,
            preferred_vendor=preferred_vendor,
        )
