"""
Task Router

Picks the vendor best suited to a task category from a static preference
table, falling back to any vendor that is available.
"""

from typing import Dict, Iterable, List, Optional

from config.logging_config import get_logger
from .models import ModelDescriptor, TaskCategory, Vendor
from .registry import ProviderRegistry

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Preference table
# ---------------------------------------------------------------------------

TASK_VENDOR_PRIORITY: Dict[TaskCategory, List[Vendor]] = {
    TaskCategory.PLANNING: [Vendor.DEEPSEEK, Vendor.GEMINI, Vendor.MISTRAL],
    TaskCategory.WRITING: [Vendor.MISTRAL, Vendor.DEEPSEEK, Vendor.GEMINI],
    TaskCategory.EDITING: [Vendor.GROQ, Vendor.MISTRAL, Vendor.GEMINI],
    TaskCategory.CRITIQUE: [Vendor.DEEPSEEK, Vendor.GEMINI, Vendor.MISTRAL],
    TaskCategory.SYNTHESIS: [Vendor.DEEPSEEK, Vendor.GEMINI, Vendor.MISTRAL],
    TaskCategory.IMAGE_GENERATION: [Vendor.GEMINI],  # only Gemini produces images
    TaskCategory.QUICK_RESPONSE: [Vendor.GROQ, Vendor.GEMINI, Vendor.MISTRAL],
}


class TaskRouter:
    """
    Vendor selection per task category.

    Usage::

        router = TaskRouter(registry)
        model = router.select_vendor(TaskCategory.WRITING, registry.available_vendors())
        print(model.vendor)   # Vendor.MISTRAL when configured
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        priority: Optional[Dict[TaskCategory, List[Vendor]]] = None,
    ):
        self.registry = registry
        self.priority = priority if priority is not None else TASK_VENDOR_PRIORITY

    def preference_list(self, task: TaskCategory) -> List[Vendor]:
        return list(self.priority.get(TaskCategory(task), []))

    def select_vendor(
        self,
        task: TaskCategory,
        available: Iterable[Vendor],
    ) -> Optional[ModelDescriptor]:
        """Select a model for the task.

        Walks the task's preference list first, then every available vendor
        in the order given. Returns None only when no available vendor has
        an available model.
        """
        available = [Vendor(v) for v in available]

        for vendor in self.preference_list(task):
            if vendor in available:
                model = self.registry.first_available_model(vendor)
                if model:
                    return model

        for vendor in available:
            model = self.registry.first_available_model(vendor)
            if model:
                logger.debug(
                    f"No preferred vendor for {TaskCategory(task).value}; "
                    f"falling back to {vendor.value}"
                )
                return model

        return None
