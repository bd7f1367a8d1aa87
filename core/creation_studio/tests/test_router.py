"""
Tests for the Task Router
"""

import pytest

from core.creation_studio.models import TaskCategory, Vendor
from core.creation_studio.router import TaskRouter, TASK_VENDOR_PRIORITY

from conftest import FakeProvider, make_registry


ALL_VENDORS = list(Vendor)


class TestPreferenceTable:
    """Tests for the static table"""

    def test_every_category_has_a_list(self):
        assert set(TASK_VENDOR_PRIORITY) == set(TaskCategory)

    def test_lists_contain_only_vendors(self):
        for vendors in TASK_VENDOR_PRIORITY.values():
            assert vendors
            assert all(isinstance(v, Vendor) for v in vendors)


class TestSelectVendor:
    """Tests for select_vendor"""

    @pytest.mark.parametrize("task", list(TaskCategory))
    @pytest.mark.parametrize("configured", [
        [],
        [Vendor.GEMINI],
        [Vendor.HUGGINGFACE],
        [Vendor.OPENROUTER, Vendor.GROQ],
        ALL_VENDORS,
    ])
    def test_returns_vendor_iff_any_available(self, task, configured):
        registry = make_registry(*[
            FakeProvider(v, configured=v in configured) for v in ALL_VENDORS
        ])
        router = TaskRouter(registry)

        selected = router.select_vendor(task, registry.available_vendors())

        if configured:
            assert selected is not None
            assert selected.vendor in configured
        else:
            assert selected is None

    def test_walks_preference_list_in_order(self):
        registry = make_registry(*[FakeProvider(v) for v in ALL_VENDORS])
        router = TaskRouter(registry)

        selected = router.select_vendor(TaskCategory.WRITING, registry.available_vendors())

        assert selected.vendor == Vendor.MISTRAL
        assert selected.model_id == "mistral-large-latest"

    def test_skips_unavailable_top_preference(self):
        registry = make_registry(
            FakeProvider(Vendor.GEMINI),
            FakeProvider(Vendor.DEEPSEEK),
            FakeProvider(Vendor.MISTRAL, configured=False),
        )
        router = TaskRouter(registry)

        selected = router.select_vendor(TaskCategory.WRITING, registry.available_vendors())

        assert selected.vendor == Vendor.DEEPSEEK

    def test_falls_back_outside_preference_list(self):
        registry = make_registry(FakeProvider(Vendor.HUGGINGFACE))
        router = TaskRouter(registry)

        selected = router.select_vendor(TaskCategory.IMAGE_GENERATION, registry.available_vendors())

        assert selected.vendor == Vendor.HUGGINGFACE

    def test_vendor_without_available_model_is_skipped(self):
        registry = make_registry(FakeProvider(Vendor.DEEPSEEK), FakeProvider(Vendor.GEMINI))
        registry.update_model_availability(Vendor.DEEPSEEK, False)
        router = TaskRouter(registry)

        selected = router.select_vendor(TaskCategory.PLANNING, registry.available_vendors())

        assert selected.vendor == Vendor.GEMINI

    def test_custom_priority_table(self):
        registry = make_registry(FakeProvider(Vendor.GROQ), FakeProvider(Vendor.GEMINI))
        router = TaskRouter(registry, priority={TaskCategory.WRITING: [Vendor.GEMINI]})

        selected = router.select_vendor(TaskCategory.WRITING, registry.available_vendors())

        assert selected.vendor == Vendor.GEMINI
        assert router.preference_list(TaskCategory.PLANNING) == []
