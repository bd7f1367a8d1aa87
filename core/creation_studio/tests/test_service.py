"""
Tests for the host-facing entry points and the editor
"""

import json

import pytest

from core.creation_studio import service
from core.creation_studio.exceptions import AgentError, NoProvidersConfiguredError
from core.creation_studio.models import (
    AgentRole,
    EditorAction,
    InputItem,
    InputType,
    ProjectSnapshot,
    TaskCategory,
    Vendor,
)
from core.creation_studio.prompts.editor_prompts import PARSE_FAILED_CHANGES
from core.creation_studio.registry import ProviderRegistry

from conftest import FakeProvider, make_registry


@pytest.fixture(autouse=True)
def fresh_default_registry():
    service.reset_default_registry()
    yield
    service.reset_default_registry()


class TestGenerateWithBestModel:

    @pytest.mark.asyncio
    async def test_routes_by_task(self):
        groq = FakeProvider(Vendor.GROQ, default="fast reply")
        deepseek = FakeProvider(Vendor.DEEPSEEK, default="deep reply")
        registry = make_registry(groq, deepseek)

        quick = await service.generate_with_best_model("Hi", TaskCategory.QUICK_RESPONSE, registry=registry)
        plan = await service.generate_with_best_model("Plan", TaskCategory.PLANNING, registry=registry)

        assert (quick.vendor_used, quick.text) == (Vendor.GROQ, "fast reply")
        assert (plan.vendor_used, plan.text) == (Vendor.DEEPSEEK, "deep reply")

    @pytest.mark.asyncio
    async def test_preferred_vendor(self):
        groq = FakeProvider(Vendor.GROQ, default="fast reply")
        deepseek = FakeProvider(Vendor.DEEPSEEK, default="deep reply")

        result = await service.generate_with_best_model(
            "Hi",
            TaskCategory.QUICK_RESPONSE,
            preferred_vendor=Vendor.DEEPSEEK,
            registry=make_registry(groq, deepseek),
        )

        assert result.vendor_used == Vendor.DEEPSEEK

    @pytest.mark.asyncio
    async def test_default_registry_is_built_once(self, monkeypatch):
        built = []

        def fake_factory(settings):
            registry = make_registry(FakeProvider(Vendor.MISTRAL, default="hello"))
            built.append(registry)
            return registry

        monkeypatch.setattr(service, "create_default_registry", fake_factory)

        await service.generate_with_best_model("Hi", TaskCategory.WRITING)
        await service.generate_with_best_model("Again", TaskCategory.WRITING)

        assert len(built) == 1
        assert service.get_default_registry() is built[0]

    @pytest.mark.asyncio
    async def test_injected_empty_registry_is_used(self, monkeypatch):
        built = []

        def fake_factory(settings):
            registry = make_registry(FakeProvider(Vendor.MISTRAL, default="hello"))
            built.append(registry)
            return registry

        monkeypatch.setattr(service, "create_default_registry", fake_factory)

        with pytest.raises(NoProvidersConfiguredError):
            await service.generate_with_best_model("Hi", TaskCategory.WRITING, registry=ProviderRegistry())

        assert built == []


class TestWorkflowEntryPoints:

    @pytest.mark.asyncio
    async def test_run_agent_workflow(self, studio_provider):
        entries = []

        drafts = await service.run_agent_workflow(
            "Write a short mystery",
            ProjectSnapshot(title="Mystery"),
            on_log=entries.append,
            registry=make_registry(studio_provider),
        )

        assert len(drafts) == 1
        assert drafts[0].to_dict()["metadata"]["modelUsed"] == "mistral"
        assert entries

    @pytest.mark.asyncio
    async def test_synthesize_inputs(self):
        provider = FakeProvider(Vendor.DEEPSEEK, default=json.dumps({"contextSummary": "A heist."}))

        outline = await service.synthesize_inputs(
            [InputItem(type=InputType.NOTE, name="idea", content="A heist in Lisbon")],
            registry=make_registry(provider),
        )

        assert outline.summary == "A heist."
        assert outline.word_count == 4


class TestRefineContent:

    @pytest.mark.asyncio
    async def test_expand(self):
        groq = FakeProvider(
            Vendor.GROQ,
            default=json.dumps({"content": "A much longer passage.", "changes": "Added detail."}),
        )
        entries = []

        refined = await service.refine_content(
            "A passage.",
            EditorAction.EXPAND,
            on_log=entries.append,
            registry=make_registry(groq),
        )

        assert refined.content == "A much longer passage."
        assert refined.changes == "Added detail."
        assert refined.vendor_used == "groq"
        assert entries[0].agent == AgentRole.EDITOR
        assert entries[0].message == "Editing content: expand..."

        prompt, options = groq.calls[0]
        assert prompt == "Original Content:\nA passage.\n\nAction: expand"
        assert options.temperature == 0.3
        assert options.wants_json

    @pytest.mark.asyncio
    async def test_unparseable_output_keeps_original(self):
        groq = FakeProvider(Vendor.GROQ, default="Sure! Here is your text.")

        refined = await service.refine_content("Keep me.", EditorAction.SHORTEN, registry=make_registry(groq))

        assert refined.content == "Keep me."
        assert refined.changes == PARSE_FAILED_CHANGES

    @pytest.mark.asyncio
    async def test_blank_content_keeps_original(self):
        groq = FakeProvider(Vendor.GROQ, default=json.dumps({"content": "  ", "changes": "Removed everything"}))

        refined = await service.refine_content("Keep me.", EditorAction.REWRITE, registry=make_registry(groq))

        assert refined.content == "Keep me."
        assert refined.changes == PARSE_FAILED_CHANGES

    @pytest.mark.asyncio
    async def test_unknown_action(self):
        groq = FakeProvider(Vendor.GROQ, default="{}")

        with pytest.raises(AgentError, match="Unknown editor action"):
            await service.refine_content("Text", "translate", registry=make_registry(groq))

        assert groq.calls == []
