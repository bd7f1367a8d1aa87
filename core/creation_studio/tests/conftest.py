"""
Pytest Configuration and Fixtures
"""

import json

import pytest

from config.settings import Settings
from core.creation_studio.config import StudioConfig
from core.creation_studio.exceptions import ProviderError
from core.creation_studio.generation import ResilientGenerator
from core.creation_studio.models import (
    Blueprint,
    BlueprintSection,
    CharacterProfile,
    Item,
    Location,
    ProjectSnapshot,
    SectionType,
    Vendor,
)
from core.creation_studio.prompts.architect_prompts import ARCHITECT_SYSTEM_PROMPT
from core.creation_studio.prompts.critic_prompts import CRITIC_SYSTEM_PROMPT
from core.creation_studio.prompts.visionary_prompts import VISIONARY_SYSTEM_PROMPT
from core.creation_studio.prompts.writer_prompts import WRITER_SYSTEM_PROMPT
from core.creation_studio.registry import ProviderRegistry


class FakeProvider:
    """
    Scripted stand-in for a vendor adapter.

    ``responses`` are consumed in order; each is a string, an exception
    instance (raised) or a callable ``(prompt, options) -> str``. Once
    exhausted, ``default`` is used the same way.
    """

    def __init__(self, vendor, responses=None, default=None, configured=True):
        self.name = Vendor(vendor)
        self.display_name = f"Fake {self.name.value}"
        self.model = f"{self.name.value}-test-model"
        self.configured = configured
        self.responses = list(responses or [])
        self.default = default
        self.calls = []

    def is_configured(self):
        return self.configured

    async def generate_text(self, prompt, options=None):
        self.calls.append((prompt, options))
        response = self.responses.pop(0) if self.responses else self.default
        if callable(response):
            response = response(prompt, options)
        if isinstance(response, BaseException):
            raise response
        if response is None:
            raise ProviderError(self.name.value, f"{self.name.value}: no scripted response")
        return response

    async def check_availability(self):
        return self.configured

    async def aclose(self):
        pass

    def get_info(self):
        return {"id": self.name.value, "name": self.display_name, "configured": self.configured}


class StudioResponder:
    """
    Answers each agent by its system prompt, like a well-behaved model.

    Writer answers can be scripted per call through ``writer_outputs``.
    """

    def __init__(self, tasks=None, writer_outputs=None, critic=None, consistency=None, style=None):
        self.tasks = tasks if tasks is not None else [
            {"role": "WRITER", "description": "Write Chapter 1: The Beginning", "context_script": "Open strong", "title": "Chapter 1"},
        ]
        self.writer_outputs = list(writer_outputs or [])
        self.critic = critic or {"approved": True, "critique": "Vivid and tight."}
        self.consistency = consistency or {"status": "pass", "issues": []}
        self.style = style or {"style_guide": "Muted noir", "sensory_palette": "Rain, neon, smoke"}
        self.seen = []

    def __call__(self, prompt, options):
        system = (options.system_prompt or "") if options else ""
        if system == ARCHITECT_SYSTEM_PROMPT:
            role = "architect"
            answer = json.dumps({"tasks": self.tasks})
        elif system == VISIONARY_SYSTEM_PROMPT:
            role = "visionary"
            answer = json.dumps(self.style)
        elif system.startswith(WRITER_SYSTEM_PROMPT):
            role = "writer"
            output = self.writer_outputs.pop(0) if self.writer_outputs else {
                "content": "It was a dark and stormy night.",
                "helper_script": "Slow build",
            }
            if isinstance(output, BaseException):
                raise output
            answer = output if isinstance(output, str) else json.dumps(output)
        elif system == CRITIC_SYSTEM_PROMPT:
            role = "critic"
            answer = json.dumps(self.critic)
        elif "Continuity Editor" in system:
            role = "consistency"
            answer = json.dumps(self.consistency)
        else:
            role = "other"
            answer = json.dumps({})
        self.seen.append((role, prompt, options))
        return answer

    def calls_for(self, role):
        return [entry for entry in self.seen if entry[0] == role]


def make_registry(*providers):
    registry = ProviderRegistry()
    for provider in providers:
        registry.register(provider)
    return registry


@pytest.fixture
def studio_config():
    """Default test configuration (no backoff waits)"""
    return StudioConfig(retry_backoff_seconds=0)


@pytest.fixture
def test_settings():
    """Settings isolated from the real environment and .env"""
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        groq_api_key="test-groq-key",
        deepseek_api_key="test-deepseek-key",
        mistral_api_key="test-mistral-key",
        openrouter_api_key="test-openrouter-key",
        huggingface_api_key="test-hf-key",
        huggingface_loading_retries=2,
        huggingface_loading_delay=0,
        retry_backoff_seconds=0,
    )


@pytest.fixture
def responder():
    return StudioResponder()


@pytest.fixture
def studio_provider(responder):
    """One configured vendor answering every agent"""
    return FakeProvider(Vendor.MISTRAL, default=responder)


@pytest.fixture
def generator(studio_provider, studio_config):
    return ResilientGenerator(make_registry(studio_provider), config=studio_config)


@pytest.fixture
def sample_blueprint():
    """Approved blueprint with a small world roster"""
    return Blueprint(
        title="The Storm Chronicles",
        description="A lighthouse keeper faces the storm of the century",
        genre="Mystery",
        tone="Brooding",
        sections=[
            BlueprintSection(title="Chapter 1: Arrival", description="The keeper arrives."),
            BlueprintSection(title="Interlude", description="A letter.", type=SectionType.SCENE),
            BlueprintSection(title="Chapter 2: The Storm", description="The storm hits."),
        ],
        characters=[
            CharacterProfile(name="Ada", role="Protagonist", description="Keeper", traits=["stubborn", "kind"]),
        ],
        locations=[
            Location(name="Lighthouse", description="Stone tower", sensory_details="Salt and diesel"),
        ],
        items=[
            Item(name="Logbook", description="Water-stained", usage="Records every ship"),
        ],
    )


@pytest.fixture
def empty_project():
    return ProjectSnapshot(title="Test Project")
