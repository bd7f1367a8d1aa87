"""
Creation Studio Service

Host-facing entry points. Every function accepts an injected registry;
without one, the process-wide default registry is built lazily from
Settings on first use.
"""

import logging
from typing import List, Optional

from config.settings import get_settings
from .agents import EditorAgent, EditRequest, SynthesizerAgent
from .agents.base import AgentContext
from .config import StudioConfig
from .generation import ResilientGenerator
from .models import (
    ContentBlockDraft,
    EditorAction,
    GenerateOptions,
    GenerationResult,
    InputItem,
    Prompt,
    ProjectSnapshot,
    RefinedContent,
    SynthesisOutline,
    TaskCategory,
    Vendor,
)
from .pipeline import AgentWorkflow, ApprovedOutline
from .progress import AgentLogger, LogCallback
from .registry import ProviderRegistry, create_default_registry

logger = logging.getLogger(__name__)

_default_registry: Optional[ProviderRegistry] = None


def get_default_registry() -> ProviderRegistry:
    """Process-wide registry: populated once, read-mostly afterwards."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry(get_settings())
    return _default_registry


def reset_default_registry() -> None:
    """Drop the cached registry (tests, credential changes)."""
    global _default_registry
    _default_registry = None


def _generator(registry: Optional[ProviderRegistry]) -> ResilientGenerator:
    config = StudioConfig.from_settings(get_settings())
    if registry is None:
        registry = get_default_registry()
    return ResilientGenerator(registry, config=config)


async def generate_with_best_model(
    prompt: Prompt,
    task: TaskCategory,
    options: Optional[GenerateOptions] = None,
    preferred_vendor: Optional[Vendor] = None,
    registry: Optional[ProviderRegistry] = None,
) -> GenerationResult:
    """Single-shot generation with vendor fallback (chat replies, blurbs, ...)."""
    return await _generator(registry).generate(
        prompt,
        task,
        options=options,
        preferred_vendor=preferred_vendor,
    )


async def run_agent_workflow(
    user_request: str,
    project: ProjectSnapshot,
    on_log: Optional[LogCallback] = None,
    approved_outline: Optional[ApprovedOutline] = None,
    registry: Optional[ProviderRegistry] = None,
) -> List[ContentBlockDraft]:
    """Full plan / write / validate pipeline for one project."""
    workflow = AgentWorkflow(_generator(registry))
    return await workflow.run(user_request, project, on_log, approved_outline)


async def synthesize_inputs(
    items: List[InputItem],
    registry: Optional[ProviderRegistry] = None,
) -> SynthesisOutline:
    """Condense raw inputs into an outline. Never fails on bad model output."""
    generator = _generator(registry)
    agent = SynthesizerAgent(generator.config, generator)
    return await agent.synthesize(items)


async def refine_content(
    content: str,
    action: EditorAction,
    on_log: Optional[LogCallback] = None,
    registry: Optional[ProviderRegistry] = None,
) -> RefinedContent:
    """Expand, rewrite, shorten or grammar-fix a passage."""
    generator = _generator(registry)
    agent = EditorAgent(generator.config, generator)
    context = AgentContext(
        project_id="refine",
        config=generator.config,
        logger=AgentLogger(on_log),
    )
    return await agent.execute(EditRequest(content=content, action=action), context)
