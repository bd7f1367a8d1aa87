"""
Creation Studio - Multi-Vendor AI Orchestration Core

Routes generation calls across several AI vendors with retry and
fallback, and runs the agent workflow that turns a request (or an
approved outline) into draft content blocks.

Key Features:
- One adapter per vendor behind a uniform generate_text contract
- Task-based vendor routing with cross-vendor fallback
- Parallel planning (architect + visionary) and validation (critic + consistency)
- Input synthesis into an outline that can seed a blueprint

Usage:
    from core.creation_studio import run_agent_workflow, ProjectSnapshot

    drafts = await run_agent_workflow(
        "Write a three-chapter mystery",
        ProjectSnapshot(title="Mystery"),
        on_log=print,
    )
"""

from .config import StudioConfig
from .models import (
    Vendor,
    TaskCategory,
    ModelDescriptor,
    TextPart,
    InlineDataPart,
    FileDataPart,
    GenerateOptions,
    GenerationRequest,
    GenerationResult,
    AgentRole,
    LogStatus,
    AgentLogEntry,
    CharacterProfile,
    Location,
    Item,
    InputType,
    InputItem,
    SynthesisOutline,
    Blueprint,
    BlueprintSection,
    BlockSummary,
    ProjectSnapshot,
    WorkflowTask,
    WorkflowPlan,
    ContentBlockDraft,
    EditorAction,
    RefinedContent,
)
from .registry import ProviderRegistry, create_default_registry
from .router import TaskRouter, TASK_VENDOR_PRIORITY
from .generation import ResilientGenerator
from .pipeline import AgentWorkflow
from .service import (
    generate_with_best_model,
    run_agent_workflow,
    synthesize_inputs,
    refine_content,
    get_default_registry,
)
from .exceptions import (
    StudioError,
    ProviderError,
    ProviderNotConfiguredError,
    NoProvidersConfiguredError,
    AllProvidersFailedError,
    AgentError,
    WorkflowError,
)

__version__ = "1.0.0"
__all__ = [
    # Config
    "StudioConfig",
    # Models
    "Vendor",
    "TaskCategory",
    "ModelDescriptor",
    "TextPart",
    "InlineDataPart",
    "FileDataPart",
    "GenerateOptions",
    "GenerationRequest",
    "GenerationResult",
    "AgentRole",
    "LogStatus",
    "AgentLogEntry",
    "CharacterProfile",
    "Location",
    "Item",
    "InputType",
    "InputItem",
    "SynthesisOutline",
    "Blueprint",
    "BlueprintSection",
    "BlockSummary",
    "ProjectSnapshot",
    "WorkflowTask",
    "WorkflowPlan",
    "ContentBlockDraft",
    "EditorAction",
    "RefinedContent",
    # Orchestration
    "ProviderRegistry",
    "create_default_registry",
    "TaskRouter",
    "TASK_VENDOR_PRIORITY",
    "ResilientGenerator",
    "AgentWorkflow",
    # Entry points
    "generate_with_best_model",
    "run_agent_workflow",
    "synthesize_inputs",
    "refine_content",
    "get_default_registry",
    # Exceptions
    "StudioError",
    "ProviderError",
    "ProviderNotConfiguredError",
    "NoProvidersConfiguredError",
    "AllProvidersFailedError",
    "AgentError",
    "WorkflowError",
]
