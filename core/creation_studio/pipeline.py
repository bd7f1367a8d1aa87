"""
Creation Studio Agent Workflow

Main orchestrator: plan, then write each task in order, validating every
fresh draft. Progress is reported only through the ``on_log`` callback.
"""

import asyncio
import logging
from dataclasses import replace
from typing import List, Optional, Union

from .config import StudioConfig
from .exceptions import NoProvidersConfiguredError
from .generation import ResilientGenerator
from .models import (
    AgentRole,
    BlockType,
    Blueprint,
    ContentBlockDraft,
    ProjectSnapshot,
    SynthesisOutline,
    WorkflowPlan,
    WorkflowTask,
)
from .progress import AgentLogger, LogCallback
from .agents import (
    ArchitectAgent,
    VisionaryAgent,
    WriterAgent,
    CriticAgent,
    ConsistencyAgent,
    ReviewInput,
    get_persona_by_id,
)
from .agents.base import AgentContext
from .agents.personas import is_default_persona
from .prompts.architect_prompts import PLANNING_PROMPT
from .utils import project_context

ApprovedOutline = Union[Blueprint, SynthesisOutline]


def _raise_if_base_exception(result) -> None:
    """gather(return_exceptions=True) also returns cancellations; those must propagate."""
    if isinstance(result, BaseException) and not isinstance(result, Exception):
        raise result


def is_chapter_task(task: WorkflowTask) -> bool:
    if "chapter" in task.description.lower():
        return True
    return bool(task.title) and "chapter" in task.title.lower()


class AgentWorkflow:
    """
    Multi-agent content workflow.

    Each run owns its own state (output list, chapter counter), so one
    instance can serve concurrent runs for different projects.

    Usage:
        workflow = AgentWorkflow(generator)
        drafts = await workflow.run("Write a noir novella", project, on_log=print)
    """

    def __init__(
        self,
        generator: ResilientGenerator,
        config: Optional[StudioConfig] = None,
    ):
        self.config = config or generator.config
        self.generator = generator
        self.logger = logging.getLogger("CreationStudio.Workflow")

        # Initialize agents
        self.architect = ArchitectAgent(self.config, generator)
        self.visionary = VisionaryAgent(self.config, generator)
        self.writer = WriterAgent(self.config, generator)
        self.critic = CriticAgent(self.config, generator)
        self.consistency = ConsistencyAgent(self.config, generator)

    @staticmethod
    def resolve_blueprint(
        project: ProjectSnapshot,
        approved_outline: Optional[ApprovedOutline] = None,
    ) -> Optional[Blueprint]:
        """The approved outline wins over the project's stored blueprint."""
        persona_id = project.blueprint.persona_id if project.blueprint else None
        if isinstance(approved_outline, SynthesisOutline):
            return Blueprint.from_synthesis(approved_outline, persona_id=persona_id)
        if isinstance(approved_outline, Blueprint):
            if approved_outline.persona_id is None and persona_id:
                return replace(approved_outline, persona_id=persona_id)
            return approved_outline
        return project.blueprint

    async def run(
        self,
        user_request: str,
        project: ProjectSnapshot,
        on_log: Optional[LogCallback] = None,
        approved_outline: Optional[ApprovedOutline] = None,
    ) -> List[ContentBlockDraft]:
        """
        Run the full workflow.

        Args:
            user_request: What the user asked for
            project: Read-only project context (blocks, settings, blueprint)
            on_log: Receives every AgentLogEntry
            approved_outline: Blueprint or synthesis outline approved by the user

        Returns:
            Drafts produced, possibly partial. Empty when planning failed.

        Raises:
            NoProvidersConfiguredError: no vendor configured at all
        """
        log = AgentLogger(on_log)
        blueprint = self.resolve_blueprint(project, approved_outline)
        persona = get_persona_by_id(blueprint.persona_id if blueprint else None)

        context = AgentContext(
            project_id=project.id,
            config=self.config,
            logger=log,
            blueprint=blueprint,
            persona=persona,
        )

        self.logger.info(f"Starting workflow for project: {project.id}")

        # === PHASE 1: PLANNING ===
        plan = await self._plan(user_request, project, blueprint, context, log)
        if plan is None:
            return []

        # === PHASE 2: EXECUTION ===
        if not is_default_persona(persona):
            log.success(AgentRole.PROJECT_MANAGER, f"Applying Agent Persona: {persona.name}")

        drafts = await self._execute(plan, context, log)
        self.logger.info(f"Workflow finished: {len(drafts)}/{len(plan.tasks)} tasks produced drafts")
        return drafts

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    async def _plan(
        self,
        user_request: str,
        project: ProjectSnapshot,
        blueprint: Optional[Blueprint],
        context: AgentContext,
        log: AgentLogger,
    ) -> Optional[WorkflowPlan]:
        if blueprint is not None:
            log.success(AgentRole.ARCHITECT, "Using approved blueprint plan.")
            plan = self.architect.plan_from_blueprint(blueprint).plan
            if plan.is_empty:
                log.failed(AgentRole.ARCHITECT, "Approved blueprint has no chapter sections.")
                return None
            context.style_context = self.visionary.style_from_blueprint(blueprint)
            return plan

        log.thinking(AgentRole.PROJECT_MANAGER, "Initiating Parallel Planning Phase...")

        planning_prompt = PLANNING_PROMPT.format(
            project_context=project_context(project.blocks, self.config.context_excerpt_chars),
            user_request=user_request,
        )

        log.thinking(AgentRole.ARCHITECT, "Structuring narrative arc...")
        log.thinking(AgentRole.VISIONARY, "Defining stylistic palette...")

        plan_result, style = await asyncio.gather(
            self.architect.execute(planning_prompt, context),
            self.visionary.execute(planning_prompt, context),
            return_exceptions=True,
        )
        _raise_if_base_exception(plan_result)
        _raise_if_base_exception(style)

        for result in (plan_result, style):
            if isinstance(result, NoProvidersConfiguredError):
                log.failed(AgentRole.PROJECT_MANAGER, str(result))
                raise result

        if isinstance(plan_result, Exception):
            self.logger.error(f"Architect failed: {plan_result}")
            log.failed(AgentRole.ARCHITECT, "Failed to generate a valid plan.", str(plan_result))
            return None

        log.success(
            AgentRole.ARCHITECT,
            f"Plan created with {len(plan_result.plan.tasks)} tasks.",
            plan_result.metadata,
            vendor_used=plan_result.vendor_used,
        )

        if isinstance(style, Exception):
            self.logger.warning(f"Visionary failed, continuing without style guide: {style}")
            log.warning(AgentRole.VISIONARY, "Style guide unavailable.", str(style))
            context.style_context = ""
        else:
            context.style_context = style.to_context()
            log.success(
                AgentRole.VISIONARY,
                "Style guide established.",
                context.style_context,
                vendor_used=style.vendor_used,
            )

        return plan_result.plan

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def _execute(
        self,
        plan: WorkflowPlan,
        context: AgentContext,
        log: AgentLogger,
    ) -> List[ContentBlockDraft]:
        drafts: List[ContentBlockDraft] = []
        chapter_number = 1

        try:
            for task in plan.tasks:
                try:
                    agent_role = AgentRole(task.role)
                except ValueError:
                    agent_role = AgentRole.PROJECT_MANAGER

                log.thinking(agent_role, f"Executing: {task.description}")

                if agent_role != AgentRole.WRITER:
                    log.warning(
                        AgentRole.PROJECT_MANAGER,
                        f"No executor for role {task.role}; task skipped.",
                    )
                    continue

                output = await self.writer.execute(task, context)
                if output.is_empty:
                    log.failed(AgentRole.WRITER, "Failed to generate content.", task.description)
                    continue

                log.success(
                    AgentRole.WRITER,
                    "Drafting content complete.",
                    output.helper_script or "No script provided",
                    vendor_used=output.vendor_used,
                )

                await self._validate(task, output.content, context, log)

                is_chapter = is_chapter_task(task)
                drafts.append(ContentBlockDraft(
                    content=output.content,
                    vendor_used=output.vendor_used or "",
                    prompt=task.description,
                    block_type=BlockType.CHAPTER if is_chapter else BlockType.TEXT,
                    title=task.title,
                    chapter_number=chapter_number if is_chapter else None,
                    helper_script=output.helper_script,
                ))
                if is_chapter:
                    chapter_number += 1

        except NoProvidersConfiguredError as e:
            log.failed(AgentRole.PROJECT_MANAGER, str(e))
            raise
        except Exception as e:
            self.logger.exception(f"Workflow aborted after {len(drafts)} drafts: {e}")
            log.failed(AgentRole.PROJECT_MANAGER, "Workflow encountered an error.", str(e))

        return drafts

    async def _validate(
        self,
        task: WorkflowTask,
        content: str,
        context: AgentContext,
        log: AgentLogger,
    ) -> None:
        """Critic and consistency check run as a pair. Advisory only."""
        log.thinking(AgentRole.CRITIC, "Reviewing quality...")
        log.thinking(AgentRole.CONSISTENCY_CHECKER, "Verifying world facts...")

        review = ReviewInput(description=task.description, content=content)
        critique, consistency = await asyncio.gather(
            self.critic.execute(review, context),
            self.consistency.execute(review, context),
            return_exceptions=True,
        )
        _raise_if_base_exception(critique)
        _raise_if_base_exception(consistency)

        if isinstance(critique, Exception):
            log.warning(AgentRole.CRITIC, "Quality review unavailable.", str(critique))
        else:
            log.success(
                AgentRole.CRITIC,
                f"Quality: {critique.verdict}",
                critique.critique,
                vendor_used=critique.vendor_used,
            )

        if isinstance(consistency, Exception):
            log.warning(AgentRole.CONSISTENCY_CHECKER, "Consistency check unavailable.", str(consistency))
        elif not consistency.passed:
            log.warning(
                AgentRole.CONSISTENCY_CHECKER,
                "Consistency Issues Found",
                ", ".join(consistency.issues),
                vendor_used=consistency.vendor_used,
            )
        else:
            log.success(
                AgentRole.CONSISTENCY_CHECKER,
                "World Consistency Verified",
                vendor_used=consistency.vendor_used,
            )
