"""
Architect Agent

Turns a user request into a WorkflowPlan, either from a model call or
deterministically from an approved blueprint.
"""

import json
from dataclasses import dataclass
from typing import Optional

from .base import BaseAgent, AgentContext
from ..exceptions import WorkflowError
from ..models import AgentRole, Blueprint, WorkflowPlan
from ..prompts.architect_prompts import ARCHITECT_SYSTEM_PROMPT


@dataclass
class PlanResult:
    plan: WorkflowPlan
    vendor_used: Optional[str] = None

    @property
    def metadata(self) -> str:
        return json.dumps(self.plan.to_dict()["tasks"], indent=2)


class ArchitectAgent(BaseAgent[str, PlanResult]):
    """
    Agent 1: Architect

    Breaks a request into Writer tasks (chapters, sections, scenes).
    An empty or unparseable plan raises WorkflowError: a run with zero
    tasks has failed.
    """

    role = AgentRole.ARCHITECT
    stage = "architect"

    @property
    def name(self) -> str:
        return "Architect"

    @property
    def description(self) -> str:
        return "Structure the narrative arc into writer tasks"

    async def execute(self, input_data: str, context: AgentContext) -> PlanResult:
        """
        Args:
            input_data: Planning prompt (project context + user request)
        """
        data, result = await self.call_ai_json(
            input_data,
            fallback={"tasks": []},
            system_prompt=ARCHITECT_SYSTEM_PROMPT,
        )
        plan = WorkflowPlan.from_dict(data)
        if plan.is_empty:
            raise WorkflowError(
                f"Architect returned no usable tasks (vendor: {result.vendor_used.value})"
            )
        self.logger.info(f"Plan has {len(plan.tasks)} tasks (vendor: {result.vendor_used.value})")
        return PlanResult(plan=plan, vendor_used=result.vendor_used.value)

    def plan_from_blueprint(self, blueprint: Blueprint) -> PlanResult:
        """One WRITER task per chapter section. No model call."""
        plan = WorkflowPlan.from_blueprint(blueprint)
        self.logger.info(f"Derived {len(plan.tasks)} tasks from blueprint '{blueprint.title}'")
        return PlanResult(plan=plan)
