"""
Consistency Checker Agent

Checks a draft against the world roster (locations and items). Advisory only.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import BaseAgent, AgentContext
from .critic import ReviewInput
from ..models import AgentRole
from ..prompts.consistency_prompts import CONSISTENCY_SYSTEM_PROMPT, NO_WORLD_RULES
from ..utils import world_context


@dataclass
class ConsistencyReport:
    status: str = "pass"  # pass | fail
    issues: List[str] = field(default_factory=list)
    vendor_used: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status != "fail"


class ConsistencyAgent(BaseAgent[ReviewInput, ConsistencyReport]):
    """Agent 5: Consistency Checker"""

    role = AgentRole.CONSISTENCY_CHECKER
    stage = "consistency"

    @property
    def name(self) -> str:
        return "ConsistencyChecker"

    @property
    def description(self) -> str:
        return "Verify world facts against the blueprint roster"

    async def execute(self, input_data: ReviewInput, context: AgentContext) -> ConsistencyReport:
        content = input_data.content
        system_prompt = CONSISTENCY_SYSTEM_PROMPT.format(
            world_context=world_context(context.blueprint) or NO_WORLD_RULES,
            content=content[:self.config.consistency_blueprint_chars],
        )
        data, result = await self.call_ai_json(
            content[:self.config.consistency_excerpt_chars],
            fallback={},
            system_prompt=system_prompt,
        )

        issues = data.get("issues")
        return ConsistencyReport(
            status="fail" if data.get("status") == "fail" else "pass",
            issues=[str(i) for i in issues] if isinstance(issues, list) else [],
            vendor_used=result.vendor_used.value,
        )
