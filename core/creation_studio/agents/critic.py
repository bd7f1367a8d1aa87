"""
Critic Agent

Advisory quality review of a fresh draft. Never blocks or rewrites content.
"""

from dataclasses import dataclass
from typing import Optional

from .base import BaseAgent, AgentContext
from ..models import AgentRole
from ..prompts.critic_prompts import CRITIC_SYSTEM_PROMPT, CRITIC_PROMPT


@dataclass
class ReviewInput:
    """Draft under review plus the task that produced it"""
    description: str
    content: str


@dataclass
class Critique:
    approved: bool
    critique: Optional[str] = None
    vendor_used: Optional[str] = None

    @property
    def verdict(self) -> str:
        return "Approved" if self.approved else "Needs Polish"


class CriticAgent(BaseAgent[ReviewInput, Critique]):
    """Agent 4: Critic"""

    role = AgentRole.CRITIC
    stage = "critic"

    @property
    def name(self) -> str:
        return "Critic"

    @property
    def description(self) -> str:
        return "Review draft quality, flow and impact"

    async def execute(self, input_data: ReviewInput, context: AgentContext) -> Critique:
        prompt = CRITIC_PROMPT.format(
            description=input_data.description,
            excerpt=input_data.content[:self.config.critic_excerpt_chars],
        )
        data, result = await self.call_ai_json(
            prompt,
            fallback={},
            system_prompt=CRITIC_SYSTEM_PROMPT,
        )
        critique = data.get("critique")
        return Critique(
            approved=data.get("approved") is True,
            critique=str(critique) if critique else None,
            vendor_used=result.vendor_used.value,
        )
