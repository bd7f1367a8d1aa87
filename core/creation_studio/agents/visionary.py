"""
Visionary Agent

Produces the visual and tonal style guide shared by every writer task.
"""

from dataclasses import dataclass
from typing import Optional

from .base import BaseAgent, AgentContext
from ..models import AgentRole, Blueprint
from ..prompts.visionary_prompts import (
    VISIONARY_SYSTEM_PROMPT,
    STYLE_CONTEXT_TEMPLATE,
    BLUEPRINT_STYLE_TEMPLATE,
)


@dataclass
class StyleGuide:
    style_guide: str = ""
    sensory_palette: str = ""
    vendor_used: Optional[str] = None

    def to_context(self) -> str:
        return STYLE_CONTEXT_TEMPLATE.format(
            style_guide=self.style_guide,
            sensory_palette=self.sensory_palette,
        )


class VisionaryAgent(BaseAgent[str, StyleGuide]):
    """
    Agent 2: Visionary

    Runs alongside the Architect. Its output is optional: callers fall
    back to an empty style context when it fails.
    """

    role = AgentRole.VISIONARY
    stage = "visionary"

    @property
    def name(self) -> str:
        return "Visionary"

    @property
    def description(self) -> str:
        return "Define the stylistic palette"

    async def execute(self, input_data: str, context: AgentContext) -> StyleGuide:
        data, result = await self.call_ai_json(
            input_data,
            fallback={},
            system_prompt=VISIONARY_SYSTEM_PROMPT,
        )
        return StyleGuide(
            style_guide=str(data.get("style_guide") or ""),
            sensory_palette=str(data.get("sensory_palette") or ""),
            vendor_used=result.vendor_used.value,
        )

    @staticmethod
    def style_from_blueprint(blueprint: Blueprint) -> str:
        return BLUEPRINT_STYLE_TEMPLATE.format(tone=blueprint.tone or "Standard")
