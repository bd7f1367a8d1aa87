"""
Writer Agent

Writes the content for one workflow task, using the style context, the
world roster and the active persona.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .base import BaseAgent, AgentContext
from ..models import AgentRole, WorkflowTask
from ..prompts.writer_prompts import WRITER_SYSTEM_PROMPT, WRITER_PROMPT, PERSONA_SUFFIX
from ..utils import character_context, world_context


@dataclass
class WriterOutput:
    content: str
    helper_script: Optional[str] = None
    vendor_used: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()


def coerce_content(value: Any) -> str:
    """Models sometimes return the content as a list of paragraphs."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)


class WriterAgent(BaseAgent[WorkflowTask, WriterOutput]):
    """
    Agent 3: Writer

    One call per task, JSON shaped ``{content, helper_script}``.
    Empty content is returned as-is; the workflow logs it and skips the task.
    """

    role = AgentRole.WRITER
    stage = "writer"

    @property
    def name(self) -> str:
        return "Writer"

    @property
    def description(self) -> str:
        return "Write the content for a single plan task"

    def system_prompt(self, context: AgentContext) -> str:
        persona = context.persona
        if persona and persona.system_prompt_modifier:
            return WRITER_SYSTEM_PROMPT + PERSONA_SUFFIX.format(modifier=persona.system_prompt_modifier)
        return WRITER_SYSTEM_PROMPT

    def build_prompt(self, task: WorkflowTask, context: AgentContext) -> str:
        blueprint = context.blueprint
        return WRITER_PROMPT.format(
            description=task.description,
            style_context=context.style_context,
            character_context=character_context(blueprint.characters) if blueprint else "",
            world_context=world_context(blueprint),
            context_script=task.context_script,
        )

    async def execute(self, input_data: WorkflowTask, context: AgentContext) -> WriterOutput:
        task = input_data
        data, result = await self.call_ai_json(
            self.build_prompt(task, context),
            fallback={"content": ""},
            system_prompt=self.system_prompt(context),
        )

        content = coerce_content(data.get("content"))
        helper_script = data.get("helper_script")
        self.logger.info(
            f"Drafted {self.count_words(content)} words for: {task.title or task.description[:60]}"
        )
        return WriterOutput(
            content=content,
            helper_script=str(helper_script) if helper_script else None,
            vendor_used=result.vendor_used.value,
        )
