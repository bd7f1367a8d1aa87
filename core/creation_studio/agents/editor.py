"""
Editor Agent

Refines an existing passage: expand, rewrite, shorten or fix grammar.
"""

from dataclasses import dataclass

from .base import BaseAgent, AgentContext
from ..exceptions import AgentError
from ..models import AgentRole, EditorAction, RefinedContent
from ..prompts.editor_prompts import EDITOR_SYSTEM_PROMPT, EDITOR_PROMPT, PARSE_FAILED_CHANGES


@dataclass
class EditRequest:
    content: str
    action: EditorAction


class EditorAgent(BaseAgent[EditRequest, RefinedContent]):
    """
    Agent 6: Editor

    Unparseable output leaves the original content untouched.
    """

    role = AgentRole.EDITOR
    stage = "editor"

    @property
    def name(self) -> str:
        return "Editor"

    @property
    def description(self) -> str:
        return "Refine text according to an editing action"

    async def execute(self, input_data: EditRequest, context: AgentContext) -> RefinedContent:
        try:
            action = EditorAction(input_data.action)
        except ValueError:
            raise AgentError(self.name, f"Unknown editor action: {input_data.action}", recoverable=False)

        context.report(self.role, f"Editing content: {action.value}...")

        fallback = {"content": input_data.content, "changes": PARSE_FAILED_CHANGES}
        data, result = await self.call_ai_json(
            EDITOR_PROMPT.format(content=input_data.content, action=action.value),
            fallback=fallback,
            system_prompt=EDITOR_SYSTEM_PROMPT,
            temperature=self.config.temperature_editing,
        )

        content = data.get("content")
        if not isinstance(content, str) or not content.strip():
            self.logger.warning("Editor returned no content; keeping the original")
            return RefinedContent(
                content=input_data.content,
                changes=PARSE_FAILED_CHANGES,
                vendor_used=result.vendor_used.value,
            )

        return RefinedContent(
            content=content,
            changes=str(data.get("changes") or ""),
            vendor_used=result.vendor_used.value,
        )
