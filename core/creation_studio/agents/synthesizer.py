"""
Synthesizer Agent

Condenses a batch of raw inputs (documents, images, URLs, notes,
guidelines) into one SynthesisOutline that can seed a blueprint.
"""

from typing import List, Optional

from .base import BaseAgent, AgentContext
from ..exceptions import StudioError
from ..models import (
    AgentRole,
    ChapterSuggestion,
    ContentPart,
    InlineDataPart,
    InputItem,
    InputType,
    StructureSuggestion,
    SynthesisOutline,
    TextPart,
)
from ..prompts.synthesizer_prompts import (
    SYNTHESIS_PROMPT,
    BINARY_INPUT_HEADER,
    TEXT_INPUT_HEADER,
    DOCUMENT_TAG,
    URL_TAG,
    GUIDELINE_TAG,
    NOTE_TAG,
    GENERIC_TAG,
    FALLBACK_SUMMARY,
    FALLBACK_THEME,
    FALLBACK_CHAPTERS,
)
from ..utils import parse_json_or_fallback

PDF_MIME = "application/pdf"
DEFAULT_IMAGE_MIME = "image/jpeg"


def data_url_payload(data_url: str) -> str:
    """Base64 payload of a ``data:<mime>;base64,<data>`` URL."""
    if "," in data_url:
        return data_url.split(",", 1)[1]
    return data_url


class SynthesizerAgent(BaseAgent[List[InputItem], SynthesisOutline]):
    """
    Agent 7: Synthesizer

    Always returns a usable outline: when the model fails or its output
    cannot be parsed, a heuristic outline is built from the notes and
    guidelines alone.
    """

    role = AgentRole.SYNTHESIZER
    stage = "synthesizer"

    @property
    def name(self) -> str:
        return "Synthesizer"

    @property
    def description(self) -> str:
        return "Extract themes, structure and world roster from raw inputs"

    # ------------------------------------------------------------------
    # Prompt assembly
    # ------------------------------------------------------------------

    def _text_excerpt(self, item: InputItem) -> str:
        content = item.content or ""
        if item.type == InputType.DOCUMENT:
            return DOCUMENT_TAG.format(name=item.name) + content[:self.config.document_excerpt_chars]
        if item.type == InputType.URL:
            header = URL_TAG.format(
                url=item.metadata.get("url", ""),
                title=item.metadata.get("title") or "N/A",
            )
            return header + content[:self.config.url_excerpt_chars]
        if item.type == InputType.GUIDELINE:
            return GUIDELINE_TAG + content
        if item.type == InputType.NOTE:
            return NOTE_TAG + content
        return GENERIC_TAG.format(type=InputType(item.type).value) + content[:self.config.default_excerpt_chars]

    def build_prompt(self, items: List[InputItem]) -> List[ContentPart]:
        """Instruction header plus one inline or text part per item, in order."""
        parts: List[ContentPart] = [TextPart(SYNTHESIS_PROMPT)]

        for item in items:
            is_image = item.type == InputType.IMAGE and item.raw_content
            is_pdf = (
                item.type == InputType.DOCUMENT
                and item.raw_content
                and item.metadata.get("fileType") == PDF_MIME
            )

            if is_image:
                mime = item.metadata.get("fileType") or DEFAULT_IMAGE_MIME
                parts.append(TextPart(BINARY_INPUT_HEADER.format(kind="Image", name=item.name)))
                parts.append(InlineDataPart(mime_type=mime, data=data_url_payload(item.raw_content)))
            elif is_pdf:
                parts.append(TextPart(BINARY_INPUT_HEADER.format(kind="PDF", name=item.name)))
                parts.append(InlineDataPart(mime_type=PDF_MIME, data=data_url_payload(item.raw_content)))
            else:
                parts.append(TextPart(TEXT_INPUT_HEADER.format(name=item.name) + self._text_excerpt(item)))

        return parts

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute(self, input_data: List[InputItem], context: AgentContext) -> SynthesisOutline:
        items = list(input_data)
        if not items:
            return SynthesisOutline.empty()

        context.report(self.role, f"Synthesizing {len(items)} inputs...")

        guidelines = [i.content for i in items if i.type == InputType.GUIDELINE]
        word_count = sum(self.count_words(i.content) for i in items)

        try:
            result = await self.call_ai(self.build_prompt(items), response_format="json")
        except StudioError as e:
            self.logger.error(f"Synthesis call failed, using heuristic outline: {e}")
            return self.heuristic_outline(items, word_count)

        data = parse_json_or_fallback(result.text, None)
        if not isinstance(data, dict):
            self.logger.warning("Synthesis output was not a JSON object, using heuristic outline")
            return self.heuristic_outline(items, word_count)

        outline = SynthesisOutline.from_model_output(
            data,
            extra_guidelines=guidelines,
            word_count=word_count,
            source_count=len(items),
        )
        self.logger.info(
            f"Synthesized {len(items)} inputs into {len(outline.suggested_structure.chapters)} "
            f"chapters (vendor: {result.vendor_used.value})"
        )
        return outline

    async def synthesize(self, items: List[InputItem], context: Optional[AgentContext] = None) -> SynthesisOutline:
        """Standalone entry point outside a workflow run."""
        context = context or AgentContext(project_id="synthesis", config=self.config)
        return await self.execute(items, context)

    def heuristic_outline(self, items: List[InputItem], word_count: Optional[int] = None) -> SynthesisOutline:
        """Outline built from notes and guidelines only, with a fixed 3-chapter skeleton."""
        guidelines = [i.content for i in items if i.type == InputType.GUIDELINE]
        notes = "\n".join(i.content for i in items if i.type == InputType.NOTE)
        key_ideas = [line for line in notes.split("\n") if line.strip()]

        if word_count is None:
            word_count = sum(self.count_words(i.content) for i in items)

        return SynthesisOutline(
            summary=FALLBACK_SUMMARY,
            themes=[FALLBACK_THEME],
            key_ideas=key_ideas[:self.config.fallback_key_ideas],
            suggested_structure=StructureSuggestion(
                chapters=[ChapterSuggestion.from_dict(c, c["number"]) for c in FALLBACK_CHAPTERS],
                estimated_word_count=self.config.fallback_estimated_words,
            ),
            guidelines=guidelines,
            context_summary=(
                f"Based on {len(items)} inputs: {notes[:self.config.fallback_summary_chars]}"
            ),
            word_count=word_count,
            source_count=len(items),
        )
