"""
Creation Studio Data Models

Core data structures for multi-vendor generation and the agent workflow.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Sequence, Union
from enum import Enum
from datetime import datetime
import uuid


def _short_id() -> str:
    return uuid.uuid4().hex[:9]


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [_as_str(v) for v in value if v is not None]


# ============================================
# VENDORS & MODELS
# ============================================

class Vendor(str, Enum):
    """Supported AI vendors"""
    GEMINI = "gemini"
    GROQ = "groq"
    DEEPSEEK = "deepseek"
    MISTRAL = "mistral"
    OPENROUTER = "openrouter"
    HUGGINGFACE = "huggingface"


class TaskCategory(str, Enum):
    """Abstract purpose of a generation call"""
    PLANNING = "planning"
    WRITING = "writing"
    EDITING = "editing"
    CRITIQUE = "critique"
    SYNTHESIS = "synthesis"
    IMAGE_GENERATION = "image_generation"
    QUICK_RESPONSE = "quick_response"


@dataclass
class ModelDescriptor:
    """A specific model offered by a vendor"""
    vendor: Vendor
    model_id: str
    display_name: str
    description: str = ""
    strengths: List[str] = field(default_factory=list)
    is_available: bool = False

    def to_dict(self) -> dict:
        return {
            "vendor": self.vendor.value,
            "model_id": self.model_id,
            "display_name": self.display_name,
            "description": self.description,
            "strengths": list(self.strengths),
            "is_available": self.is_available,
        }


# ============================================
# PROMPTS & RESULTS
# ============================================

@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineDataPart:
    """Inline binary blob, base64 encoded"""
    mime_type: str
    data: str


@dataclass(frozen=True)
class FileDataPart:
    """Reference to an uploaded file"""
    mime_type: str
    file_uri: str


ContentPart = Union[TextPart, InlineDataPart, FileDataPart]
Prompt = Union[str, Sequence[ContentPart]]


def prompt_text(prompt: Prompt) -> str:
    """Text-only rendition of a prompt; binary parts are dropped."""
    if isinstance(prompt, str):
        return prompt
    return "\n\n".join(p.text for p in prompt if isinstance(p, TextPart))


@dataclass(frozen=True)
class GenerateOptions:
    """Per-call generation options"""
    system_prompt: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    response_format: str = "text"  # text | json

    @property
    def wants_json(self) -> bool:
        return self.response_format == "json"


@dataclass(frozen=True)
class GenerationRequest:
    prompt: Prompt
    options: GenerateOptions = field(default_factory=GenerateOptions)


@dataclass
class GenerationResult:
    """Text output plus the vendor that produced it"""
    text: str
    vendor_used: Vendor
    model_used: str = ""


# ============================================
# AGENT LOGS
# ============================================

class AgentRole(str, Enum):
    ARCHITECT = "ARCHITECT"
    WRITER = "WRITER"
    VISIONARY = "VISIONARY"
    CRITIC = "CRITIC"
    INTEGRATOR = "INTEGRATOR"
    PROJECT_MANAGER = "PROJECT_MANAGER"
    SYNTHESIZER = "SYNTHESIZER"
    EDITOR = "EDITOR"
    CONSISTENCY_CHECKER = "CONSISTENCY_CHECKER"


class LogStatus(str, Enum):
    THINKING = "thinking"
    WORKING = "working"
    SUCCESS = "success"
    FAILED = "failed"
    WARNING = "warning"


@dataclass
class AgentLogEntry:
    """One observable workflow event"""
    agent: AgentRole
    message: str
    status: LogStatus = LogStatus.WORKING
    metadata: Optional[str] = None
    vendor_used: Optional[str] = None
    id: str = field(default_factory=_short_id)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "agent": self.agent.value,
            "message": self.message,
            "metadata": self.metadata,
            "status": self.status.value,
            "vendor_used": self.vendor_used,
        }


# ============================================
# WORLD ROSTER
# ============================================

@dataclass
class CharacterProfile:
    name: str
    role: str = ""
    description: str = ""
    traits: List[str] = field(default_factory=list)
    id: str = field(default_factory=_short_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharacterProfile":
        return cls(
            name=_as_str(data.get("name")),
            role=_as_str(data.get("role")),
            description=_as_str(data.get("description")),
            traits=_as_str_list(data.get("traits")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "role": self.role,
            "description": self.description,
            "traits": list(self.traits),
        }


@dataclass
class Location:
    name: str
    description: str = ""
    sensory_details: str = ""
    id: str = field(default_factory=_short_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        return cls(
            name=_as_str(data.get("name")),
            description=_as_str(data.get("description")),
            sensory_details=_as_str(data.get("sensoryDetails", data.get("sensory_details"))),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "sensoryDetails": self.sensory_details,
        }


@dataclass
class Item:
    name: str
    description: str = ""
    usage: str = ""
    id: str = field(default_factory=_short_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        return cls(
            name=_as_str(data.get("name")),
            description=_as_str(data.get("description")),
            usage=_as_str(data.get("usage")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "usage": self.usage,
        }


def _roster(cls, value: Any) -> list:
    if not isinstance(value, list):
        return []
    return [cls.from_dict(v) for v in value if isinstance(v, dict)]


# ============================================
# SYNTHESIS
# ============================================

class InputType(str, Enum):
    DOCUMENT = "document"
    IMAGE = "image"
    CONVERSATION = "conversation"
    AUDIO = "audio"
    VIDEO = "video"
    URL = "url"
    GUIDELINE = "guideline"
    NOTE = "note"


@dataclass
class InputItem:
    """One piece of raw source material"""
    type: InputType
    name: str
    content: str = ""
    raw_content: Optional[str] = None
    """Data URL (``data:<mime>;base64,<data>``) for binary inputs"""
    metadata: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=_short_id)


@dataclass
class ChapterSuggestion:
    number: int
    title: str
    summary: str = ""
    key_points: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_number: int) -> "ChapterSuggestion":
        number = data.get("number")
        return cls(
            number=number if isinstance(number, int) else default_number,
            title=_as_str(data.get("title")) or f"Chapter {default_number}",
            summary=_as_str(data.get("summary")),
            key_points=_as_str_list(data.get("keyPoints", data.get("key_points"))),
        )

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "title": self.title,
            "summary": self.summary,
            "keyPoints": list(self.key_points),
        }


@dataclass
class StructureSuggestion:
    chapters: List[ChapterSuggestion] = field(default_factory=list)
    estimated_word_count: int = 0
    title: Optional[str] = None
    genre: Optional[str] = None
    tone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "StructureSuggestion":
        if not isinstance(data, dict):
            return cls()
        raw_chapters = data.get("chapters")
        chapters = []
        if isinstance(raw_chapters, list):
            for raw in raw_chapters:
                if isinstance(raw, dict):
                    chapters.append(ChapterSuggestion.from_dict(raw, len(chapters) + 1))
        estimated = data.get("estimatedWordCount", data.get("estimated_word_count"))
        return cls(
            chapters=chapters,
            estimated_word_count=estimated if isinstance(estimated, int) else 0,
            title=data.get("title") if isinstance(data.get("title"), str) else None,
            genre=data.get("genre") if isinstance(data.get("genre"), str) else None,
            tone=data.get("tone") if isinstance(data.get("tone"), str) else None,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "chapters": [c.to_dict() for c in self.chapters],
            "estimatedWordCount": self.estimated_word_count,
            "genre": self.genre,
            "tone": self.tone,
        }


@dataclass
class SynthesisOutline:
    """Structured extraction from a batch of inputs"""
    summary: str
    themes: List[str] = field(default_factory=list)
    key_ideas: List[str] = field(default_factory=list)
    suggested_structure: StructureSuggestion = field(default_factory=StructureSuggestion)
    characters: List[CharacterProfile] = field(default_factory=list)
    locations: List[Location] = field(default_factory=list)
    items: List[Item] = field(default_factory=list)
    guidelines: List[str] = field(default_factory=list)
    context_summary: str = ""
    word_count: int = 0
    source_count: int = 0

    @classmethod
    def empty(cls) -> "SynthesisOutline":
        return cls(
            summary="No inputs provided.",
            context_summary="No inputs provided.",
        )

    @classmethod
    def from_model_output(
        cls,
        data: Dict[str, Any],
        extra_guidelines: List[str],
        word_count: int,
        source_count: int,
    ) -> "SynthesisOutline":
        context_summary = _as_str(data.get("contextSummary")) or "Synthesis complete."
        return cls(
            summary=context_summary,
            themes=_as_str_list(data.get("themes")),
            key_ideas=_as_str_list(data.get("keyIdeas")),
            suggested_structure=StructureSuggestion.from_dict(data.get("suggestedStructure")),
            characters=_roster(CharacterProfile, data.get("characters")),
            locations=_roster(Location, data.get("locations")),
            items=_roster(Item, data.get("items")),
            guidelines=_as_str_list(data.get("guidelines")) + list(extra_guidelines),
            context_summary=context_summary,
            word_count=word_count,
            source_count=source_count,
        )

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "themes": list(self.themes),
            "keyIdeas": list(self.key_ideas),
            "suggestedStructure": self.suggested_structure.to_dict(),
            "characters": [c.to_dict() for c in self.characters],
            "locations": [loc.to_dict() for loc in self.locations],
            "items": [i.to_dict() for i in self.items],
            "guidelines": list(self.guidelines),
            "contextSummary": self.context_summary,
            "wordCount": self.word_count,
            "sourceCount": self.source_count,
        }


# ============================================
# BLUEPRINT & PROJECT
# ============================================

class SectionType(str, Enum):
    CHAPTER = "chapter"
    SCENE = "scene"


@dataclass
class BlueprintSection:
    title: str
    description: str = ""
    """The prompt for the Writer"""
    type: SectionType = SectionType.CHAPTER
    id: str = field(default_factory=_short_id)


@dataclass
class Blueprint:
    """A user-approved structure that bypasses the planning model call"""
    title: str
    description: str = ""
    genre: Optional[str] = None
    tone: Optional[str] = None
    target_audience: Optional[str] = None
    sections: List[BlueprintSection] = field(default_factory=list)
    characters: List[CharacterProfile] = field(default_factory=list)
    locations: List[Location] = field(default_factory=list)
    items: List[Item] = field(default_factory=list)
    persona_id: Optional[str] = None

    @property
    def chapter_sections(self) -> List[BlueprintSection]:
        return [s for s in self.sections if s.type == SectionType.CHAPTER]

    @classmethod
    def from_synthesis(
        cls,
        outline: SynthesisOutline,
        persona_id: Optional[str] = None,
    ) -> "Blueprint":
        """Approve a synthesis outline as-is: one chapter section per suggested chapter."""
        structure = outline.suggested_structure
        return cls(
            title=structure.title or "Untitled",
            description=outline.context_summary,
            genre=structure.genre,
            tone=structure.tone,
            sections=[
                BlueprintSection(
                    title=chapter.title,
                    description=chapter.summary,
                    type=SectionType.CHAPTER,
                )
                for chapter in structure.chapters
            ],
            characters=list(outline.characters),
            locations=list(outline.locations),
            items=list(outline.items),
            persona_id=persona_id,
        )


class BlockType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    NOTE = "note"
    CHAPTER = "chapter"
    PLAN = "plan"
    ARTIFACT = "artifact"


@dataclass
class BlockSummary:
    """Read-only view of an existing project block"""
    type: BlockType
    content: str


@dataclass
class ProjectSettings:
    preferred_vendor: Optional[Vendor] = None
    auto_select_model: bool = True
    book_metadata: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProjectSnapshot:
    """Read-only project context handed to the workflow"""
    title: str
    description: str = ""
    blocks: List[BlockSummary] = field(default_factory=list)
    settings: ProjectSettings = field(default_factory=ProjectSettings)
    blueprint: Optional[Blueprint] = None
    id: str = field(default_factory=_short_id)


# ============================================
# WORKFLOW
# ============================================

@dataclass(frozen=True)
class WorkflowTask:
    role: str
    description: str
    context_script: str = ""
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkflowTask":
        title = data.get("title")
        return cls(
            role=_as_str(data.get("role")).upper() or AgentRole.WRITER.value,
            description=_as_str(data.get("description")),
            context_script=_as_str(data.get("context_script")),
            title=_as_str(title) if title else None,
        )

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "description": self.description,
            "context_script": self.context_script,
            "title": self.title,
        }


@dataclass(frozen=True)
class WorkflowPlan:
    tasks: tuple

    @classmethod
    def from_blueprint(cls, blueprint: Blueprint) -> "WorkflowPlan":
        """Derive one WRITER task per chapter section, in order. No model call."""
        genre = blueprint.genre
        tone = blueprint.tone
        return cls(tasks=tuple(
            WorkflowTask(
                role=AgentRole.WRITER.value,
                description=f"Write {section.title}. {section.description}",
                context_script=(
                    f"Genre: {genre}, Tone: {tone}. "
                    f"Structure this as a {section.type.value}."
                ),
                title=section.title,
            )
            for section in blueprint.chapter_sections
        ))

    @classmethod
    def from_dict(cls, data: Any) -> "WorkflowPlan":
        """Tolerant conversion of architect output; malformed tasks are dropped."""
        raw_tasks = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(raw_tasks, list):
            return cls(tasks=())
        tasks = [
            WorkflowTask.from_dict(t)
            for t in raw_tasks
            if isinstance(t, dict) and t.get("description")
        ]
        return cls(tasks=tuple(tasks))

    @property
    def is_empty(self) -> bool:
        return len(self.tasks) == 0

    def to_dict(self) -> dict:
        return {"tasks": [t.to_dict() for t in self.tasks]}


@dataclass
class ContentBlockDraft:
    """One unit of generated content prior to UI persistence"""
    content: str
    vendor_used: str
    prompt: str
    block_type: BlockType = BlockType.TEXT
    agent_signature: str = "Writer Agent"
    title: Optional[str] = None
    chapter_number: Optional[int] = None
    helper_script: Optional[str] = None
    id: str = field(default_factory=_short_id)

    @property
    def is_chapter(self) -> bool:
        return self.block_type == BlockType.CHAPTER

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.block_type.value,
            "content": self.content,
            "metadata": {
                "agentSignature": self.agent_signature,
                "modelUsed": self.vendor_used,
                "prompt": self.prompt,
                "title": self.title,
                "chapterNumber": self.chapter_number,
                "helperScript": self.helper_script,
            },
        }


# ============================================
# PERSONAS & EDITING
# ============================================

@dataclass(frozen=True)
class AgentPersona:
    id: str
    name: str
    description: str
    system_prompt_modifier: str


class EditorAction(str, Enum):
    EXPAND = "expand"
    REWRITE = "rewrite"
    SHORTEN = "shorten"
    GRAMMAR = "grammar"


@dataclass
class RefinedContent:
    content: str
    changes: str
    vendor_used: Optional[str] = None
