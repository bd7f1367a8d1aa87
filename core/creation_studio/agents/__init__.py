"""
Creation Studio Agents

One agent per workflow role.
"""

from .base import BaseAgent, AgentContext
from .architect import ArchitectAgent, PlanResult
from .visionary import VisionaryAgent, StyleGuide
from .writer import WriterAgent, WriterOutput
from .critic import CriticAgent, Critique, ReviewInput
from .consistency import ConsistencyAgent, ConsistencyReport
from .editor import EditorAgent, EditRequest
from .synthesizer import SynthesizerAgent
from .personas import AGENT_PERSONAS, DEFAULT_PERSONA_ID, get_persona_by_id

__all__ = [
    "BaseAgent",
    "AgentContext",
    "ArchitectAgent",
    "PlanResult",
    "VisionaryAgent",
    "StyleGuide",
    "WriterAgent",
    "WriterOutput",
    "CriticAgent",
    "Critique",
    "ReviewInput",
    "ConsistencyAgent",
    "ConsistencyReport",
    "EditorAgent",
    "EditRequest",
    "SynthesizerAgent",
    "AGENT_PERSONAS",
    "DEFAULT_PERSONA_ID",
    "get_persona_by_id",
]
