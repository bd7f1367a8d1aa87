"""
Creation Studio Configuration

Central configuration for generation and workflow behavior.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .models import TaskCategory


@dataclass
class StudioConfig:
    """
    Configuration for the Creation Studio orchestration core.

    All settings that control vendor fallback, workflow prompts and
    synthesis truncation.
    """

    # === RESILIENT GENERATION ===

    max_attempts_per_vendor: int = 2
    """Attempts per vendor before falling through to the next one"""

    retry_backoff_seconds: float = 1.0
    """Wait before retrying a vendor that reported rate-limit / overload"""

    # === WORKFLOW STAGES ===

    stage_tasks: Dict[str, TaskCategory] = field(default_factory=lambda: {
        "architect": TaskCategory.PLANNING,
        "visionary": TaskCategory.QUICK_RESPONSE,
        "writer": TaskCategory.WRITING,
        "critic": TaskCategory.CRITIQUE,
        "consistency": TaskCategory.CRITIQUE,
        "editor": TaskCategory.EDITING,
        "synthesizer": TaskCategory.SYNTHESIS,
    })
    """Task category each agent routes its calls through"""

    context_excerpt_chars: int = 50
    """Characters of each existing block shown to the planners"""

    critic_excerpt_chars: int = 1000
    """Characters of a draft sent to the critic"""

    consistency_excerpt_chars: int = 2000
    """Characters of a draft sent as the consistency prompt"""

    consistency_blueprint_chars: int = 1000
    """Characters of a draft embedded in the consistency system prompt"""

    # === TEMPERATURES ===

    temperature: Optional[float] = None
    """Temperature for creative calls (None = vendor default)"""

    temperature_editing: float = 0.3
    """Lower temperature for refine/edit actions"""

    # === SYNTHESIS ===

    document_excerpt_chars: int = 5000
    url_excerpt_chars: int = 3000
    default_excerpt_chars: int = 2000

    fallback_estimated_words: int = 30000
    """Estimated word count reported by the heuristic outline"""

    fallback_key_ideas: int = 5
    """Note lines promoted to key ideas by the heuristic outline"""

    fallback_summary_chars: int = 500

    @classmethod
    def from_settings(cls, settings) -> "StudioConfig":
        """Build a config carrying the retry tunables from Settings."""
        return cls(
            max_attempts_per_vendor=settings.max_attempts_per_vendor,
            retry_backoff_seconds=settings.retry_backoff_seconds,
        )

    def task_for(self, stage: str) -> TaskCategory:
        return self.stage_tasks.get(stage, TaskCategory.QUICK_RESPONSE)
