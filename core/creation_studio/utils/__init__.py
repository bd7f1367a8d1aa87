"""
Creation Studio Utilities
"""

from .json_utils import parse_json_or_fallback, parse_json_object, strip_code_fences
from .word_counter import count_words
from .context_builder import (
    character_context,
    location_context,
    item_context,
    world_context,
    project_context,
)

__all__ = [
    "parse_json_or_fallback",
    "parse_json_object",
    "strip_code_fences",
    "count_words",
    "character_context",
    "location_context",
    "item_context",
    "world_context",
    "project_context",
]
