"""
Tolerant JSON parsing for model output.

Models wrap JSON in markdown fences, prepend chatter, or return nothing at
all. Every stage that expects structured output goes through
``parse_json_or_fallback`` so a parse error never escapes to the caller.
"""

import copy
import json
import logging
import re
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FENCE_OPEN = re.compile(r"^\s*```(?:json|JSON)?\s*")
_FENCE_CLOSE = re.compile(r"\s*```\s*$")
_FENCE_LANG = re.compile(r"^(?:json|JSON)\s*")


def strip_code_fences(text: str) -> str:
    """Remove a leading ```json / ``` fence and a trailing ``` fence."""
    cleaned = _FENCE_OPEN.sub("", text, count=1)
    cleaned = _FENCE_CLOSE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_json_or_fallback(text: Any, fallback: T) -> Any:
    """
    Parse model output as JSON, or return ``fallback``.

    Args:
        text: Raw model output (possibly fenced)
        fallback: Value returned when the text is empty or not valid JSON.
            A deep copy is returned so callers may mutate it.

    Returns:
        The parsed structure, or a copy of ``fallback``
    """
    if not text or not isinstance(text, str):
        return copy.deepcopy(fallback)

    try:
        return json.loads(strip_code_fences(text))
    except ValueError as e:
        error = e

    # Chatter around a fenced block
    if "```" in text:
        block = text.split("```", 1)[1].split("```", 1)[0]
        try:
            return json.loads(_FENCE_LANG.sub("", block, count=1).strip())
        except ValueError:
            pass

    logger.warning(f"JSON parse failed ({error}); raw text: {text[:200]!r}")
    return copy.deepcopy(fallback)


def parse_json_object(text: Any, fallback: dict) -> dict:
    """Like ``parse_json_or_fallback`` but also rejects non-object JSON."""
    data = parse_json_or_fallback(text, fallback)
    if not isinstance(data, dict):
        logger.warning(f"Expected a JSON object, got {type(data).__name__}")
        return copy.deepcopy(fallback)
    return data
