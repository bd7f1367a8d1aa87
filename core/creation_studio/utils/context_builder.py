"""
Prompt context builders for the world roster (characters, locations, items).
"""

from typing import List, Optional

from ..models import Blueprint, BlockSummary, CharacterProfile, Location, Item


def character_context(characters: List[CharacterProfile]) -> str:
    if not characters:
        return ""
    lines = [
        f"- {c.name} ({c.role}): {c.description} [Traits: {', '.join(c.traits)}]"
        for c in characters
    ]
    return "\n\nCHARACTERS IN STORY:\n" + "\n".join(lines)


def location_context(locations: List[Location]) -> str:
    if not locations:
        return ""
    lines = [
        f"- {loc.name}: {loc.description} [Sensory: {loc.sensory_details}]"
        for loc in locations
    ]
    return "\n\nKEY LOCATIONS:\n" + "\n".join(lines)


def item_context(items: List[Item]) -> str:
    if not items:
        return ""
    lines = [f"- {i.name}: {i.description} [Usage: {i.usage}]" for i in items]
    return "\n\nIMPORTANT ITEMS:\n" + "\n".join(lines)


def world_context(blueprint: Optional[Blueprint]) -> str:
    """Locations + items; the consistency checker validates against this."""
    if blueprint is None:
        return ""
    return location_context(blueprint.locations) + item_context(blueprint.items)


def project_context(blocks: List[BlockSummary], excerpt_chars: int = 50) -> str:
    """One line per existing block: ``[type] first N chars...``"""
    return "\n".join(
        f"[{b.type.value}] {b.content[:excerpt_chars]}..." for b in blocks
    )
