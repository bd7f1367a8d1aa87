"""
Synthesizer Agent Prompts
"""

SYNTHESIS_PROMPT = """You are an expert content synthesizer. Analyze all the provided inputs and extract:

1. THEMES: Main recurring themes across all inputs
2. KEY IDEAS: Important concepts, points, or story elements
3. STRUCTURE: An optimal chapter/section structure
4. CHARACTERS: Main characters, extracted or inferred (protagonist, antagonist, etc.)
5. LOCATIONS: Key settings and places
6. ITEMS: Significant objects and artifacts
7. GUIDELINES: Any specific instructions or style preferences found
8. SUMMARY: A unified context summary that captures the essence

Input Materials:
[See attached content]

OUTPUT FORMAT (JSON):
{
  "themes": ["theme1", "theme2"],
  "keyIdeas": ["idea1", "idea2"],
  "suggestedStructure": {
    "title": "Suggested book title",
    "chapters": [
      { "number": 1, "title": "Chapter title", "summary": "Brief description", "keyPoints": ["point1"] }
    ],
    "estimatedWordCount": 50000,
    "genre": "detected genre",
    "tone": "detected tone"
  },
  "characters": [
    { "name": "Name", "role": "Protagonist/Antagonist/Supporting", "description": "Brief bio", "traits": ["brave", "cynical"] }
  ],
  "locations": [
    { "name": "Place Name", "description": "Visual desc", "sensoryDetails": "Sights/Smells" }
  ],
  "items": [
    { "name": "Item Name", "description": "Physical desc", "usage": "significance" }
  ],
  "guidelines": ["guideline1", "guideline2"],
  "contextSummary": "A comprehensive summary of all inputs that can be used as context for AI agents..."
}

Return ONLY valid JSON. Be thorough in your analysis."""

# Section headers
BINARY_INPUT_HEADER = "\n\n--- Input ({kind}): {name} ---\n"
TEXT_INPUT_HEADER = "\n\n--- Input {name} ---\n"

# Type tags
DOCUMENT_TAG = "[DOCUMENT: {name}]\n"
URL_TAG = "[URL: {url}]\nTitle: {title}\nContent: "
GUIDELINE_TAG = "[GUIDELINE]\n"
NOTE_TAG = "[NOTE]\n"
GENERIC_TAG = "[{type}]\n"

# Heuristic outline used when synthesis cannot be parsed
FALLBACK_SUMMARY = "Synthesis failed. Using raw inputs."
FALLBACK_THEME = "Unable to fully synthesize - using basic extraction"
FALLBACK_CHAPTERS = [
    {"number": 1, "title": "Introduction", "summary": "Begin the story", "keyPoints": ["Setup"]},
    {"number": 2, "title": "Development", "summary": "Build the narrative", "keyPoints": ["Action"]},
    {"number": 3, "title": "Conclusion", "summary": "Resolve the story", "keyPoints": ["Resolution"]},
]
