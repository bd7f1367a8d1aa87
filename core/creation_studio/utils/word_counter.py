"""
Word counting utilities.
"""


def count_words(text: str) -> int:
    """Count whitespace-separated words, 0 for empty text."""
    if not text:
        return 0
    return len(text.split())
