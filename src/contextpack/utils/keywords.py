"""Lexical keyword extraction shared by indexing and querying."""

import re

# Tokens shorter than 4 characters never become keywords, so the 3-letter
# entries only matter if MIN_KEYWORD_LENGTH is lowered.
STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "its", "may", "new", "now", "old", "see", "two", "way", "who",
    "this", "that", "with", "have", "from", "they", "know", "want", "been",
    "good", "much", "some", "time", "very", "when", "come", "here", "just",
    "like", "long", "make", "many", "over", "such", "take", "than", "them",
    "well", "were",
})

MIN_KEYWORD_LENGTH = 4

_WORD_RE = re.compile(r"\b[a-z]{3,}\b", re.ASCII)


def extract_keywords(text: str) -> tuple[str, ...]:
    """Return the distinct keywords of ``text`` in first-seen order.

    Keywords are lowercase ASCII alphabetic tokens of at least
    MIN_KEYWORD_LENGTH characters that are not stop words.
    """
    keywords: list[str] = []
    seen: set[str] = set()
    for word in _WORD_RE.findall(text.lower()):
        if len(word) < MIN_KEYWORD_LENGTH or word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
    return tuple(keywords)
