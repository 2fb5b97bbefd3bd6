"""
Lexical helpers shared by the heuristic analyzers.

All functions are pure and total: degenerate input (empty text, no words)
yields empty lists or 0.0 rather than raising.
"""
import re
from typing import List, Sequence

SENTENCE_DELIMITERS = re.compile(r'[.!?]')
PARAGRAPH_SEPARATOR = "\n\n"


def split_sentences(text: str) -> List[str]:
    """
    Split text on '.', '!' and '?'.

    Fragments are kept unstripped so their length includes the surrounding
    whitespace; whitespace-only fragments are dropped.
    """
    return [s for s in SENTENCE_DELIMITERS.split(text) if s.strip()]


def split_words(text: str) -> List[str]:
    return text.split()


def split_paragraphs(text: str) -> List[str]:
    """Split on blank lines (a literal double newline), dropping empty blocks."""
    return [p for p in text.split(PARAGRAPH_SEPARATOR) if p.strip()]


def normalize_word(word: str) -> str:
    """Lowercase and trim leading/trailing non-alphanumeric characters."""
    word = word.lower()
    start, end = 0, len(word)
    while start < end and not word[start].isalnum():
        start += 1
    while end > start and not word[end - 1].isalnum():
        end -= 1
    return word[start:end]


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_variance(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    avg = mean(values)
    return sum((v - avg) ** 2 for v in values) / len(values)
