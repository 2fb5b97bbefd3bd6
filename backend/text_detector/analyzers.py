"""
Heuristic analyzers for AI-generated text.

Each analyzer looks at one property of the raw text and returns a sub-score
in [0, 100] (higher = more AI-like). Analyzers share no state and fall back to
NEUTRAL_SCORE when the text is too sparse to judge.

Weights (sum to 1.0):
- sentence_uniformity: 0.25
- vocabulary_diversity: 0.20
- ai_phrases: 0.30
- punctuation: 0.15
- structure: 0.10
"""
from typing import Dict, List, Optional

from .lexical import (
    mean,
    normalize_word,
    population_variance,
    split_paragraphs,
    split_sentences,
    split_words,
)

NEUTRAL_SCORE = 50.0

# Phrases strongly associated with LLM output. Kept verbatim so scores stay
# comparable across releases.
AI_PHRASES = [
    "as an ai",
    "i don't have personal",
    "i cannot",
    "i'm sorry, but",
    "it's important to note",
    "it is worth noting",
    "furthermore",
    "in conclusion",
    "to summarize",
    "delve into",
    "multifaceted",
    "paradigm shift",
    "cutting-edge",
    "state-of-the-art",
    "best practices",
    "leverage",
    "utilize",
    "facilitate",
    "comprehensive understanding",
]


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


class Analyzer:
    """
    Base class for a single heuristic.

    Subclasses set `name` and `weight` and implement `score(text)`.
    """

    name = "analyzer"
    weight = 0.0

    def score(self, text: str) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, weight={self.weight})"


class SentenceUniformityAnalyzer(Analyzer):
    """
    Sentence length uniformity.

    LLMs tend to produce sentences of similar length; human writing varies
    more. Uses the population variance of per-sentence character lengths.
    """

    name = "sentence_uniformity"
    weight = 0.25

    MIN_SENTENCES = 3
    UNIFORM_VARIANCE = 200.0
    MODERATE_VARIANCE = 500.0

    def score(self, text: str) -> float:
        sentences = split_sentences(text)
        if len(sentences) < self.MIN_SENTENCES:
            return NEUTRAL_SCORE

        variance = population_variance([len(s) for s in sentences])

        if variance < self.UNIFORM_VARIANCE:
            return 70.0
        if variance < self.MODERATE_VARIANCE:
            return 40.0
        return 20.0


class VocabularyDiversityAnalyzer(Analyzer):
    """
    Vocabulary diversity (distinct normalized words / total words).

    Repetitive vocabulary reads as AI-like, a rich vocabulary as human.
    """

    name = "vocabulary_diversity"
    weight = 0.20

    MIN_WORDS = 10
    HIGH_DIVERSITY = 0.7
    MEDIUM_DIVERSITY = 0.5

    def diversity_ratio(self, text: str) -> float:
        words = split_words(text)
        if not words:
            return 0.0
        distinct = {w for w in (normalize_word(word) for word in words) if w}
        # Denominator is the raw token count, including tokens that normalize to nothing
        return len(distinct) / len(words)

    def score(self, text: str) -> float:
        if len(split_words(text)) < self.MIN_WORDS:
            return NEUTRAL_SCORE

        ratio = self.diversity_ratio(text)

        if ratio > self.HIGH_DIVERSITY:
            return 20.0
        if ratio > self.MEDIUM_DIVERSITY:
            return 40.0
        return 70.0


class AIPhraseAnalyzer(Analyzer):
    """Case-insensitive search for stock LLM phrases. Dominant factor."""

    name = "ai_phrases"
    weight = 0.30

    def __init__(self, phrases: Optional[List[str]] = None):
        self.phrases = list(phrases) if phrases is not None else list(AI_PHRASES)

    def find_phrases(self, text: str) -> List[str]:
        """Distinct phrases present in the text, in list order."""
        text_lower = text.lower()
        return [phrase for phrase in self.phrases if phrase in text_lower]

    def score(self, text: str) -> float:
        matches = len(self.find_phrases(text))

        if matches >= 3:
            return 85.0
        if matches == 2:
            return 70.0
        if matches == 1:
            return 55.0
        return 30.0


class PunctuationAnalyzer(Analyzer):
    """
    Punctuation density.

    Few exclamation marks (formal tone) and a moderate comma density both
    push the score up from the neutral base.
    """

    name = "punctuation"
    weight = 0.15

    SPARSE_EXCLAMATION = 0.5
    COMMA_BAND = (2.0, 4.0)

    def ratios(self, text: str) -> Dict[str, float]:
        """Per-mark counts as a percentage of total characters."""
        total_chars = len(text)
        if total_chars == 0:
            return {"exclamation": 0.0, "question": 0.0, "comma": 0.0}
        return {
            "exclamation": text.count("!") / total_chars * 100,
            # Reported only; not part of the score
            "question": text.count("?") / total_chars * 100,
            "comma": text.count(",") / total_chars * 100,
        }

    def score(self, text: str) -> float:
        if len(text) == 0:
            return NEUTRAL_SCORE

        ratios = self.ratios(text)
        score = NEUTRAL_SCORE

        if ratios["exclamation"] < self.SPARSE_EXCLAMATION:
            score += 15.0

        low, high = self.COMMA_BAND
        if low < ratios["comma"] < high:
            score += 10.0

        return clamp_score(score)


class StructureAnalyzer(Analyzer):
    """
    Paragraph structure.

    Several paragraphs of 51-149 words each look like generated prose.
    Words per paragraph uses floor division; switching to true division
    moves the boundaries.
    """

    name = "structure"
    weight = 0.10

    MIN_WORDS_PER_PARAGRAPH = 50
    MAX_WORDS_PER_PARAGRAPH = 150

    def score(self, text: str) -> float:
        word_count = len(split_words(text))
        paragraph_count = len(split_paragraphs(text))

        if paragraph_count > 1:
            words_per_paragraph = word_count // paragraph_count
            if self.MIN_WORDS_PER_PARAGRAPH < words_per_paragraph < self.MAX_WORDS_PER_PARAGRAPH:
                return 60.0
        return 40.0


def build_default_analyzers() -> List[Analyzer]:
    return [
        SentenceUniformityAnalyzer(),
        VocabularyDiversityAnalyzer(),
        AIPhraseAnalyzer(),
        PunctuationAnalyzer(),
        StructureAnalyzer(),
    ]


DEFAULT_ANALYZERS = build_default_analyzers()


def uniformity_score(text: str) -> float:
    return DEFAULT_ANALYZERS[0].score(text)


def diversity_score(text: str) -> float:
    return DEFAULT_ANALYZERS[1].score(text)


def phrase_score(text: str) -> float:
    return DEFAULT_ANALYZERS[2].score(text)


def punctuation_score(text: str) -> float:
    return DEFAULT_ANALYZERS[3].score(text)


def structure_score(text: str) -> float:
    return DEFAULT_ANALYZERS[4].score(text)


def average_sentence_length(text: str) -> float:
    """Mean sentence length in characters (0.0 when there are no sentences)."""
    return mean([len(s) for s in split_sentences(text)])
