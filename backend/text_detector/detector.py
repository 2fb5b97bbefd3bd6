"""
VisioNova Text Detector
Rule-based AI-generated text detection.

Architecture:
- Heuristic analyzers: sentence uniformity, vocabulary diversity, AI phrases,
  punctuation, paragraph structure
- Weighted fusion of sub-scores into one AI percentage
- Verdict thresholds (AI Generated / Human Written / Uncertain)

Deterministic and fully local; see remote_classifier for the hosted model path.
"""
import logging
from typing import Dict, List, Optional

from .analyzers import (
    DEFAULT_ANALYZERS,
    NEUTRAL_SCORE,
    AIPhraseAnalyzer,
    Analyzer,
    average_sentence_length,
    clamp_score,
)
from .lexical import split_paragraphs, split_sentences, split_words
from .verdict import get_verdict

logger = logging.getLogger(__name__)


class AIContentDetector:
    """
    Combines heuristic analyzers into a single AI-likelihood percentage.

    The analyzer list is ordered and each analyzer carries its own weight.
    Instances hold no per-request state, so one detector can serve
    concurrent requests.
    """

    def __init__(self, analyzers: Optional[List[Analyzer]] = None):
        """
        Args:
            analyzers: Analyzer instances to combine. Defaults to the five
                       built-in heuristics.
        """
        self.analyzers = list(analyzers) if analyzers is not None else list(DEFAULT_ANALYZERS)
        self.total_weight = sum(a.weight for a in self.analyzers)

        if self.total_weight <= 0:
            raise ValueError("Analyzer weights must sum to a positive value")

    def breakdown(self, text: str) -> Dict[str, float]:
        """Sub-score per analyzer name. Empty for blank text."""
        if not text or not text.strip():
            return {}
        return {a.name: a.score(text) for a in self.analyzers}

    def analyze(self, text: str) -> float:
        """
        AI probability for the text as a percentage (0-100).

        Blank text short-circuits to the neutral score without running the
        analyzers.
        """
        if not text or not text.strip():
            return NEUTRAL_SCORE

        scores = self.breakdown(text)
        weighted = sum(scores[a.name] * a.weight for a in self.analyzers)
        ai_score = clamp_score(weighted / self.total_weight)

        logger.debug(f"Sub-scores: {scores} -> AI={ai_score:.2f}")
        return ai_score

    def _detected_phrases(self, text: str) -> List[str]:
        for analyzer in self.analyzers:
            if isinstance(analyzer, AIPhraseAnalyzer):
                return analyzer.find_phrases(text)
        return []

    def _text_metrics(self, text: str) -> Dict:
        return {
            "char_count": len(text),
            "word_count": len(split_words(text)),
            "sentence_count": len(split_sentences(text)),
            "paragraph_count": len(split_paragraphs(text)),
            "avg_sentence_length": round(average_sentence_length(text), 1),
        }

    def predict(self, text: str) -> Dict:
        """
        Full local analysis.

        Returns:
            dict with ai_percentage, human_percentage, verdict, per-analyzer
            scores, detected phrases and basic text metrics
        """
        ai_percentage = self.analyze(text)
        verdict = get_verdict(ai_percentage)

        return {
            "ai_percentage": round(ai_percentage, 2),
            "human_percentage": round(100.0 - ai_percentage, 2),
            "verdict": verdict.value,
            "scores": self.breakdown(text),
            "detected_phrases": self._detected_phrases(text) if text else [],
            "metrics": self._text_metrics(text or ""),
            "mode": "local",
        }


_default_detector = AIContentDetector()


def analyze(text: str) -> float:
    """Score text with the default analyzer set."""
    return _default_detector.analyze(text)
