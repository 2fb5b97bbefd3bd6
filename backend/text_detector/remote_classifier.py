"""
VisioNova Remote Text Classifier
Hugging Face Inference API adapter for AI text detection.

Sends text to a hosted classifier (Hello-SimpleAI/chatgpt-detector-roberta by
default) and reduces its label/score list to one AI probability on the same
0-100 scale as the local detector.

Response shape (single input):
    [[{"label": "Human", "score": 0.1}, {"label": "ChatGPT", "score": 0.9}]]

Label vocabularies differ between hosted model revisions, so the AI score is
picked by an ordered list of matchers; the first one that returns a value wins.
Support for a new provider is added by appending a matcher.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import httpx

from .config import HF_API_TOKEN_ENV, HF_MODEL_URL, HF_REQUEST_TIMEOUT, ConfigProvider, EnvConfigProvider
from .errors import ApiError, ClassifierError, ConfigurationError, NetworkError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelScore:
    """One class prediction from the remote model."""
    label: str
    score: float


def parse_label_scores(payload: Any) -> List[LabelScore]:
    """
    Validate the nested list-of-lists response and return the entries for the
    first (only) input.

    Raises:
        ParseError: payload is empty, not shaped like [[{label, score}, ...]],
            or a confidence is not a finite number in [0, 1]
    """
    if not isinstance(payload, list):
        raise ParseError(f"Unexpected response type: {type(payload).__name__}")
    if not payload or not isinstance(payload[0], list) or not payload[0]:
        raise ParseError("Empty response from API")

    entries = []
    for item in payload[0]:
        if not isinstance(item, dict):
            raise ParseError(f"Unexpected entry in response: {item!r}")
        label = item.get('label')
        score = item.get('score')
        if not isinstance(label, str) or isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ParseError(f"Entry missing label/score: {item!r}")
        score = float(score)
        if not math.isfinite(score) or not 0.0 <= score <= 1.0:
            raise ParseError(f"Confidence out of range [0, 1]: {item!r}")
        entries.append(LabelScore(label=label, score=score))
    return entries


# ==================== LABEL MATCHERS ====================

class LabelMatcher:
    """Strategy that tries to pick the AI probability out of the entries."""

    def match(self, entries: Sequence[LabelScore]) -> Optional[float]:
        raise NotImplementedError


class KeywordLabelMatcher(LabelMatcher):
    """First entry whose lowercased label contains any keyword."""

    def __init__(self, keywords: Sequence[str] = ("chatgpt", "ai", "fake")):
        self.keywords = tuple(k.lower() for k in keywords)

    def match(self, entries: Sequence[LabelScore]) -> Optional[float]:
        for entry in entries:
            label = entry.label.lower()
            if any(k in label for k in self.keywords):
                return entry.score
        return None


class ExactLabelMatcher(LabelMatcher):
    """Entry whose label equals a fixed id, e.g. LABEL_1 for generic heads."""

    def __init__(self, label: str = "LABEL_1"):
        self.label = label

    def match(self, entries: Sequence[LabelScore]) -> Optional[float]:
        for entry in entries:
            if entry.label == self.label:
                return entry.score
        return None


class HigherOfFirstTwoMatcher(LabelMatcher):
    """Higher-confidence of the first two entries; ties go to the first."""

    def match(self, entries: Sequence[LabelScore]) -> Optional[float]:
        if len(entries) < 2:
            return None
        first, second = entries[0], entries[1]
        return first.score if first.score >= second.score else second.score


DEFAULT_MATCHERS: List[LabelMatcher] = [
    KeywordLabelMatcher(),
    ExactLabelMatcher("LABEL_1"),
    HigherOfFirstTwoMatcher(),
]


def extract_ai_score(entries: Sequence[LabelScore],
                     matchers: Optional[Sequence[LabelMatcher]] = None) -> float:
    """
    AI probability (0-1) from the model's label/score entries.

    Raises:
        ParseError: no matcher recognised the entries
    """
    for matcher in (matchers if matchers is not None else DEFAULT_MATCHERS):
        score = matcher.match(entries)
        if score is not None:
            return score
    raise ParseError("could not determine AI score from response")


# ==================== CLIENT ====================

class RemoteClassifier:
    """
    Async client for the hosted AI text classifier.

    One POST per call, no retries. Errors are raised as ClassifierError
    subclasses; falling back to the local detector is the caller's decision.
    """

    def __init__(self, config: Optional[ConfigProvider] = None,
                 client: Optional[httpx.AsyncClient] = None,
                 model_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 matchers: Optional[Sequence[LabelMatcher]] = None):
        """
        Args:
            config: Source of the API token. Defaults to the process environment.
            client: Shared AsyncClient to reuse. Not closed by this class.
                    When omitted, a short-lived client is opened per call.
            model_url: Inference endpoint. Defaults to HF_MODEL_URL.
            timeout: Request timeout in seconds. Defaults to HF_REQUEST_TIMEOUT.
            matchers: Label matchers, tried in order.
        """
        self.config = config or EnvConfigProvider()
        self.client = client
        self.model_url = model_url or HF_MODEL_URL
        self.timeout = timeout if timeout is not None else HF_REQUEST_TIMEOUT
        self.matchers = list(matchers) if matchers is not None else list(DEFAULT_MATCHERS)

    async def analyze_remote(self, text: str) -> float:
        """
        AI probability for the text as a percentage (0-100).

        Raises:
            ConfigurationError: no API token configured (nothing is sent)
            NetworkError: transport failure, timeout or undecodable body
            ApiError: non-2xx status
            ParseError: body is not valid JSON or has no recognisable AI score
        """
        api_token = self.config.api_token()
        if api_token is None:
            raise ConfigurationError(f"{HF_API_TOKEN_ENV} not set in environment")

        try:
            if self.client is not None:
                ai_score = await self._classify(self.client, api_token, text)
            else:
                async with httpx.AsyncClient() as client:
                    ai_score = await self._classify(client, api_token, text)
        except ParseError as e:
            logger.error(f"Remote classifier response not understood ({self.model_url}): {e}")
            raise
        except ClassifierError as e:
            logger.warning(f"Remote classifier failed: {e}")
            raise

        return ai_score * 100.0

    async def _classify(self, client: httpx.AsyncClient, api_token: str, text: str) -> float:
        headers = {
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json"
        }

        try:
            response = await client.post(
                self.model_url,
                headers=headers,
                json={"inputs": text},
                timeout=self.timeout
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timed out after {self.timeout}s: {e}") from e
        except httpx.RequestError as e:
            # DecodingError and TooManyRedirects are not TransportErrors
            raise NetworkError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            error_text = response.text
            raise ApiError(
                f"API returned error ({response.status_code}): {error_text}",
                status_code=response.status_code,
                body=error_text
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON in response: {e}") from e

        entries = parse_label_scores(payload)
        logger.debug(f"Remote classifier entries: {entries}")
        return extract_ai_score(entries, self.matchers)


async def analyze_with_huggingface(text: str, config: Optional[ConfigProvider] = None) -> float:
    """Score text with the default hosted model. See RemoteClassifier.analyze_remote."""
    return await RemoteClassifier(config=config).analyze_remote(text)
