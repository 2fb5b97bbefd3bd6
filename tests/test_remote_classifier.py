"""
Test Suite for the remote classifier adapter
HTTP is faked with httpx.MockTransport; no network access is needed
"""

import asyncio
import json
import pytest
import sys
from pathlib import Path

import httpx

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'backend'))

from text_detector import remote_classifier
from text_detector.config import StaticConfigProvider
from text_detector.errors import ApiError, ConfigurationError, NetworkError, ParseError
from text_detector.remote_classifier import (
    ExactLabelMatcher,
    LabelScore,
    RemoteClassifier,
    analyze_with_huggingface,
    extract_ai_score,
    parse_label_scores,
)

MODEL_URL = "https://inference.example.test/models/detector"


def entries(*pairs):
    return [LabelScore(label, score) for label, score in pairs]


class FakeInferenceAPI:
    """Records requests and answers them with a fixed handler"""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.handler(request)

    def classify(self, text="Some text to check", token="test-token", **kwargs):
        config = StaticConfigProvider({"HF_API_TOKEN": token} if token is not None else {})

        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(self)) as client:
                classifier = RemoteClassifier(config=config, client=client, model_url=MODEL_URL, **kwargs)
                return await classifier.analyze_remote(text)

        return asyncio.run(run())


def respond_json(payload, status=200):
    return lambda request: httpx.Response(status, json=payload)


class TestExtractAIScore:
    """Ordered label matching"""

    def test_keyword_label(self):
        assert extract_ai_score(entries(("Real", 0.85), ("Fake", 0.15))) == 0.15

    def test_chatgpt_label(self):
        assert extract_ai_score(entries(("Human", 0.1), ("ChatGPT", 0.9))) == 0.9

    def test_label_1_fallback(self):
        assert extract_ai_score(entries(("LABEL_0", 0.3), ("LABEL_1", 0.7))) == 0.7

    def test_keyword_wins_over_label_1(self):
        assert extract_ai_score(entries(("LABEL_1", 0.2), ("AI", 0.8))) == 0.8

    def test_higher_of_first_two(self):
        assert extract_ai_score(entries(("POSITIVE", 0.3), ("NEGATIVE", 0.7))) == 0.7
        assert extract_ai_score(entries(("POSITIVE", 0.6), ("NEGATIVE", 0.4))) == 0.6

    def test_only_first_two_entries_considered(self):
        assert extract_ai_score(entries(("POS", 0.2), ("NEG", 0.3), ("OTHER", 0.9))) == 0.3

    def test_tie_returns_shared_value(self):
        assert extract_ai_score(entries(("X", 0.5), ("Y", 0.5))) == 0.5

    def test_single_unmatched_entry_fails(self):
        with pytest.raises(ParseError, match="could not determine AI score"):
            extract_ai_score(entries(("Human", 0.9)))

    def test_custom_matchers(self):
        result = extract_ai_score(
            entries(("Human", 0.4), ("Machine", 0.6)),
            matchers=[ExactLabelMatcher("Machine")]
        )
        assert result == 0.6


class TestParseLabelScores:
    """Response shape validation"""

    def test_nested_list(self):
        parsed = parse_label_scores([[{"label": "Real", "score": 0.85}, {"label": "Fake", "score": 0.15}]])
        assert parsed == entries(("Real", 0.85), ("Fake", 0.15))

    @pytest.mark.parametrize("payload", [[], [[]]])
    def test_empty(self, payload):
        with pytest.raises(ParseError, match="Empty response"):
            parse_label_scores(payload)

    @pytest.mark.parametrize("payload", [
        {"error": "Model is loading"},
        [{"label": "Fake", "score": 0.2}],
        [["Fake"]],
        [[{"label": "Fake"}]],
        [[{"label": "Fake", "score": "high"}]],
        [[{"label": "Fake", "score": 3.0}]],
        [[{"label": "Fake", "score": -0.1}]],
        [[{"label": "Fake", "score": float("nan")}]],
        [[{"label": "Fake", "score": float("inf")}]],
    ])
    def test_malformed(self, payload):
        with pytest.raises(ParseError):
            parse_label_scores(payload)


class TestRemoteClassifier:
    """End-to-end adapter behaviour against a fake endpoint"""

    def test_returns_percentage(self):
        api = FakeInferenceAPI(respond_json([[{"label": "Human", "score": 0.1}, {"label": "ChatGPT", "score": 0.9}]]))
        assert api.classify() == pytest.approx(90.0)

    def test_request_format(self):
        api = FakeInferenceAPI(respond_json([[{"label": "LABEL_0", "score": 0.3}, {"label": "LABEL_1", "score": 0.7}]]))
        api.classify(text="Check me")

        assert len(api.requests) == 1
        sent = api.requests[0]
        assert sent.method == "POST"
        assert str(sent.url) == MODEL_URL
        assert sent.headers["Authorization"] == "Bearer test-token"
        assert sent.headers["Content-Type"] == "application/json"
        assert json.loads(sent.content) == {"inputs": "Check me"}

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token_fails_before_request(self, token):
        api = FakeInferenceAPI(respond_json([[{"label": "Fake", "score": 0.5}]]))

        with pytest.raises(ConfigurationError, match="HF_API_TOKEN"):
            api.classify(token=token)
        assert api.requests == []

    def test_module_helper_without_token_never_builds_a_client(self, monkeypatch):
        def no_client(*args, **kwargs):
            raise AssertionError("network client should not be created")

        monkeypatch.setattr(remote_classifier.httpx, "AsyncClient", no_client)

        with pytest.raises(ConfigurationError):
            asyncio.run(analyze_with_huggingface("text", config=StaticConfigProvider({})))

    def test_non_success_status_carries_body(self):
        api = FakeInferenceAPI(lambda request: httpx.Response(503, text="Model is currently loading"))

        with pytest.raises(ApiError) as exc_info:
            api.classify()

        assert exc_info.value.status_code == 503
        assert exc_info.value.body == "Model is currently loading"
        assert "Model is currently loading" in str(exc_info.value)
        assert str(exc_info.value).startswith("API Error:")

    def test_connection_failure(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError) as exc_info:
            FakeInferenceAPI(fail).classify()
        assert exc_info.value.retryable

    def test_timeout(self):
        def slow(request):
            raise httpx.ReadTimeout("read timed out", request=request)

        with pytest.raises(NetworkError, match="timed out"):
            FakeInferenceAPI(slow).classify(timeout=2.0)

    def test_invalid_json(self):
        api = FakeInferenceAPI(lambda request: httpx.Response(200, text="<html>busy</html>"))

        with pytest.raises(ParseError):
            api.classify()

    def test_unrecognised_labels(self, caplog):
        api = FakeInferenceAPI(respond_json([[{"label": "Human", "score": 0.97}]]))

        with pytest.raises(ParseError, match="could not determine AI score"):
            api.classify()
        assert any(r.levelname == "ERROR" for r in caplog.records)

    def test_errors_are_not_retried(self):
        api = FakeInferenceAPI(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ApiError):
            api.classify()
        assert len(api.requests) == 1

    def test_bad_content_encoding(self):
        api = FakeInferenceAPI(lambda request: httpx.Response(
            200, headers={"Content-Encoding": "gzip"}, content=b"not gzip"
        ))

        with pytest.raises(NetworkError):
            api.classify()

    def test_confidence_above_one(self):
        api = FakeInferenceAPI(respond_json([[{"label": "Fake", "score": 3.0}, {"label": "Real", "score": 0.1}]]))

        with pytest.raises(ParseError, match="out of range"):
            api.classify()

    def test_nan_confidence(self):
        body = b'[[{"label": "Fake", "score": NaN}, {"label": "Real", "score": 0.5}]]'
        api = FakeInferenceAPI(lambda request: httpx.Response(
            200, headers={"Content-Type": "application/json"}, content=body
        ))

        with pytest.raises(ParseError, match="out of range"):
            api.classify()

    def test_boundary_confidences_accepted(self):
        api = FakeInferenceAPI(respond_json([[{"label": "Fake", "score": 1}, {"label": "Real", "score": 0}]]))
        assert api.classify() == pytest.approx(100.0)
