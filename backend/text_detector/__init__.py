"""
VisioNova Text Detector Module
Rule-based AI-generated text detection with an optional hosted-model path.
"""
from .detector import AIContentDetector, analyze
from .verdict import Verdict, get_verdict, score_to_verdict
from .remote_classifier import RemoteClassifier, analyze_with_huggingface, extract_ai_score
from .config import ConfigProvider, EnvConfigProvider, StaticConfigProvider
from .errors import ClassifierError, ConfigurationError, NetworkError, ApiError, ParseError

__all__ = [
    'AIContentDetector', 'analyze',
    'Verdict', 'get_verdict', 'score_to_verdict',
    'RemoteClassifier', 'analyze_with_huggingface', 'extract_ai_score',
    'ConfigProvider', 'EnvConfigProvider', 'StaticConfigProvider',
    'ClassifierError', 'ConfigurationError', 'NetworkError', 'ApiError', 'ParseError',
]
