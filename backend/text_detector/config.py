"""
Configuration for the Text Detector module.

Values come from the process environment (a local .env file is loaded if
present). The remote classifier reads its credential through a
ConfigProvider so callers can swap in a fixed mapping.
"""
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

# Remote classifier (Hugging Face Inference API)
HF_API_TOKEN_ENV = 'HF_API_TOKEN'
HF_MODEL_URL = os.getenv(
    'HF_MODEL_URL',
    'https://api-inference.huggingface.co/models/Hello-SimpleAI/chatgpt-detector-roberta'
)
HF_REQUEST_TIMEOUT = float(os.getenv('HF_REQUEST_TIMEOUT', '10'))  # Seconds

# Input limits
MAX_TEXT_LENGTH = int(os.getenv('MAX_TEXT_LENGTH', '10000'))


class ConfigProvider:
    """Read-only source of configuration values."""

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        raise NotImplementedError

    def api_token(self) -> Optional[str]:
        """Remote classifier credential, or None when unset or blank."""
        token = self.get(HF_API_TOKEN_ENV)
        if token is None or not token.strip():
            return None
        return token.strip()


class EnvConfigProvider(ConfigProvider):
    """Reads from os.environ at call time."""

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return os.getenv(name, default)


class StaticConfigProvider(ConfigProvider):
    """Serves values from a fixed mapping; nothing is read from the environment."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self.values = dict(values or {})

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(name, default)
