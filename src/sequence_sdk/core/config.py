"""Configuration management for Sequence SDK."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SequenceConfig:
    """Configuration for Sequence SDK."""
    ledger_name: str
    credential: str
    api_url: str = "https://api.seq.com"
    request_timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    user_agent: str = "Sequence-Python-SDK/0.1.0"

    @property
    def ledger_url(self) -> str:
        """Base URL every ledger request path is appended to."""
        return f"{self.api_url.rstrip('/')}/{self.ledger_name}"

    @classmethod
    def from_env(cls) -> 'SequenceConfig':
        """Load configuration from environment variables."""
        return cls(
            ledger_name=os.environ.get('SEQ_LEDGER_NAME', ''),
            credential=os.environ.get('SEQ_CREDENTIAL', ''),
            api_url=os.environ.get('SEQ_API_URL', 'https://api.seq.com'),
            request_timeout=float(os.environ.get('SEQ_REQUEST_TIMEOUT', '30.0')),
            max_retries=int(os.environ.get('SEQ_MAX_RETRIES', '3')),
            retry_delay=float(os.environ.get('SEQ_RETRY_DELAY', '1.0'))
        )
