"""HTTP client for the Sequence ledger API."""

import asyncio
import logging
import uuid
from typing import Optional, Dict, Any
import aiohttp
from aiohttp import ClientTimeout, ClientError

from .core.config import SequenceConfig
from .core.exceptions import (
    ConfigurationError,
    APIError,
    NetworkError,
    TimeoutError as SDKTimeoutError,
    RateLimitError
)
from .api.actions import ActionsAPI
from .api.tokens import TokensAPI
from .transactions.api import TransactionsAPI

logger = logging.getLogger(__name__)


class Client:
    """Async client for one Sequence ledger.

    Resource APIs hang off the client (``client.transactions``,
    ``client.tokens``, ``client.actions``) and are also registered by name
    in ``client.resources``, which is how a page finds its way back to the
    method that produced it.
    """

    def __init__(self, config: SequenceConfig):
        """Initialize the ledger client.

        Args:
            config: Sequence configuration containing ledger name and credential

        Raises:
            ConfigurationError: Ledger name or credential is missing
        """
        if not config.ledger_name:
            raise ConfigurationError("ledger_name is required")
        if not config.credential:
            raise ConfigurationError("credential is required")

        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None
        self._closed = False

        self.transactions = TransactionsAPI(self)
        self.tokens = TokensAPI(self)
        self.actions = ActionsAPI(self)
        self.resources: Dict[str, Any] = {
            'transactions': self.transactions,
            'tokens': self.tokens,
            'actions': self.actions,
        }

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self.session is None or self.session.closed:
            timeout = ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    'Content-Type': 'application/json',
                    'Accept': 'application/json',
                    'Credential': self.config.credential,
                    'User-Agent': self.config.user_agent
                }
            )

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()
        self._closed = True

    async def request(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """POST a JSON body to a ledger API path with retry logic.

        The same idempotency key is sent on every attempt, so a retried
        ``/transact`` is applied at most once by the ledger.

        Args:
            path: API path, e.g. ``/list-transactions``
            body: JSON-serializable request body

        Returns:
            Decoded JSON response

        Raises:
            APIError: The ledger answered with an error
            NetworkError: Network connectivity issues
            TimeoutError: Request timed out
        """
        if self._closed:
            raise RuntimeError("Client has been closed")

        await self._ensure_session()

        url = f"{self.config.ledger_url}{path}"
        headers = {'Idempotency-Key': str(uuid.uuid4())}
        last_exception = None

        for attempt in range(self.config.max_retries + 1):
            try:
                logger.debug(f"Request attempt {attempt + 1}: {path}")

                async with self.session.post(
                    url,
                    json=body if body is not None else {},
                    headers=headers
                ) as response:

                    if response.status == 429:
                        retry_after = int(response.headers.get('Retry-After', 60))
                        raise RateLimitError(
                            "Rate limit exceeded",
                            retry_after=retry_after,
                            details={'path': path}
                        )

                    if response.status >= 400:
                        await self._raise_api_error(path, response)

                    try:
                        return await response.json()
                    except Exception as e:
                        raise APIError(
                            f"Failed to parse JSON response: {e}",
                            path=path,
                            status_code=response.status
                        )

            except (ClientError, asyncio.TimeoutError) as e:
                last_exception = e
                if attempt < self.config.max_retries:
                    delay = self.config.retry_delay * (2 ** attempt)  # Exponential backoff
                    logger.warning(f"Request to {path} failed, retrying in {delay}s: {e}")
                    await asyncio.sleep(delay)
                    continue
                break

        if isinstance(last_exception, asyncio.TimeoutError):
            raise SDKTimeoutError(
                f"Request to {path} timed out after {self.config.max_retries + 1} attempts",
                timeout_duration=self.config.request_timeout
            )
        raise NetworkError(
            f"Network error after {self.config.max_retries + 1} attempts: {last_exception}"
        )

    async def _raise_api_error(self, path: str, response) -> None:
        error_text = await response.text()
        seq_code = None
        message = error_text
        try:
            payload = await response.json(content_type=None)
        except Exception:
            payload = None
        if isinstance(payload, dict):
            seq_code = payload.get('seqCode')
            message = payload.get('message', error_text)

        raise APIError(
            f"HTTP {response.status}: {message}",
            path=path,
            status_code=response.status,
            seq_code=seq_code,
            response_data=payload if payload is not None else error_text
        )
