"""Thin client for the Anthropic Messages API."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import (
    ServiceNotConfiguredError,
    UpstreamAuthError,
    UpstreamRateLimitedError,
    UpstreamServiceError,
)

LOGGER = logging.getLogger(__name__)

AUTH_FAILURE_STATUSES = {401, 403}
RATE_LIMIT_STATUS = 429


class AnthropicClient:
    """Single-attempt message creation; never retries.

    Without an injected session every call goes through ``requests.post``,
    so no cookies or connections are shared between requests.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.anthropic.com",
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 4096,
        timeout: float = 60.0,
        api_version: str = "2023-06-01",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.api_version = api_version
        self.session = session

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def create_message(self, system: str, prompt: str) -> List[Dict[str, Any]]:
        """Send one user message and return the reply's content blocks."""
        if not self.configured:
            LOGGER.error("ANTHROPIC_API_KEY not configured")
            raise ServiceNotConfiguredError()

        body = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "system": system,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
            "content-type": "application/json",
        }
        try:
            response = (self.session or requests).post(
                f"{self.base_url}/v1/messages",
                json=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            LOGGER.warning("AI service timed out after %ss: %s", self.timeout, exc)
            raise UpstreamServiceError("AI service timed out") from exc
        except requests.RequestException as exc:
            LOGGER.warning("AI service request error: %s", exc)
            raise UpstreamServiceError() from exc

        status = response.status_code
        if status in AUTH_FAILURE_STATUSES:
            LOGGER.warning("AI service rejected credentials (HTTP %s)", status)
            raise UpstreamAuthError()
        if status == RATE_LIMIT_STATUS:
            LOGGER.warning("AI service rate limited the request")
            raise UpstreamRateLimitedError()
        if status >= 400:
            message = self._error_message(response)
            LOGGER.warning("AI service returned HTTP %s: %s", status, message)
            raise UpstreamServiceError(message)

        try:
            data = response.json()
        except ValueError as exc:
            LOGGER.error("AI service returned a non-JSON body: %s", response.text[:500])
            raise UpstreamServiceError() from exc

        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list):
            return []
        return content

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return None
