"""AI client factory for the OpenAI-compatible completion gateway."""
from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from backend.settings import Settings, get_settings


logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 30.0


def _create_httpx_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """
    Create the httpx client used by the OpenAI SDK.

    Debug logging stays off so bearer headers never reach the logs.

    Args:
        timeout: Request timeout in seconds

    Returns:
        Configured httpx.Client instance
    """
    return httpx.Client(
        timeout=timeout,
        limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
    )


class AIClientFactory:
    """Factory for creating AI clients pointed at the configured gateway."""

    @staticmethod
    def create_openai_client(
        settings: Settings | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Create an OpenAI SDK client for the completion gateway.

        The client never retries: a failed call is reported to the caller
        immediately so it can degrade.

        Args:
            settings: Settings to read the gateway key and URL from
            timeout: Client timeout in seconds (defaults to ai_parser_timeout_seconds)

        Returns:
            OpenAI client instance

        Raises:
            ImportError: If openai package is not installed
            ValueError: If the gateway API key is not configured
        """
        try:
            import openai
        except ImportError as e:
            raise ImportError("OpenAI library not installed. Run: pip install openai") from e

        settings = settings or get_settings()
        api_key = settings.ai_gateway_api_key
        if not api_key:
            raise ValueError("AI gateway API key not configured. Set AI_GATEWAY_API_KEY environment variable.")

        if timeout is None:
            timeout = settings.ai_parser_timeout_seconds

        client_kwargs: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": settings.ai_gateway_base_url,
            "timeout": timeout,
            "max_retries": 0,
            "http_client": _create_httpx_client(timeout),
        }

        logger.debug(f"Creating OpenAI client for gateway {settings.ai_gateway_base_url}")
        return openai.OpenAI(**client_kwargs)
