"""Utility for logging provider requests when EFA_LOG_REQUESTS is enabled."""

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via EFA_LOG_REQUESTS environment variable."""
    return os.getenv("EFA_LOG_REQUESTS", "").lower() == "true"


def build_url_with_params(url: str, params: Mapping[str, Any] | None) -> str:
    """Build full URL with query parameters in sorted order."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(method: str, url: str, params: Mapping[str, Any] | None = None) -> None:
    """Log a provider request if EFA_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        params: Query parameters (optional).
    """
    if not should_log_requests():
        return

    logger.info(f"API Request: {method} {build_url_with_params(url, params)}")


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log a provider response summary if EFA_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    logger.info(f"API Response: {status} from {url} in {elapsed_seconds:.3f}s")
