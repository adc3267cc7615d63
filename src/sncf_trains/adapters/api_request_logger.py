"""Opt-in debug logging of the requests sent to the SNCF API.

Turned on with SNCF_LOG_REQUESTS=true. The API key travels as HTTP basic
auth and is never written out; only the fact that a request was
authenticated is logged.
"""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV_VAR = "SNCF_LOG_REQUESTS"
REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Return True when SNCF_LOG_REQUESTS is set to 'true' (any case)."""
    return os.getenv(LOG_REQUESTS_ENV_VAR, "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Render a coverage URL with its query, keys sorted so log lines compare easily."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    return {k: REDACTED if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    authenticated: bool = False,
) -> None:
    """Log one SNCF API request when request logging is on.

    Args:
        method: HTTP method, GET for every SNCF endpoint used here.
        url: Coverage URL (places, journeys or vehicle_journeys/<id>).
        params: Query parameters such as q, from, to, datetime, count.
        headers: Extra request headers; credential headers are redacted.
        authenticated: Whether the API key is attached as basic auth.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]

    if authenticated:
        log_parts.append(f"Auth: basic, API key {REDACTED}")

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("SNCF API request:\n" + "\n".join(log_parts))
