"""
HTTP client for a running blueprint service. Uses requests with
explicit success/failure, retries on transient errors, and error context.
"""
import json
import logging
import time
from typing import Any

import requests

logger = logging.getLogger(__name__)

_API_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "vfx-blueprint-client/1.0",
}

# Retry config: only retry on transient failures
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_SECONDS = 2.0


class APIError(Exception):
    """API call failed with status or invalid response."""
    def __init__(self, message: str, status_code: int | None = None, path: str = "", body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.path = path
        self.body = body


def _parse_json_response(resp: requests.Response) -> dict:
    """Parse JSON body; raise APIError with context if invalid."""
    if not resp.content:
        return {}
    try:
        return resp.json()
    except json.JSONDecodeError as e:
        raise APIError(
            f"Invalid JSON response: {e}",
            status_code=resp.status_code,
            path=resp.url or "",
            body=resp.text[:500] if resp.text else None,
        ) from e


def _error_message(resp: requests.Response | None) -> str | None:
    """The service's {"error": ...} message, if the body carries one."""
    if resp is None or not resp.content:
        return None
    try:
        data = resp.json()
    except ValueError:
        return None
    return data.get("error") if isinstance(data, dict) else None


def api_request(
    api_base: str,
    method: str,
    path: str,
    data: dict | None = None,
    timeout: int = 30,
    max_retries: int = 0,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
) -> dict:
    """
    Execute API request. Raises APIError on failure with context.
    If max_retries > 0, retries on 408, 429, 5xx and connection errors only.
    """
    url = f"{api_base.rstrip('/')}{path}"
    headers = dict(_API_HEADERS)
    body = None
    if isinstance(data, dict):
        body = json.dumps(data).encode("utf-8")
        headers["Content-Type"] = "application/json"

    attempts = max(1, max_retries + 1)
    for attempt in range(attempts):
        is_last = attempt == attempts - 1
        try:
            resp = requests.request(method, url, data=body, headers=headers, timeout=timeout)
            resp.raise_for_status()
            return _parse_json_response(resp)
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            headers_in = e.response.headers if e.response is not None else {}
            delay = None if is_last else retry_delay(status, headers_in, attempt, backoff_seconds)
            if delay is None:
                err_body = e.response.text[:500] if e.response is not None and e.response.text else None
                msg = _error_message(e.response) or f"API {method} {path} failed: {e}"
                raise APIError(msg, status_code=status, path=path, body=err_body) from e
            logger.warning("API %s %s → %s (attempt %s), retrying in %.1fs", method, path, status, attempt + 1, delay)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            if is_last:
                raise APIError(f"API {method} {path} failed: {e}", path=path) from e
            delay = backoff_seconds
            logger.warning("API %s %s connection/timeout (attempt %s), retrying in %.1fs", method, path, attempt + 1, delay)
        time.sleep(delay)
    raise APIError(f"API {method} {path} failed", path=path)


def retry_delay(status: int | None, headers: Any, attempt: int, backoff_seconds: float) -> float | None:
    """
    Seconds to wait before retrying a failed response, or None when retrying cannot help.
    The service answers 400/404/413/422 for the request itself, so only 408, 429 and 5xx retry.
    429 honours Retry-After, otherwise backs off linearly per attempt.
    """
    if status is None:
        return None
    if status == 429:
        try:
            return float(headers["Retry-After"])
        except (KeyError, TypeError, ValueError):
            return backoff_seconds + attempt * 2.0
    if status == 408 or 500 <= status < 600:
        return backoff_seconds
    return None


def request_plan(
    api_base: str,
    details: str,
    *,
    timeout: int = 30,
    max_retries: int = DEFAULT_MAX_RETRIES,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
) -> dict[str, Any]:
    """POST a scene description; return the plan dict. A 422 (too short) is not retried."""
    result = api_request(
        api_base, "POST", "/api/plan",
        data={"details": details}, timeout=timeout,
        max_retries=max_retries, backoff_seconds=backoff_seconds,
    )
    if "plan" not in result:
        raise APIError("Response missing 'plan'", path="/api/plan", body=json.dumps(result)[:500])
    return result["plan"]


def fetch_stages(api_base: str, timeout: int = 10) -> list[str]:
    return api_request(api_base, "GET", "/api/stages", timeout=timeout).get("stages", [])
