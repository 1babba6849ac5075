"""Client for the Gemini generateContent REST endpoint."""

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import ConfigurationError, UnexpectedResponseError, UpstreamHTTPError

logger = logging.getLogger(__name__)
_SESSION = requests.Session()


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def _error_message(response: requests.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"].strip():
        return error["message"].strip()
    return None


def completion_text(payload: Any) -> str:
    """
    Read candidates[0].content.parts[0].text from a generateContent reply.
    Raises UnexpectedResponseError if any step of that path is missing.
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise UnexpectedResponseError() from None
    if not isinstance(text, str) or not text:
        raise UnexpectedResponseError()
    return text


def generate_content(
    prompt: str,
    api_key: str,
    model: str,
    api_url: str,
    timeout_s: float = 60.0,
) -> str:
    """POST a single prompt and return the model's completion text."""
    if not api_key:
        raise ConfigurationError()

    url = f"{api_url.rstrip('/')}/models/{model}:generateContent"
    try:
        response = _SESSION.post(
            url,
            json=build_request_body(prompt),
            headers={"Content-Type": "application/json", "x-goog-api-key": api_key},
            timeout=timeout_s,
        )
    except requests.RequestException as e:
        logger.error("generateContent request failed: %s", type(e).__name__)
        raise UpstreamHTTPError(f"Failed to fetch results: {type(e).__name__}") from e

    if not 200 <= response.status_code < 300:
        message = _error_message(response)
        logger.error("generateContent failed: status=%s, error_message=%s", response.status_code, message)
        raise UpstreamHTTPError(message, status_code=response.status_code)

    try:
        payload = response.json()
    except ValueError:
        raise UnexpectedResponseError() from None
    return completion_text(payload)
