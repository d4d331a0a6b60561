from __future__ import annotations

from typing import Any

import requests

from gpt5_mcp.logging import get_logger

from .errors import RemoteAPIError, TransportError
from .types import API_URL, NO_RESPONSE_TEXT, RemoteRequestBody

logger = get_logger("completion")


def call_remote(
    messages: list[dict[str, str]],
    max_tokens: int,
    temperature: float | None,
    *,
    api_key: str,
    timeout: float | None = None,
) -> str:
    """Send one chat-completion request and return the first choice's text.

    ``temperature`` is accepted so both tools share one call signature, but the
    outbound body always carries ``FIXED_TEMPERATURE``.
    """

    body = RemoteRequestBody(messages=messages, max_completion_tokens=max_tokens)
    if temperature is not None and temperature != body.temperature:
        logger.debug(
            "Ignoring caller temperature %s; sending %s", temperature, body.temperature
        )

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            API_URL,
            headers=headers,
            json=body.to_payload(),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise TransportError(f"GPT-5 request failed: {exc}") from exc

    logger.debug("GPT-5 responded with HTTP %s", response.status_code)

    if not 200 <= response.status_code < 300:
        raise RemoteAPIError(
            message=f"GPT-5 API error ({response.status_code}): {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise TransportError(f"GPT-5 returned an unreadable body: {exc}") from exc

    return _extract_content(data) or NO_RESPONSE_TEXT


def _extract_content(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None

    first = choices[0]
    if not isinstance(first, dict):
        return None

    message = first.get("message")
    if not isinstance(message, dict):
        return None

    content = message.get("content")
    if isinstance(content, str) and content:
        return content

    return None
