from __future__ import annotations

from dataclasses import dataclass
from typing import Any

API_URL = "https://api.openai.com/v1/chat/completions"
MODEL_ID = "gpt-5"

# GPT-5 only accepts the default sampling temperature.
FIXED_TEMPERATURE = 1

DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7
NO_RESPONSE_TEXT = "No response from GPT-5"


@dataclass(slots=True)
class RemoteRequestBody:
    messages: list[dict[str, str]]
    max_completion_tokens: int
    model: str = MODEL_ID
    temperature: int = FIXED_TEMPERATURE

    def to_payload(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": self.messages,
            "max_completion_tokens": self.max_completion_tokens,
            "temperature": self.temperature,
        }
