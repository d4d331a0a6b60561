from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from gpt5_mcp.core.types import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

GENERATE_TOOL = "gpt5_generate"
MESSAGES_TOOL = "gpt5_messages"


class Message(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    model_config = ConfigDict(extra="ignore")


class GenerateRequest(BaseModel):
    prompt: str = Field(min_length=1)
    max_tokens: int = DEFAULT_MAX_TOKENS
    # Accepted for input compatibility; never forwarded.
    temperature: float | None = DEFAULT_TEMPERATURE

    model_config = ConfigDict(extra="ignore")


class ConversationRequest(BaseModel):
    messages: list[Message] = Field(min_length=1)
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float | None = DEFAULT_TEMPERATURE
    system_prompt: str | None = None

    model_config = ConfigDict(extra="ignore")


_MAX_TOKENS_PROPERTY: dict[str, Any] = {
    "type": "integer",
    "description": "Maximum number of tokens to generate (default: 1000)",
    "default": DEFAULT_MAX_TOKENS,
}

_TEMPERATURE_PROPERTY: dict[str, Any] = {
    "type": "number",
    "description": "Sampling temperature (0-2, default: 0.7)",
    "default": DEFAULT_TEMPERATURE,
}


def tool_declarations() -> list[dict[str, Any]]:
    return [
        {
            "name": GENERATE_TOOL,
            "description": "Generate text using GPT-5 with a simple prompt",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "prompt": {
                        "type": "string",
                        "description": "The prompt to send to GPT-5",
                    },
                    "max_tokens": dict(_MAX_TOKENS_PROPERTY),
                    "temperature": dict(_TEMPERATURE_PROPERTY),
                },
                "required": ["prompt"],
            },
        },
        {
            "name": MESSAGES_TOOL,
            "description": "Send a conversation with multiple messages to GPT-5",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "messages": {
                        "type": "array",
                        "description": "Array of message objects with role and content",
                        "items": {
                            "type": "object",
                            "properties": {
                                "role": {
                                    "type": "string",
                                    "enum": ["system", "user", "assistant"],
                                    "description": "The role of the message sender",
                                },
                                "content": {
                                    "type": "string",
                                    "description": "The content of the message",
                                },
                            },
                            "required": ["role", "content"],
                        },
                    },
                    "max_tokens": dict(_MAX_TOKENS_PROPERTY),
                    "temperature": dict(_TEMPERATURE_PROPERTY),
                    "system_prompt": {
                        "type": "string",
                        "description": "Optional system prompt to prepend to messages",
                    },
                },
                "required": ["messages"],
            },
        },
    ]
