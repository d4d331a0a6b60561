from __future__ import annotations

from typing import Any, Callable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from gpt5_mcp.config import Settings
from gpt5_mcp.core import completion
from gpt5_mcp.core.errors import (
    AdapterError,
    UnknownOperationError,
    ValidationError,
    error_text,
)
from gpt5_mcp.logging import get_logger

from .schemas import (
    GENERATE_TOOL,
    MESSAGES_TOOL,
    ConversationRequest,
    GenerateRequest,
)

logger = get_logger("tools")

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def text_result(text: str) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


def generate(arguments: dict[str, Any], settings: Settings) -> dict[str, Any]:
    request = prepare_generate(arguments)
    messages = [{"role": "user", "content": request.prompt}]
    return text_result(_call(messages, request.max_tokens, request.temperature, settings))


def converse(arguments: dict[str, Any], settings: Settings) -> dict[str, Any]:
    request = prepare_conversation(arguments)
    messages = [message.model_dump() for message in request.messages]
    if request.system_prompt:
        messages = [{"role": "system", "content": request.system_prompt}, *messages]
    return text_result(_call(messages, request.max_tokens, request.temperature, settings))


OPERATIONS: dict[str, Callable[[dict[str, Any], Settings], dict[str, Any]]] = {
    GENERATE_TOOL: generate,
    MESSAGES_TOOL: converse,
}


def dispatch(
    name: str,
    arguments: dict[str, Any] | None,
    settings: Settings,
) -> dict[str, Any]:
    """Run a tool by name. Failures come back as ``Error: ...`` text, never raised."""

    logger.info("Tool call: %s", name)
    try:
        operation = OPERATIONS.get(name)
        if operation is None:
            raise UnknownOperationError(message=f"Unknown tool: {name}", name=name)
        return operation(arguments or {}, settings)
    except Exception as exc:
        text = error_text(exc)
        logger.warning(
            "%s failed: %s", name, text, exc_info=not isinstance(exc, AdapterError)
        )
        return text_result(text)


def prepare_generate(arguments: dict[str, Any]) -> GenerateRequest:
    if not arguments.get("prompt"):
        raise ValidationError("Prompt is required", param="prompt")
    return _parse(GenerateRequest, arguments)


def prepare_conversation(arguments: dict[str, Any]) -> ConversationRequest:
    messages = arguments.get("messages")
    if not messages or not isinstance(messages, list):
        raise ValidationError("Messages array is required", param="messages")
    return _parse(ConversationRequest, arguments)


def _call(
    messages: list[dict[str, str]],
    max_tokens: int,
    temperature: float | None,
    settings: Settings,
) -> str:
    return completion.call_remote(
        messages,
        max_tokens,
        temperature,
        api_key=settings.api_key,
        timeout=settings.request_timeout,
    )


def _parse(model: type[RequestModel], arguments: dict[str, Any]) -> RequestModel:
    try:
        return model.model_validate(arguments)
    except SchemaValidationError as exc:
        errors = exc.errors()
        if not errors:
            raise ValidationError("Invalid arguments") from exc
        first = errors[0]
        location = _format_location(first.get("loc", ()))
        raise ValidationError(
            f"{location}: {first['msg']}" if location else first["msg"],
            param=location or None,
        ) from exc


def _format_location(loc: tuple[Any, ...]) -> str:
    parts: list[str] = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(str(item))
    return "".join(parts)
