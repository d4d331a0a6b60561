from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AdapterError(Exception):
    """Base for failures that are reported back to the caller as text."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationError(AdapterError):
    param: str | None = None


@dataclass
class RemoteAPIError(AdapterError):
    status_code: int = 0
    body: str = ""


@dataclass
class TransportError(AdapterError):
    pass


@dataclass
class UnknownOperationError(AdapterError):
    name: str = ""


@dataclass
class ConfigError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


def error_text(exc: Exception) -> str:
    """Render any failure as the in-band text returned to the MCP client."""

    if isinstance(exc, AdapterError):
        return f"Error: {exc.message}"

    return f"Error: Unexpected error: {exc}"
