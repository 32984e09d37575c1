"""Engram client data models."""
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class ClientConfig(BaseModel):
    """Connection settings for one client."""

    base_url: str
    api_key: str
    tenant: str
    timeout_ms: PositiveInt = 30000

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        # One slash only: "https://x//" becomes "https://x/"
        return value[:-1] if value.endswith("/") else value

    @property
    def endpoint(self) -> str:
        """URL every call is posted to."""
        return f"{self.base_url}/v1/mcp"

    @property
    def timeout_seconds(self) -> float:
        """Call deadline in seconds."""
        return self.timeout_ms / 1000

    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "X-Tenant-Slug": self.tenant,
            "Content-Type": "application/json",
        }


class ToolCallParams(BaseModel):
    """``params`` of a ``tools/call`` request."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class RequestEnvelope(BaseModel):
    """JSON-RPC 2.0 request."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int = 1
    method: Literal["tools/call"] = "tools/call"
    params: ToolCallParams


class RPCErrorBody(BaseModel):
    """``error`` member of a response."""

    message: str | None = None
    code: Any | None = None
    data: Any | None = None

    @field_validator("message", mode="before")
    @classmethod
    def stringify_message(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class ResponseEnvelope(BaseModel):
    """JSON-RPC 2.0 response.

    ``result`` and ``error`` may both be missing, which reads as a successful
    call returning ``None``. An empty or false ``error`` counts as missing; any
    other ``error`` that is not an object becomes an error with no message.
    """

    result: Any | None = None
    error: RPCErrorBody | None = None

    @field_validator("error", mode="before")
    @classmethod
    def normalize_error(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value
        if isinstance(value, list):
            return {}
        return {} if value else None
