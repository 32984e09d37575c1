"""Engram Client - Python client for the Engram memory service."""
from engram_client.client import AsyncEngramClient, EngramClient
from engram_client.exceptions import EngramError, ErrorKind
from engram_client.models import (
    ClientConfig,
    RequestEnvelope,
    ResponseEnvelope,
    RPCErrorBody,
    ToolCallParams,
)

__all__ = [
    "AsyncEngramClient",
    "EngramClient",
    "EngramError",
    "ErrorKind",
    "ClientConfig",
    "RequestEnvelope",
    "ResponseEnvelope",
    "RPCErrorBody",
    "ToolCallParams",
]

__version__ = "0.1.0"
