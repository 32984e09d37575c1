"""Engram client exceptions."""
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """What went wrong with a call."""

    TRANSPORT = "transport"
    APPLICATION = "application"
    TIMEOUT = "timeout"
    DECODE = "decode"


class EngramError(Exception):
    """Engram client error.

    Every failed call raises this one type; ``kind`` tells the cases apart.

    Attributes:
        kind: Failure category
        message: Human-readable message
        status_code: HTTP status (transport errors with a response only)
        code: Error code from the response envelope (application errors only)
        data: Error data from the response envelope (application errors only)
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        code: Any = None,
        data: Any = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.code = code
        self.data = data
        super().__init__(message)

    def __repr__(self) -> str:
        return f"EngramError(kind={self.kind.value!r}, message={self.message!r})"

    @property
    def is_transport(self) -> bool:
        """Check if error is an HTTP status or connection failure."""
        return self.kind is ErrorKind.TRANSPORT

    @property
    def is_application(self) -> bool:
        """Check if error came from the response envelope."""
        return self.kind is ErrorKind.APPLICATION

    @property
    def is_timeout(self) -> bool:
        """Check if the call ran past its deadline."""
        return self.kind is ErrorKind.TIMEOUT

    @property
    def is_decode(self) -> bool:
        """Check if the response body could not be decoded."""
        return self.kind is ErrorKind.DECODE
