"""Engram client - HTTP JSON-RPC 2.0 client for the Engram memory service."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from engram_client import params as p
from engram_client.exceptions import EngramError, ErrorKind
from engram_client.models import (
    ClientConfig,
    RequestEnvelope,
    ResponseEnvelope,
    ToolCallParams,
)

logger = logging.getLogger(__name__)


def _make_config(
    config: ClientConfig | None,
    base_url: str | None,
    api_key: str | None,
    tenant: str | None,
    timeout_ms: int | None,
) -> ClientConfig:
    if config is not None:
        if any(v is not None for v in (base_url, api_key, tenant, timeout_ms)):
            raise TypeError("Pass either config or keyword fields, not both")
        return config
    fields: dict[str, Any] = {"base_url": base_url, "api_key": api_key, "tenant": tenant}
    if timeout_ms is not None:
        fields["timeout_ms"] = timeout_ms
    return ClientConfig(**fields)


def _error(
    tool_name: str, kind: ErrorKind, message: str, **details: Any
) -> EngramError:
    logger.warning("%s failed (%s): %s", tool_name, kind.value, message)
    return EngramError(kind, message, **details)


def encode_request(tool_name: str, parameters: Mapping[str, Any] | None = None) -> bytes:
    """Serialize a ``tools/call`` request body.

    Args:
        tool_name: Remote tool name (e.g. "memory_get")
        parameters: Tool arguments

    Returns:
        Compact JSON body
    """
    envelope = RequestEnvelope(
        params=ToolCallParams(name=tool_name, arguments=dict(parameters or {}))
    )
    return envelope.model_dump_json().encode()


def decode_response(tool_name: str, response: httpx.Response) -> Any:
    """Unwrap a response envelope.

    Args:
        tool_name: Remote tool name, for error reporting
        response: HTTP response

    Returns:
        The envelope's ``result`` (None when absent)

    Raises:
        EngramError: Non-2xx status, undecodable body, or envelope error
    """
    if not response.is_success:
        raise _error(
            tool_name,
            ErrorKind.TRANSPORT,
            f"HTTP {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        envelope = ResponseEnvelope.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise _error(tool_name, ErrorKind.DECODE, f"Invalid JSON response: {e}") from e

    if envelope.error is not None:
        error = envelope.error
        raise _error(
            tool_name,
            ErrorKind.APPLICATION,
            error.message if error.message is not None else "Unknown error",
            code=error.code,
            data=error.data,
        )

    return envelope.result


class AsyncEngramClient:
    """Engram memory service client for asyncio.

    Calls share no mutable state, so one instance can serve any number of
    concurrent tasks.

    Usage::

        async with AsyncEngramClient(
            base_url="https://engram.example.com", api_key="ek_...", tenant="acme"
        ) as client:
            memory = await client.create("User prefers dark mode")
            results = await client.search("user preferences")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        tenant: str | None = None,
        timeout_ms: int | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Full configuration; overrides the keyword fields
            base_url: Service URL
            api_key: Bearer token
            tenant: Tenant slug
            timeout_ms: Per-call deadline in milliseconds (default: 30000)
            http_client: HTTP client to use instead of a private one
        """
        self._config = _make_config(config, base_url, api_key, tenant, timeout_ms)
        self._headers = self._config.headers()
        self._owns_client = http_client is None
        self._client = (
            httpx.AsyncClient(timeout=self._config.timeout_seconds)
            if http_client is None
            else http_client
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def invoke(
        self, tool_name: str, parameters: Mapping[str, Any] | None = None
    ) -> Any:
        """Call a remote tool.

        Args:
            tool_name: Remote tool name
            parameters: Tool arguments

        Returns:
            Result from server (None when the server sends none)

        Raises:
            EngramError: Transport, application, timeout or decode failure
        """
        body = encode_request(tool_name, parameters)
        logger.debug("Calling %s at %s", tool_name, self._config.endpoint)

        try:
            # wait_for cancels the pending request when the deadline passes
            response = await asyncio.wait_for(
                self._client.post(
                    self._config.endpoint,
                    content=body,
                    headers=self._headers,
                    timeout=self._config.timeout_seconds,
                ),
                timeout=self._config.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise _error(
                tool_name,
                ErrorKind.TIMEOUT,
                f"Request timed out after {self._config.timeout_ms} ms",
            ) from e
        except httpx.TransportError as e:
            raise _error(
                tool_name,
                ErrorKind.TRANSPORT,
                f"Failed to connect to {self._config.base_url}: {e}",
            ) from e

        result = decode_response(tool_name, response)
        logger.debug("%s succeeded", tool_name)
        return result

    # --- Memory CRUD ---

    async def create(
        self,
        content: str,
        *,
        memory_type: str | None = None,
        tags: list[str] | None = None,
        workspace: str | None = None,
        metadata: dict[str, Any] | None = None,
        importance: float | None = None,
    ) -> Any:
        """Create a memory.

        Args:
            content: Memory text
            memory_type: Memory type (default: "note")
            tags: Tag list (optional)
            workspace: Workspace name (optional)
            metadata: Metadata (optional)
            importance: Importance score (optional)

        Returns:
            The created memory as returned by the server
        """
        return await self.invoke(
            p.MEMORY_CREATE,
            p.create_params(
                content,
                memory_type=memory_type,
                tags=tags,
                workspace=workspace,
                metadata=metadata,
                importance=importance,
            ),
        )

    async def get(self, memory_id: int) -> Any:
        """Get a memory by ID."""
        return await self.invoke(p.MEMORY_GET, p.id_params(memory_id))

    async def update(
        self,
        memory_id: int,
        *,
        content: str | None = None,
        tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
        importance: float | None = None,
    ) -> Any:
        """Update a memory (patch).

        Args:
            memory_id: Memory ID
            content: New content (optional)
            tags: New tags (optional)
            metadata: New metadata (optional)
            importance: New importance (optional)
        """
        return await self.invoke(
            p.MEMORY_UPDATE,
            p.update_params(
                memory_id,
                content=content,
                tags=tags,
                metadata=metadata,
                importance=importance,
            ),
        )

    async def delete(self, memory_id: int) -> Any:
        """Delete a memory. The server may return no result."""
        return await self.invoke(p.MEMORY_DELETE, p.id_params(memory_id))

    async def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        workspace: str | None = None,
        memory_type: str | None = None,
        tags: list[str] | None = None,
    ) -> Any:
        """List memories.

        Args:
            limit: Page size (default: 50)
            offset: Page offset (default: 0)
            workspace: Workspace filter (optional)
            memory_type: Memory type filter (optional)
            tags: Tag filter (optional)
        """
        return await self.invoke(
            p.MEMORY_LIST,
            p.list_params(
                limit=limit,
                offset=offset,
                workspace=workspace,
                memory_type=memory_type,
                tags=tags,
            ),
        )

    # --- Search ---

    async def search(
        self,
        query: str,
        *,
        limit: int | None = None,
        workspace: str | None = None,
    ) -> Any:
        """Search memories.

        Args:
            query: Search query
            limit: Number of results (default: 10)
            workspace: Workspace filter (optional)
        """
        return await self.invoke(
            p.MEMORY_SEARCH, p.search_params(query, limit=limit, workspace=workspace)
        )

    # --- Graph ---

    async def related(self, memory_id: int) -> Any:
        """Get memories linked to a memory."""
        return await self.invoke(p.MEMORY_RELATED, p.id_params(memory_id))

    async def link(
        self, from_id: int, to_id: int, edge_type: str = p.DEFAULT_EDGE_TYPE
    ) -> Any:
        """Link two memories with a typed edge."""
        return await self.invoke(p.MEMORY_LINK, p.link_params(from_id, to_id, edge_type))

    # --- Stats ---

    async def stats(self) -> Any:
        return await self.invoke(p.MEMORY_STATS)

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncEngramClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


class EngramClient:
    """Blocking Engram memory service client.

    Same operations as :class:`AsyncEngramClient`. ``timeout_ms`` becomes the
    httpx timeout of each request, which httpx applies to each phase
    (connect, write, read, pool) separately, so a slow call can take longer
    than ``timeout_ms`` in total. Use :class:`AsyncEngramClient` for a hard
    whole-call deadline.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        tenant: str | None = None,
        timeout_ms: int | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = _make_config(config, base_url, api_key, tenant, timeout_ms)
        self._headers = self._config.headers()
        self._owns_client = http_client is None
        self._client = (
            httpx.Client(timeout=self._config.timeout_seconds)
            if http_client is None
            else http_client
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def invoke(self, tool_name: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """Call a remote tool.

        Raises:
            EngramError: Transport, application, timeout or decode failure
        """
        body = encode_request(tool_name, parameters)
        logger.debug("Calling %s at %s", tool_name, self._config.endpoint)

        try:
            response = self._client.post(
                self._config.endpoint,
                content=body,
                headers=self._headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise _error(
                tool_name,
                ErrorKind.TIMEOUT,
                f"Request timed out after {self._config.timeout_ms} ms",
            ) from e
        except httpx.TransportError as e:
            raise _error(
                tool_name,
                ErrorKind.TRANSPORT,
                f"Failed to connect to {self._config.base_url}: {e}",
            ) from e

        result = decode_response(tool_name, response)
        logger.debug("%s succeeded", tool_name)
        return result

    # --- Memory CRUD ---

    def create(
        self,
        content: str,
        *,
        memory_type: str | None = None,
        tags: list[str] | None = None,
        workspace: str | None = None,
        metadata: dict[str, Any] | None = None,
        importance: float | None = None,
    ) -> Any:
        """Create a memory (memory_type defaults to "note")."""
        return self.invoke(
            p.MEMORY_CREATE,
            p.create_params(
                content,
                memory_type=memory_type,
                tags=tags,
                workspace=workspace,
                metadata=metadata,
                importance=importance,
            ),
        )

    def get(self, memory_id: int) -> Any:
        return self.invoke(p.MEMORY_GET, p.id_params(memory_id))

    def update(
        self,
        memory_id: int,
        *,
        content: str | None = None,
        tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
        importance: float | None = None,
    ) -> Any:
        return self.invoke(
            p.MEMORY_UPDATE,
            p.update_params(
                memory_id,
                content=content,
                tags=tags,
                metadata=metadata,
                importance=importance,
            ),
        )

    def delete(self, memory_id: int) -> Any:
        return self.invoke(p.MEMORY_DELETE, p.id_params(memory_id))

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        workspace: str | None = None,
        memory_type: str | None = None,
        tags: list[str] | None = None,
    ) -> Any:
        """List memories (limit defaults to 50, offset to 0)."""
        return self.invoke(
            p.MEMORY_LIST,
            p.list_params(
                limit=limit,
                offset=offset,
                workspace=workspace,
                memory_type=memory_type,
                tags=tags,
            ),
        )

    def search(
        self,
        query: str,
        *,
        limit: int | None = None,
        workspace: str | None = None,
    ) -> Any:
        """Search memories (limit defaults to 10)."""
        return self.invoke(
            p.MEMORY_SEARCH, p.search_params(query, limit=limit, workspace=workspace)
        )

    def related(self, memory_id: int) -> Any:
        return self.invoke(p.MEMORY_RELATED, p.id_params(memory_id))

    def link(self, from_id: int, to_id: int, edge_type: str = p.DEFAULT_EDGE_TYPE) -> Any:
        return self.invoke(p.MEMORY_LINK, p.link_params(from_id, to_id, edge_type))

    def stats(self) -> Any:
        return self.invoke(p.MEMORY_STATS)

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> EngramClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
