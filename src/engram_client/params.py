"""Tool names and argument builders for each memory operation.

Optional arguments left as ``None`` are never sent; any other value,
including falsy ones like ``[]`` or ``0``, is sent unchanged.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

MEMORY_CREATE = "memory_create"
MEMORY_GET = "memory_get"
MEMORY_UPDATE = "memory_update"
MEMORY_DELETE = "memory_delete"
MEMORY_LIST = "memory_list"
MEMORY_SEARCH = "memory_search"
MEMORY_RELATED = "memory_related"
MEMORY_LINK = "memory_link"
MEMORY_STATS = "memory_stats"

DEFAULT_MEMORY_TYPE = "note"
DEFAULT_LIST_LIMIT = 50
DEFAULT_LIST_OFFSET = 0
DEFAULT_SEARCH_LIMIT = 10
DEFAULT_EDGE_TYPE = "related_to"


def _build(required: dict[str, Any], **optional: Any) -> Mapping[str, Any]:
    """Merge required arguments with the optional ones that were given.

    Args:
        required: Arguments always sent
        **optional: Arguments sent only when not None

    Returns:
        Read-only mapping of wire argument names to values
    """
    params = dict(required)
    for key, value in optional.items():
        if value is not None:
            params[key] = value
    return MappingProxyType(params)


def create_params(
    content: str,
    *,
    memory_type: str | None = None,
    tags: list[str] | None = None,
    workspace: str | None = None,
    metadata: dict[str, Any] | None = None,
    importance: float | None = None,
) -> Mapping[str, Any]:
    """Arguments for ``memory_create``."""
    return _build(
        {
            "content": content,
            "memory_type": DEFAULT_MEMORY_TYPE if memory_type is None else memory_type,
        },
        tags=tags,
        workspace=workspace,
        metadata=metadata,
        importance=importance,
    )


def id_params(memory_id: int) -> Mapping[str, Any]:
    """Arguments for operations addressing a single memory."""
    return _build({"id": memory_id})


def update_params(
    memory_id: int,
    *,
    content: str | None = None,
    tags: list[str] | None = None,
    metadata: dict[str, Any] | None = None,
    importance: float | None = None,
) -> Mapping[str, Any]:
    """Arguments for ``memory_update``."""
    return _build(
        {"id": memory_id},
        content=content,
        tags=tags,
        metadata=metadata,
        importance=importance,
    )


def list_params(
    *,
    limit: int | None = None,
    offset: int | None = None,
    workspace: str | None = None,
    memory_type: str | None = None,
    tags: list[str] | None = None,
) -> Mapping[str, Any]:
    """Arguments for ``memory_list``."""
    return _build(
        {
            "limit": DEFAULT_LIST_LIMIT if limit is None else limit,
            "offset": DEFAULT_LIST_OFFSET if offset is None else offset,
        },
        workspace=workspace,
        memory_type=memory_type,
        tags=tags,
    )


def search_params(
    query: str,
    *,
    limit: int | None = None,
    workspace: str | None = None,
) -> Mapping[str, Any]:
    """Arguments for ``memory_search``."""
    return _build(
        {
            "query": query,
            "limit": DEFAULT_SEARCH_LIMIT if limit is None else limit,
        },
        workspace=workspace,
    )


def link_params(
    from_id: int,
    to_id: int,
    edge_type: str | None = None,
) -> Mapping[str, Any]:
    """Arguments for ``memory_link``."""
    return _build(
        {
            "from_id": from_id,
            "to_id": to_id,
            "edge_type": DEFAULT_EDGE_TYPE if edge_type is None else edge_type,
        }
    )
