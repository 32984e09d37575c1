"""LangGraph/LangChain tools for the Engram client.

Usage:
    from engram_client.langchain_tools import configure_memory_client, MEMORY_TOOLS

    # Configure the client
    configure_memory_client(
        base_url="https://engram.example.com", api_key="ek_...", tenant="acme"
    )

    # Use tools in LangGraph
    from langgraph.prebuilt import create_react_agent
    agent = create_react_agent(llm, tools=MEMORY_TOOLS)
"""
import json
from typing import Any

try:
    from langchain_core.tools import tool
except ImportError:
    raise ImportError(
        "langchain-core is required for LangGraph tools. "
        "Install with: pip install engram-client[langchain]"
    )

from engram_client.client import EngramClient

# Global client instance
_client: EngramClient | None = None


def configure_memory_client(
    base_url: str,
    api_key: str,
    tenant: str,
    timeout_ms: int = 30000,
) -> None:
    """Configure the global Engram client for LangGraph tools.

    Args:
        base_url: Service URL
        api_key: Bearer token
        tenant: Tenant slug
        timeout_ms: Per-call deadline in milliseconds (default: 30000)
    """
    global _client
    if _client is not None:
        _client.close()
    _client = EngramClient(
        base_url=base_url, api_key=api_key, tenant=tenant, timeout_ms=timeout_ms
    )


def get_client() -> EngramClient:
    """Get the configured client.

    Raises:
        RuntimeError: If configure_memory_client() hasn't been called
    """
    if _client is None:
        raise RuntimeError("Call configure_memory_client() first")
    return _client


def _dumps(result: Any) -> str:
    return json.dumps(result, ensure_ascii=False)


@tool
def memory_create(
    content: str,
    memory_type: str = "note",
    tags: list[str] | None = None,
    workspace: str | None = None,
    metadata: dict[str, Any] | None = None,
    importance: float | None = None,
) -> str:
    """Store a new memory.

    Args:
        content: Memory text
        memory_type: Memory type (default: "note")
        tags: Tag list (optional)
        workspace: Workspace name (optional)
        metadata: Metadata (optional)
        importance: Importance score (optional)

    Returns:
        JSON string of the created memory
    """
    result = get_client().create(
        content,
        memory_type=memory_type,
        tags=tags,
        workspace=workspace,
        metadata=metadata,
        importance=importance,
    )
    return _dumps(result)


@tool
def memory_get(memory_id: int) -> str:
    """Get a memory by ID.

    Args:
        memory_id: Memory ID

    Returns:
        JSON string of the memory
    """
    return _dumps(get_client().get(memory_id))


@tool
def memory_update(
    memory_id: int,
    content: str | None = None,
    tags: list[str] | None = None,
    metadata: dict[str, Any] | None = None,
    importance: float | None = None,
) -> str:
    """Update a memory. Only the given fields change.

    Args:
        memory_id: Memory ID
        content: New content (optional)
        tags: New tags (optional)
        metadata: New metadata (optional)
        importance: New importance (optional)

    Returns:
        JSON string with the server's result
    """
    result = get_client().update(
        memory_id,
        content=content,
        tags=tags,
        metadata=metadata,
        importance=importance,
    )
    return _dumps(result)


@tool
def memory_delete(memory_id: int) -> str:
    """Delete a memory.

    Args:
        memory_id: Memory ID

    Returns:
        JSON string with the server's result (null if none)
    """
    return _dumps(get_client().delete(memory_id))


@tool
def memory_list(
    limit: int = 50,
    offset: int = 0,
    workspace: str | None = None,
    memory_type: str | None = None,
    tags: list[str] | None = None,
) -> str:
    """List stored memories.

    Args:
        limit: Page size (default: 50)
        offset: Page offset (default: 0)
        workspace: Workspace filter (optional)
        memory_type: Memory type filter (optional)
        tags: Tag filter (optional)

    Returns:
        JSON string of memories
    """
    result = get_client().list(
        limit=limit,
        offset=offset,
        workspace=workspace,
        memory_type=memory_type,
        tags=tags,
    )
    return _dumps(result)


@tool
def memory_search(
    query: str,
    limit: int = 10,
    workspace: str | None = None,
) -> str:
    """Search memories by meaning.

    Args:
        query: Search query
        limit: Number of results (default: 10)
        workspace: Workspace filter (optional)

    Returns:
        JSON string of search results
    """
    return _dumps(get_client().search(query, limit=limit, workspace=workspace))


@tool
def memory_related(memory_id: int) -> str:
    """Get memories linked to a memory.

    Args:
        memory_id: Memory ID

    Returns:
        JSON string of related memories
    """
    return _dumps(get_client().related(memory_id))


@tool
def memory_link(from_id: int, to_id: int, edge_type: str = "related_to") -> str:
    """Link two memories.

    Args:
        from_id: Source memory ID
        to_id: Target memory ID
        edge_type: Edge type (default: "related_to")

    Returns:
        JSON string with the server's result
    """
    return _dumps(get_client().link(from_id, to_id, edge_type))


@tool
def memory_stats() -> str:
    """Get memory statistics for the tenant.

    Returns:
        JSON string of statistics
    """
    return _dumps(get_client().stats())


# Export all tools as a list
MEMORY_TOOLS = [
    memory_create,
    memory_get,
    memory_update,
    memory_delete,
    memory_list,
    memory_search,
    memory_related,
    memory_link,
    memory_stats,
]
