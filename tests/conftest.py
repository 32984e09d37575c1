"""Pytest configuration and fixtures."""
import json
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def client_kwargs():
    """Keyword arguments for constructing a client."""
    return {"base_url": "https://engram.test", "api_key": "ek_test", "tenant": "acme"}


@pytest.fixture
def rpc_response():
    """Create a JSON-RPC 2.0 response."""

    def _create(result=None, error: dict | None = None, id: int = 1):
        response = {"jsonrpc": "2.0", "id": id}
        if error is not None:
            response["error"] = error
        else:
            response["result"] = result
        return response

    return _create


@pytest.fixture
def sent_body():
    """Decode the JSON body of a captured request."""

    def _read(request) -> dict:
        return json.loads(request.read())

    return _read


@pytest.fixture
def sample_memory_data():
    """Sample memory record as returned by the service."""
    return {
        "id": 42,
        "content": "User prefers dark mode",
        "memory_type": "preference",
        "tags": ["ui", "settings"],
        "workspace": "default",
        "importance": 0.8,
        "metadata": {"source": "chat"},
        "created_at": "2024-01-15T10:30:00Z",
    }


@pytest.fixture
def mock_client(sample_memory_data):
    """Mock EngramClient for langchain_tools tests."""
    mock = MagicMock()

    mock.create.return_value = sample_memory_data
    mock.get.return_value = sample_memory_data
    mock.update.return_value = {**sample_memory_data, "content": "updated"}
    mock.delete.return_value = None
    mock.list.return_value = {"memories": [sample_memory_data], "total": 1}
    mock.search.return_value = [{**sample_memory_data, "score": 0.93}]
    mock.related.return_value = [{"id": 7, "edge_type": "related_to"}]
    mock.link.return_value = {"ok": True}
    mock.stats.return_value = {"total_memories": 1, "total_links": 0}

    with patch("engram_client.langchain_tools._client", mock):
        yield mock
