"""Integration tests for the HTTP JSON-RPC transport."""
import pytest
from fastapi.testclient import TestClient

from mcp_stdio.server import create_app, create_server
from mcp_stdio.utils.errors import RegistrationError


@pytest.fixture
def server():
    server = create_server(name="http-test-server", version="2.0.0")
    server.register_resource("file:///notes.txt", "notes.txt", "Notes")
    return server


@pytest.fixture
def client(server):
    """Create a test client with the built-in tools registered."""
    with TestClient(create_app(server)) as c:
        yield c


def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "http-test-server"
    assert data["version"] == "2.0.0"
    assert data["tools"] == 1
    assert data["resources"] == 1


def test_jsonrpc_initialize(client):
    """Test JSON-RPC initialize method."""
    response = client.post("/", json={
        "jsonrpc": "2.0",
        "id": 1,
        "method": "initialize",
        "params": {
            "protocolVersion": "2024-11-05",
            "capabilities": {},
            "clientInfo": {"name": "test-client", "version": "1.0.0"}
        }
    })

    assert response.status_code == 200
    data = response.json()
    assert data["jsonrpc"] == "2.0"
    assert data["id"] == 1
    assert data["result"]["serverInfo"] == {"name": "http-test-server", "version": "2.0.0"}
    assert data["result"]["capabilities"]["resources"] == {"subscribe": True, "listChanged": True}


@pytest.mark.parametrize("path", ["/", "/rpc", "/jsonrpc"])
def test_jsonrpc_tools_call(client, path):
    """Test tools/call on every JSON-RPC endpoint."""
    response = client.post(path, json={
        "jsonrpc": "2.0",
        "id": "abc",
        "method": "tools/call",
        "params": {"name": "echo", "arguments": {"message": "over http"}}
    })

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "abc"
    assert data["result"]["content"][0]["text"] == "Echo: over http"


def test_jsonrpc_tool_application_error(client):
    response = client.post("/rpc", json={
        "jsonrpc": "2.0",
        "id": 2,
        "method": "tools/call",
        "params": {"name": "echo", "arguments": {}}
    })

    data = response.json()
    assert "error" not in data
    assert data["result"] == {"error": "Message is required"}


def test_jsonrpc_resources(client):
    listed = client.post("/rpc", json={"jsonrpc": "2.0", "id": 3, "method": "resources/list"}).json()
    read = client.post("/rpc", json={
        "jsonrpc": "2.0", "id": 4, "method": "resources/read", "params": {"uri": "file:///notes.txt"}
    }).json()

    assert listed["result"]["resources"][0]["uri"] == "file:///notes.txt"
    assert read["result"]["contents"][0]["text"] == "Content of file:///notes.txt"


def test_jsonrpc_errors(client):
    wrong_version = client.post("/rpc", json={"jsonrpc": "1.0", "id": 5, "method": "ping"}).json()
    unknown = client.post("/rpc", json={"jsonrpc": "2.0", "id": 6, "method": "nope"}).json()

    assert wrong_version["error"]["code"] == -32600
    assert unknown["error"]["code"] == -32601
    assert "result" not in unknown


def test_malformed_body_rejected(client):
    response = client.post("/rpc", json={"jsonrpc": "2.0", "id": 7})
    assert response.status_code == 422


def test_registry_frozen_after_startup(client, server):
    with pytest.raises(RegistrationError):
        server.register_tool("late", "Too late", {"type": "object"}, lambda arguments: {})
