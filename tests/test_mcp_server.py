"""Tests for the MCP tools, routed to the HTTP API in-process."""

import json

import pytest
from fastapi.testclient import TestClient

from schema_diagram import mcp_server
from schema_diagram.backend import app


@pytest.fixture(autouse=True)
def in_process_backend(monkeypatch):
    monkeypatch.setattr(mcp_server, "_make_client", lambda: TestClient(app))


def test_schema_render_mermaid(sample_source):
    text = mcp_server.schema_render(sample_source)

    assert text.startswith("classDiagram")


def test_schema_render_drawio_seeded(sample_source):
    first = mcp_server.schema_render(sample_source, format="drawio", seed=4, iterations=10)
    second = mcp_server.schema_render(sample_source, format="drawio", seed=4, iterations=10)

    assert first == second


def test_schema_layout_summary(sample_source):
    summary = json.loads(mcp_server.schema_layout_summary(sample_source, seed=2))

    assert set(summary["nodes"]) == {
        "User", "Post", "PostFilter", "Role", "Entity", "scalar_DateTime", "directive_auth",
    }
    assert summary["nodes"]["directive_auth"]["category"] == "directive"
    assert summary["ideal_edge_length"] > 0


def test_schema_validate(sample_source):
    result = json.loads(mcp_server.schema_validate(sample_source))

    assert result["summary"]["valid"] is True


def test_api_error_is_raised():
    with pytest.raises(RuntimeError, match="API error"):
        mcp_server.schema_render("type {")
