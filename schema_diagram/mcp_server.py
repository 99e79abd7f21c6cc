#!/usr/bin/env python3
"""
Schema Diagram MCP Server

Provides MCP tools for AI agents to render and validate GraphQL schemas.
Every tool forwards to the HTTP backend (see schema_diagram.backend).
"""

import json
import os
from typing import Optional

import httpx
from mcp.server.fastmcp import FastMCP

# Backend API URL
API_BASE = os.environ.get("SCHEMA_DIAGRAM_API_BASE", "http://127.0.0.1:8765")

# Create MCP server
mcp = FastMCP("schema-diagram")


# --- HTTP Client Helper ---

def _make_client() -> httpx.Client:
    return httpx.Client(base_url=API_BASE, timeout=30.0)


def api_request(method: str, endpoint: str, **kwargs) -> dict:
    """Make a request to the schema diagram backend."""
    url = f"/api{endpoint}"
    with _make_client() as client:
        if method == "GET":
            response = client.get(url, params=kwargs.get("params"))
        elif method == "POST":
            response = client.post(url, json=kwargs.get("json"))
        else:
            raise ValueError(f"Unknown method: {method}")

        if response.status_code >= 400:
            error = response.json().get("detail", "Unknown error")
            raise RuntimeError(f"API error: {error}")

        return response.json()


def _layout_config(seed: Optional[int], iterations: Optional[int]) -> Optional[dict]:
    config = {}
    if seed is not None:
        config["seed"] = seed
    if iterations is not None:
        config["iterations"] = iterations
    return config or None


# ============================================================================
# RENDERING TOOLS
# ============================================================================

@mcp.tool()
def schema_render(
    source: str,
    format: str = "mermaid",
    seed: Optional[int] = None,
    iterations: Optional[int] = None,
) -> str:
    """
    Render a GraphQL schema as a diagram.

    Args:
        source: GraphQL SDL text
        format: "mermaid" (class diagram markup) or "drawio" (mxfile XML)
        seed: Random seed for reproducible draw.io layouts
        iterations: Number of force simulation iterations

    Returns the rendered diagram text.
    """
    result = api_request("POST", "/diagram/render", json={
        "source": source,
        "format": format,
        "config": _layout_config(seed, iterations),
    })
    return result["content"]


@mcp.tool()
def schema_layout_summary(source: str, seed: Optional[int] = None) -> str:
    """
    Lay out a GraphQL schema and summarize where each type ended up.

    Args:
        source: GraphQL SDL text
        seed: Random seed for reproducible layouts

    Returns node positions, sizes and the overall bounding box.
    """
    result = api_request("POST", "/diagram/render", json={
        "source": source,
        "format": "json",
        "config": _layout_config(seed, None),
    })
    layout = json.loads(result["content"])
    return json.dumps({
        "nodes": {
            n["id"]: {"x": round(n["x"], 1), "y": round(n["y"], 1), "category": n["category"]}
            for n in layout["nodes"]
        },
        "bounds": layout["bounds"],
        "ideal_edge_length": layout["ideal_edge_length"],
    }, indent=2)


# ============================================================================
# VALIDATION TOOLS
# ============================================================================

@mcp.tool()
def schema_validate(source: str) -> str:
    """
    Check a GraphQL schema for diagramming issues.

    Reports duplicate types, relations to undefined types, duplicate
    relations and types with no relations.

    Args:
        source: GraphQL SDL text

    Returns issues and a summary with counts by severity.
    """
    result = api_request("POST", "/diagram/validate", json={"source": source})
    return json.dumps(result, indent=2)


# ============================================================================
# MAIN
# ============================================================================

def main():
    mcp.run()


if __name__ == "__main__":
    main()
