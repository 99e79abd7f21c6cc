"""
Schema Diagram Backend - FastAPI Application

Provides:
- Rendering of GraphQL SDL to Mermaid, draw.io or layout JSON
- Layout of pre-parsed entities and relations
- Validation of schema documents
- CORS configuration for local frontend development
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..core import (
    Edge,
    EmptyGraphError,
    DuplicateNodeError,
    InternalLayoutError,
    LayoutConfig,
    SchemaDocument,
    SchemaEntity,
    SchemaParseError,
    UnknownFormatError,
    layout_document,
    validate_document,
    validation_summary,
)
from ..renderers import FORMATS, render
from ..schema import parse_schema

logger = logging.getLogger(__name__)

DEFAULT_HOST = os.environ.get("SCHEMA_DIAGRAM_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.environ.get("SCHEMA_DIAGRAM_PORT", "8765"))


# --- FastAPI App ---

app = FastAPI(
    title="Schema Diagram API",
    description="Render GraphQL schemas as force-directed diagrams",
    version=__version__,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _config(config: Optional[LayoutConfig]) -> LayoutConfig:
    return config if config is not None else LayoutConfig.from_env()


# --- Health Check ---

@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__, "formats": list(FORMATS)}


# --- Rendering ---

class RenderRequest(BaseModel):
    source: str  # GraphQL SDL
    format: str = "mermaid"  # mermaid, drawio, json
    config: Optional[LayoutConfig] = None


@app.post("/api/diagram/render")
async def render_diagram(request: RenderRequest):
    """Parse SDL and render it in the requested format."""
    try:
        document = parse_schema(request.source)
        content = render(document, request.format, _config(request.config))
    except (SchemaParseError, UnknownFormatError, DuplicateNodeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InternalLayoutError as e:
        logger.error("Layout failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "success": True,
        "format": request.format,
        "entities": len(document.entities),
        "relations": len(document.relations),
        "content": content,
    }


# --- Layout ---

class LayoutRequest(BaseModel):
    entities: list[SchemaEntity] = Field(default_factory=list)
    relations: list[Edge] = Field(default_factory=list)
    config: Optional[LayoutConfig] = None


@app.post("/api/layout")
async def layout(request: LayoutRequest):
    """Lay out already-parsed entities and return final positions."""
    document = SchemaDocument(entities=request.entities, relations=request.relations)
    try:
        result = layout_document(document, _config(request.config))
    except (EmptyGraphError, DuplicateNodeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InternalLayoutError as e:
        logger.error("Layout failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    return {"success": True, "layout": result.to_json_dict()}


# --- Validation ---

class ValidateRequest(BaseModel):
    source: str


@app.post("/api/diagram/validate")
async def validate_schema(request: ValidateRequest):
    """
    Validate a schema for structural issues.

    Returns a list of issues (errors, warnings, info) and a summary.
    """
    try:
        document = parse_schema(request.source)
    except SchemaParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    issues = validate_document(document)
    return {
        "success": True,
        "issues": [issue.to_dict() for issue in issues],
        "summary": validation_summary(issues),
    }


def run(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve the API with uvicorn."""
    import uvicorn
    uvicorn.run(app, host=host, port=port)


# --- Run with uvicorn ---

if __name__ == "__main__":
    run()
