"""
Schema Diagram - render GraphQL schemas as diagrams.

Parses SDL into entities and relations, lays them out with a force-directed
simulation, and renders Mermaid or draw.io output.
"""

from .core import (
    LayoutConfig,
    LayoutDriver,
    LayoutResult,
    SchemaDocument,
    SchemaDiagramError,
    EmptyGraphError,
    DuplicateNodeError,
    InternalLayoutError,
    SchemaParseError,
    UnknownFormatError,
    layout_document,
)
from .schema import parse_schema, load_schema
from .renderers import render, FORMATS

__version__ = "1.0.0"

__all__ = [
    "LayoutConfig",
    "LayoutDriver",
    "LayoutResult",
    "SchemaDocument",
    "SchemaDiagramError",
    "EmptyGraphError",
    "DuplicateNodeError",
    "InternalLayoutError",
    "SchemaParseError",
    "UnknownFormatError",
    "layout_document",
    "parse_schema",
    "load_schema",
    "render",
    "FORMATS",
]
