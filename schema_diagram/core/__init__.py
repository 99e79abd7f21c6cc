"""
Schema Diagram Core - models, graph storage, force layout and validation.

This module provides the layout core used by the renderers, the HTTP backend
and the MCP tools.
"""

from .models import (
    # Enums
    NodeCategory,
    ClassStereotype,
    EdgeHint,
    # Layout records
    Node,
    Edge,
    Canvas,
    LayoutResult,
    # Schema entities
    FieldSpec,
    ArgumentSpec,
    ClassEntity,
    ScalarEntity,
    DirectiveEntity,
    SchemaEntity,
    SchemaDocument,
)

from .errors import (
    SchemaDiagramError,
    EmptyGraphError,
    DuplicateNodeError,
    InternalLayoutError,
    SchemaParseError,
    UnknownFormatError,
)
from .config import LayoutConfig
from .graph import Graph
from .layout import force_layout, ideal_edge_length, SimulationStats
from .driver import LayoutDriver, layout_document
from .validation import validate_document, validation_summary, ValidationIssue, IssueSeverity

__all__ = [
    # Enums
    "NodeCategory",
    "ClassStereotype",
    "EdgeHint",
    # Models
    "Node",
    "Edge",
    "Canvas",
    "LayoutResult",
    "FieldSpec",
    "ArgumentSpec",
    "ClassEntity",
    "ScalarEntity",
    "DirectiveEntity",
    "SchemaEntity",
    "SchemaDocument",
    # Errors
    "SchemaDiagramError",
    "EmptyGraphError",
    "DuplicateNodeError",
    "InternalLayoutError",
    "SchemaParseError",
    "UnknownFormatError",
    # Layout
    "LayoutConfig",
    "Graph",
    "force_layout",
    "ideal_edge_length",
    "SimulationStats",
    "LayoutDriver",
    "layout_document",
    # Validation
    "validate_document",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
]
