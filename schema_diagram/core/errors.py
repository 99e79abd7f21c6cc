"""
Error types for schema diagram generation.

Construction-time failures (empty or duplicate node sets) stop a layout
call before any position is touched. Dangling relations are not errors;
the simulation skips them.
"""


class SchemaDiagramError(Exception):
    """Base exception for schema diagram errors."""


class EmptyGraphError(SchemaDiagramError):
    """Raised when a layout is requested for a graph with no nodes."""

    def __init__(self, reason: str = "graph has no nodes"):
        self.reason = reason
        super().__init__(f"Cannot lay out graph: {reason}")


class DuplicateNodeError(SchemaDiagramError):
    """Raised when two nodes share the same identity."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Duplicate node identity: {node_id!r}")


class InternalLayoutError(SchemaDiagramError):
    """Raised when the simulation produces a non-finite coordinate."""

    def __init__(self, node_id: str, reason: str):
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Layout invariant violated for {node_id!r}: {reason}")


class SchemaParseError(SchemaDiagramError):
    """Raised when schema source text cannot be parsed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to parse schema: {reason}")


class UnknownFormatError(SchemaDiagramError):
    """Raised when an unsupported output format is requested."""

    def __init__(self, fmt: str):
        self.format = fmt
        super().__init__(f"Unknown output format: {fmt!r}")
