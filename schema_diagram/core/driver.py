"""
Layout driver - one full layout per schema document.

Assembles the complete node set up front (classes, then scalars, then
directives), scatters it uniformly over the canvas with an explicitly owned
random generator, and runs the force simulation exactly once.
"""

import logging
import random
from typing import Optional

from .config import LayoutConfig
from .errors import EmptyGraphError
from .graph import Graph
from .layout import SimulationStats, force_layout
from .models import LayoutResult, SchemaDocument

logger = logging.getLogger(__name__)


class LayoutDriver:
    """
    Orchestrates initial placement and simulation.

    The random generator is owned by the driver: pass `rng`, or set
    `config.seed` for reproducible output.
    """

    def __init__(self, config: Optional[LayoutConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or LayoutConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.last_stats: Optional[SimulationStats] = None

    def build_graph(self, document: SchemaDocument) -> Graph:
        """
        Build the working graph with random initial positions.

        Raises:
            DuplicateNodeError: If two entities share an identity
        """
        graph = Graph()
        width = self.config.canvas_width
        height = self.config.canvas_height
        for group in (document.classes(), document.scalars(), document.directives()):
            for entity in group:
                x = self.rng.random() * width
                y = self.rng.random() * height
                graph.add_node(entity.to_node(x, y))
        for relation in document.relations:
            graph.add_edge(relation)
        return graph

    def layout(self, document: SchemaDocument) -> LayoutResult:
        """
        Lay out every entity of the document.

        Returns:
            LayoutResult with final positions and the untouched relations

        Raises:
            EmptyGraphError: If the document has no entities
            DuplicateNodeError: If two entities share an identity
        """
        if not document.entities:
            raise EmptyGraphError("schema has no entities")

        graph = self.build_graph(document)
        stats = force_layout(graph, self.config)
        self.last_stats = stats

        logger.info(
            "Laid out %d nodes in %d iterations (k=%.1f, %d dangling edges)",
            len(graph), stats.iterations, stats.ideal_edge_length, stats.skipped_edges,
        )

        return LayoutResult(
            nodes=graph.node_map(),
            edges=list(document.relations),
            canvas=self.config.canvas,
            iterations=stats.iterations,
            ideal_edge_length=stats.ideal_edge_length,
        )


def layout_document(
    document: SchemaDocument,
    config: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
) -> LayoutResult:
    """Run one layout for a document with a fresh driver."""
    return LayoutDriver(config, rng).layout(document)
