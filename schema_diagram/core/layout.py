"""
Force-directed layout for schema diagrams.

Simulates physical forces over a fixed number of iterations:
- All node pairs repel with magnitude k^2 / d
- Nodes joined by an edge attract with magnitude d^2 / k

where k is the ideal edge length, sqrt(canvas area / node count), and d is
the distance between the two nodes, floored at `min_distance` so coincident
nodes never divide by zero.

Each iteration accumulates every node's displacement from the positions at
the start of the iteration, then moves the node by at most the current
temperature. The temperature cools linearly towards zero so the layout
settles instead of oscillating. Two connected nodes settle near distance k.

Repulsion is computed over all pairs, O(N^2) per iteration. This is fine for
schema diagrams (tens to a few hundred types) and is the known scaling limit.

Positions are modified in-place.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .config import LayoutConfig
from .errors import EmptyGraphError, InternalLayoutError
from .graph import Graph
from .models import Canvas

logger = logging.getLogger(__name__)

GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))


@dataclass
class SimulationStats:
    """Summary of one simulation run."""
    iterations: int
    ideal_edge_length: float
    final_temperature: float
    max_displacement: float
    skipped_edges: int = 0
    converged: bool = False


def ideal_edge_length(canvas: Canvas, node_count: int) -> float:
    """
    Target spacing between nodes for a canvas and node count.

    Raises:
        EmptyGraphError: If node_count is zero
    """
    if node_count <= 0:
        raise EmptyGraphError()
    return math.sqrt(canvas.area / node_count)


def _tie_break(i: int, j: int, count: int) -> tuple[float, float]:
    """Unit vector used to push apart two nodes at exactly the same point."""
    angle = GOLDEN_ANGLE * (i * count + j + 1)
    return (math.cos(angle), math.sin(angle))


def force_layout(graph: Graph, config: Optional[LayoutConfig] = None) -> SimulationStats:
    """
    Arrange the graph's nodes using the force-directed simulation.

    Edges with a missing endpoint are skipped (logged once as a warning).

    Args:
        graph: Nodes to arrange, with their starting positions
        config: Simulation options (defaults to LayoutConfig())

    Returns:
        SimulationStats for the run

    Raises:
        EmptyGraphError: If the graph has no nodes (no node is touched)
        InternalLayoutError: If a coordinate becomes non-finite
    """
    config = config or LayoutConfig()
    nodes = graph.nodes
    count = len(nodes)
    if count == 0:
        raise EmptyGraphError()

    if config.ideal_edge_length is not None:
        k = config.ideal_edge_length
    else:
        k = ideal_edge_length(config.canvas, count)
    min_distance = config.min_distance
    start_temperature = config.start_temperature()

    # Resolve edges to index pairs once; the node set never changes
    position = {node.id: i for i, node in enumerate(nodes)}
    springs: list[tuple[int, int]] = []
    skipped = 0
    for edge in graph.edges:
        if edge.source not in position or edge.target not in position:
            logger.warning("Skipping edge %s -> %s: endpoint not in graph", edge.source, edge.target)
            skipped += 1
            continue
        springs.append((position[edge.source], position[edge.target]))

    logger.debug(
        "Simulating %d nodes, %d edges (%d skipped), k=%.2f, iterations=%d",
        count, len(springs), skipped, k, config.iterations,
    )

    xs = [node.x for node in nodes]
    ys = [node.y for node in nodes]
    temperature = start_temperature
    max_step = 0.0
    converged = False
    iteration = 0

    for iteration in range(config.iterations):
        temperature = start_temperature * (config.iterations - iteration) / config.iterations
        disp_x = [0.0] * count
        disp_y = [0.0] * count

        # Repulsion between all node pairs
        for i in range(count):
            for j in range(i + 1, count):
                dx = xs[i] - xs[j]
                dy = ys[i] - ys[j]
                if dx == 0.0 and dy == 0.0:
                    ux, uy = _tie_break(i, j, count)
                    dist = min_distance
                else:
                    dist = max(min_distance, math.sqrt(dx * dx + dy * dy))
                    ux, uy = dx / dist, dy / dist

                force = (k * k) / dist
                disp_x[i] += ux * force
                disp_y[i] += uy * force
                disp_x[j] -= ux * force
                disp_y[j] -= uy * force

        # Attraction along edges, equal and opposite
        for i, j in springs:
            if i == j:
                continue
            dx = xs[i] - xs[j]
            dy = ys[i] - ys[j]
            dist = max(min_distance, math.sqrt(dx * dx + dy * dy))

            force = (dist * dist) / k
            fx = (dx / dist) * force
            fy = (dy / dist) * force
            disp_x[i] -= fx
            disp_y[i] -= fy
            disp_x[j] += fx
            disp_y[j] += fy

        # Move each node by at most the current temperature
        max_step = 0.0
        for i in range(count):
            length = math.sqrt(disp_x[i] * disp_x[i] + disp_y[i] * disp_y[i])
            if length == 0.0:
                continue
            step = min(length, temperature)
            xs[i] += disp_x[i] / length * step
            ys[i] += disp_y[i] / length * step
            max_step = max(max_step, step)

        for i, node in enumerate(nodes):
            if not (math.isfinite(xs[i]) and math.isfinite(ys[i])):
                raise InternalLayoutError(
                    node.id, f"non-finite position ({xs[i]}, {ys[i]}) at iteration {iteration}"
                )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Iteration %d: temperature=%.3f max_step=%.3f", iteration, temperature, max_step)

        if config.tolerance is not None and max_step < config.tolerance:
            converged = True
            break

    for i, node in enumerate(nodes):
        node.x = xs[i]
        node.y = ys[i]

    return SimulationStats(
        iterations=iteration + 1,
        ideal_edge_length=k,
        final_temperature=temperature,
        max_displacement=max_step,
        skipped_edges=skipped,
        converged=converged,
    )
