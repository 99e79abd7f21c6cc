"""
draw.io (mxGraph) XML renderer.

Uses the positions of a LayoutResult for the top-level cells. Classes are
swimlanes with one child row per field, scalars are ellipses, directives
are hexagons with one child row per argument. Relations whose endpoints
are missing from the layout are left out.
"""

import logging
import xml.etree.ElementTree as ET

from ..core.models import (
    CLASS_HEADER_HEIGHT,
    DIRECTIVE_HEIGHT,
    FIELD_HEIGHT,
    EdgeHint,
    LayoutResult,
    SchemaDocument,
)

logger = logging.getLogger(__name__)

DIAGRAM_NAME = "GraphQL Schema"

CLASS_STYLE = (
    "swimlane;fontStyle=1;align=center;verticalAlign=top;childLayout=stackLayout;"
    "horizontal=1;startSize=30;horizontalStack=0;resizeParent=1;resizeParentMax=0;"
    "resizeLast=0;collapsible=1;marginBottom=0;"
)
ROW_STYLE = (
    "text;strokeColor=none;fillColor=none;align=left;verticalAlign=top;spacingLeft=4;"
    "spacingRight=4;overflow=hidden;rotatable=0;points=[[0,0.5],[1,0.5]];portConstraint=eastwest;"
)
EDGE_STYLE = "edgeStyle=orthogonalEdgeStyle;rounded=1;orthogonalLoop=1;jettySize=auto;html=1;"
SCALAR_STYLE = "ellipse;whiteSpace=wrap;html=1;aspect=fixed;fillColor=#f5f5f5;"
DIRECTIVE_STYLE = (
    "shape=hexagon;perimeter=hexagonPerimeter2;whiteSpace=wrap;html=1;fixedSize=1;"
    "fillColor=#fff2cc;strokeColor=#d6b656;"
)


def _num(value: float) -> str:
    return str(round(value, 2))


def _cell(parent_el: ET.Element, cell_id: str, **attrs) -> ET.Element:
    attrib = {"id": cell_id}
    attrib.update({k: v for k, v in attrs.items() if v is not None})
    return ET.SubElement(parent_el, "mxCell", attrib)


def _geometry(cell: ET.Element, x: float, y: float, width: float, height: float) -> None:
    ET.SubElement(cell, "mxGeometry", {
        "x": _num(x), "y": _num(y),
        "width": _num(width), "height": _num(height),
        "as": "geometry",
    })


def _vertex(root_el: ET.Element, cell_id: str, value: str, style: str, parent: str,
            x: float, y: float, width: float, height: float) -> None:
    cell = _cell(root_el, cell_id, value=value, style=style, parent=parent, vertex="1")
    _geometry(cell, x, y, width, height)


def render_drawio(document: SchemaDocument, result: LayoutResult) -> str:
    """
    Render a laid-out document as an mxfile XML string.

    Args:
        document: Entities supplying field/argument rows and labels
        result: Final positions and sizes from the layout driver

    Returns:
        Indented XML text
    """
    mxfile = ET.Element("mxfile")
    diagram = ET.SubElement(mxfile, "diagram", {"name": DIAGRAM_NAME})
    model = ET.SubElement(diagram, "mxGraphModel")
    root_el = ET.SubElement(model, "root")
    _cell(root_el, "0")
    _cell(root_el, "1", parent="0")

    for cls in document.classes():
        node = result.get_node(cls.identity)
        if node is None:
            continue
        _vertex(root_el, node.id, cls.name, CLASS_STYLE, "1", node.x, node.y, node.width, node.height)
        for i, field in enumerate(cls.fields):
            value = field.display()
            _vertex(root_el, f"{node.id}_f{i}", value, ROW_STYLE, node.id,
                    0, CLASS_HEADER_HEIGHT + i * FIELD_HEIGHT, node.width, FIELD_HEIGHT)

    for scalar in document.scalars():
        node = result.get_node(scalar.identity)
        if node is None:
            continue
        _vertex(root_el, node.id, scalar.name, SCALAR_STYLE, "1", node.x, node.y, node.width, node.height)

    for directive in document.directives():
        node = result.get_node(directive.identity)
        if node is None:
            continue
        value = directive.display_name
        if directive.locations:
            value += f"\non {', '.join(directive.locations)}"
        _vertex(root_el, node.id, value, DIRECTIVE_STYLE, "1", node.x, node.y, node.width, node.height)
        for i, arg in enumerate(directive.arguments):
            _vertex(root_el, f"{node.id}_arg{i}", arg.display(), ROW_STYLE, node.id,
                    0, DIRECTIVE_HEIGHT + i * FIELD_HEIGHT, node.width, FIELD_HEIGHT)

    for i, rel in enumerate(result.edges):
        if rel.source not in result.nodes or rel.target not in result.nodes:
            logger.debug("Omitting dangling edge %s -> %s", rel.source, rel.target)
            continue
        style = EDGE_STYLE if rel.hint == EdgeHint.PLAIN else EDGE_STYLE + "dashed=1;"
        cell = _cell(root_el, f"e{i}", value=rel.label, style=style, parent="1", edge="1",
                     source=rel.source, target=rel.target)
        ET.SubElement(cell, "mxGeometry", {"relative": "1", "as": "geometry"})

    tree = ET.ElementTree(mxfile)
    ET.indent(tree, space="    ")
    return ET.tostring(mxfile, encoding="unicode")
