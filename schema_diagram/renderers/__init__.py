"""
Renderers - serialize a schema document (and its layout) to text.

Formats:
- mermaid: class diagram markup, laid out by Mermaid itself
- drawio: mxfile XML positioned by the force layout
- json: the raw layout result
"""

import json
import logging
import random
from typing import Optional

from ..core.config import LayoutConfig
from ..core.driver import layout_document
from ..core.errors import UnknownFormatError
from ..core.models import LayoutResult, SchemaDocument
from .drawio import render_drawio
from .mermaid import render_mermaid

logger = logging.getLogger(__name__)

FORMATS = ("mermaid", "drawio", "json")


def render_json(result: LayoutResult) -> str:
    """Render a layout result as indented JSON."""
    return json.dumps(result.to_json_dict(), indent=2)


def layout_for_render(
    document: SchemaDocument,
    config: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
) -> LayoutResult:
    """Lay out a document, or return an empty result if it has no entities."""
    config = config or LayoutConfig()
    if not document.entities:
        logger.info("Schema has no entities; rendering an empty diagram")
        return LayoutResult(nodes={}, edges=list(document.relations), canvas=config.canvas)
    return layout_document(document, config, rng)


def render(
    document: SchemaDocument,
    fmt: str = "mermaid",
    config: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Render a document in the requested format.

    Layout runs once, and only for formats that need positions.

    Raises:
        UnknownFormatError: If fmt is not one of FORMATS
    """
    if fmt == "mermaid":
        return render_mermaid(document)
    if fmt == "drawio":
        return render_drawio(document, layout_for_render(document, config, rng))
    if fmt == "json":
        return render_json(layout_for_render(document, config, rng))
    raise UnknownFormatError(fmt)


__all__ = [
    "FORMATS",
    "render",
    "render_json",
    "render_mermaid",
    "render_drawio",
    "layout_for_render",
]
