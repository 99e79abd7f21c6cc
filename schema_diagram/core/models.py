"""
Core data models for schema diagrams.

Two layers of records live here:
- Schema entities (classes, scalars, directives) as produced by the schema
  provider. They are a closed set of variants discriminated by `category`,
  each carrying only the attributes its size formula needs.
- Layout records (Node, Edge, Canvas, LayoutResult) that the force
  simulation and the renderers work with.

Field Naming Convention:
- Edges use `source` and `target`
- For backward compatibility, `from`/`to` are accepted on input and converted
"""

import math
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


# Sizing constants (canvas units)
CLASS_WIDTH = 200
CLASS_HEADER_HEIGHT = 30
FIELD_HEIGHT = 20
SCALAR_WIDTH = 80
SCALAR_HEIGHT = 80
DIRECTIVE_WIDTH = 160
DIRECTIVE_HEIGHT = 90

DEFAULT_CANVAS_WIDTH = 1920
DEFAULT_CANVAS_HEIGHT = 1080


class NodeCategory(str, Enum):
    """Logical categories of diagram nodes."""
    CLASS = "class"
    SCALAR = "scalar"
    DIRECTIVE = "directive"


class ClassStereotype(str, Enum):
    """Which kind of schema type a class entity was built from."""
    TYPE = "type"
    INPUT = "input"
    INTERFACE = "interface"
    ENUM = "enum"


class EdgeHint(str, Enum):
    """Rendering hints for relations. Ignored by the layout engine."""
    PLAIN = "plain"            # Solid arrow (field ownership)
    DEPENDENCY = "dependency"  # Dashed arrow (input usage)
    DIRECTIVE = "directive"    # Dashed arrow from a directive


# --- Layout records ---

class Node(BaseModel):
    """A positioned, sized node as seen by the simulation and renderers."""
    id: str
    name: str
    category: NodeCategory = NodeCategory.CLASS
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    x: float = Field(default=0.0, allow_inf_nan=False)
    y: float = Field(default=0.0, allow_inf_nan=False)

    def center(self) -> tuple[float, float]:
        """Get the center point of the node."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    def bounds(self) -> tuple[float, float, float, float]:
        """Get the bounding box (x, y, right, bottom)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


class Edge(BaseModel):
    """
    A relation between two nodes.

    Uses `source` and `target` as canonical field names.
    Accepts `from`/`to` on input for backward compatibility.
    """
    source: str  # Source node identity
    target: str  # Target node identity
    label: str = ""
    hint: EdgeHint = EdgeHint.PLAIN

    @model_validator(mode='before')
    @classmethod
    def convert_legacy_fields(cls, data: Any) -> Any:
        """Convert legacy 'from'/'to' fields to 'source'/'target'."""
        if isinstance(data, dict):
            # 'from' is a Python keyword, so it only ever arrives via dicts
            if 'from' in data and 'source' not in data:
                data['source'] = data.pop('from')
            if 'from_node' in data and 'source' not in data:
                data['source'] = data.pop('from_node')
            if 'to' in data and 'target' not in data:
                data['target'] = data.pop('to')
            if 'to_node' in data and 'target' not in data:
                data['target'] = data.pop('to_node')
        return data


class Canvas(BaseModel):
    """Region used for initial random placement only."""
    width: float = Field(default=DEFAULT_CANVAS_WIDTH, gt=0)
    height: float = Field(default=DEFAULT_CANVAS_HEIGHT, gt=0)

    @property
    def area(self) -> float:
        return self.width * self.height


# --- Schema entities ---

class FieldSpec(BaseModel):
    """A field of an object, interface or input type (or an enum value)."""
    name: str
    type: str = ""
    required: bool = False

    def display(self) -> str:
        return f"{self.name}: {self.type}" if self.type else self.name


class ArgumentSpec(BaseModel):
    """An argument of a directive definition."""
    name: str
    type: str
    required: bool = False
    default_value: str = ""

    def display(self) -> str:
        value = f"{self.name}: {self.type}"
        if self.default_value:
            value += f" = {self.default_value}"
        return value


class ClassEntity(BaseModel):
    """An object, interface, input or enum type."""
    category: Literal["class"] = "class"
    name: str
    stereotype: ClassStereotype = ClassStereotype.TYPE
    description: str = ""
    fields: list[FieldSpec] = Field(default_factory=list)

    @property
    def identity(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name

    def size(self) -> tuple[float, float]:
        return (CLASS_WIDTH, CLASS_HEADER_HEIGHT + len(self.fields) * FIELD_HEIGHT)

    def to_node(self, x: float = 0.0, y: float = 0.0) -> Node:
        width, height = self.size()
        return Node(id=self.identity, name=self.display_name, category=NodeCategory.CLASS,
                    width=width, height=height, x=x, y=y)


class ScalarEntity(BaseModel):
    """A custom scalar definition. Always drawn at a fixed size."""
    category: Literal["scalar"] = "scalar"
    name: str
    description: str = ""

    @property
    def identity(self) -> str:
        return f"scalar_{self.name}"

    @property
    def display_name(self) -> str:
        return self.name

    def size(self) -> tuple[float, float]:
        return (SCALAR_WIDTH, SCALAR_HEIGHT)

    def to_node(self, x: float = 0.0, y: float = 0.0) -> Node:
        width, height = self.size()
        return Node(id=self.identity, name=self.display_name, category=NodeCategory.SCALAR,
                    width=width, height=height, x=x, y=y)


class DirectiveEntity(BaseModel):
    """A directive definition with its arguments and allowed locations."""
    category: Literal["directive"] = "directive"
    name: str
    description: str = ""
    arguments: list[ArgumentSpec] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)

    @property
    def identity(self) -> str:
        return f"directive_{self.name}"

    @property
    def display_name(self) -> str:
        return f"@{self.name}"

    def size(self) -> tuple[float, float]:
        return (DIRECTIVE_WIDTH, DIRECTIVE_HEIGHT + len(self.arguments) * FIELD_HEIGHT)

    def to_node(self, x: float = 0.0, y: float = 0.0) -> Node:
        width, height = self.size()
        return Node(id=self.identity, name=self.display_name, category=NodeCategory.DIRECTIVE,
                    width=width, height=height, x=x, y=y)


SchemaEntity = Annotated[
    Union[ClassEntity, ScalarEntity, DirectiveEntity],
    Field(discriminator="category"),
]


class SchemaDocument(BaseModel):
    """Ordered entities and relations produced by the schema provider."""
    entities: list[SchemaEntity] = Field(default_factory=list)
    relations: list[Edge] = Field(default_factory=list)

    def classes(self) -> list[ClassEntity]:
        return [e for e in self.entities if isinstance(e, ClassEntity)]

    def scalars(self) -> list[ScalarEntity]:
        return [e for e in self.entities if isinstance(e, ScalarEntity)]

    def directives(self) -> list[DirectiveEntity]:
        return [e for e in self.entities if isinstance(e, DirectiveEntity)]

    def get_entity(self, identity: str) -> Optional[Union[ClassEntity, ScalarEntity, DirectiveEntity]]:
        """Get an entity by identity (O(n) - build a Graph for indexed access)."""
        for entity in self.entities:
            if entity.identity == identity:
                return entity
        return None


class LayoutResult(BaseModel):
    """
    Final positions of one layout run.

    Renderers must treat this as read-only. The canvas is the one used for
    initial placement; use bounds() for the extent actually occupied.
    """
    nodes: dict[str, Node]
    edges: list[Edge] = Field(default_factory=list)
    canvas: Canvas = Field(default_factory=Canvas)
    iterations: int = 0
    ideal_edge_length: float = 0.0

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def resolved_edges(self) -> list[Edge]:
        """Edges whose endpoints both exist."""
        return [e for e in self.edges if e.source in self.nodes and e.target in self.nodes]

    def dangling_edges(self) -> list[Edge]:
        return [e for e in self.edges if e.source not in self.nodes or e.target not in self.nodes]

    def bounds(self) -> tuple[float, float, float, float]:
        """Tight bounding box (x, y, right, bottom) over all node rectangles."""
        if not self.nodes:
            return (0.0, 0.0, 0.0, 0.0)
        boxes = [n.bounds() for n in self.nodes.values()]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        left, top, right, bottom = self.bounds()
        return {
            "nodes": [n.model_dump(mode="json") for n in self.nodes.values()],
            "edges": [e.model_dump(mode="json") for e in self.edges],
            "canvas": self.canvas.model_dump(),
            "bounds": {"x": left, "y": top, "width": right - left, "height": bottom - top},
            "iterations": self.iterations,
            "ideal_edge_length": self.ideal_edge_length,
        }
