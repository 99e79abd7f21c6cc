"""
Schema provider - turn GraphQL SDL into entities and relations.

Parsing is delegated to graphql-core. Object, interface, input and enum
types become class entities; scalar and directive definitions become their
own entities. Relations are derived from field, argument and directive
argument types. Built-in scalars never produce relations, and references to
types the document does not define are kept (the layout skips them).
"""

import logging
from pathlib import Path
from typing import Optional, Union

from graphql import GraphQLSyntaxError, parse, print_ast
from graphql.language import (
    DirectiveDefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    StringValueNode,
    TypeNode,
)

from .core.errors import SchemaParseError
from .core.models import (
    ArgumentSpec,
    ClassEntity,
    ClassStereotype,
    DirectiveEntity,
    Edge,
    EdgeHint,
    FieldSpec,
    ScalarEntity,
    SchemaDocument,
)

logger = logging.getLogger(__name__)

BUILTIN_SCALARS = frozenset({"String", "Int", "Float", "Boolean", "ID"})

_STEREOTYPES = {
    ObjectTypeDefinitionNode: ClassStereotype.TYPE,
    InterfaceTypeDefinitionNode: ClassStereotype.INTERFACE,
    InputObjectTypeDefinitionNode: ClassStereotype.INPUT,
    EnumTypeDefinitionNode: ClassStereotype.ENUM,
}


def type_string(type_node: TypeNode) -> str:
    """Render a type reference the way it is written in SDL, e.g. [User!]!"""
    if isinstance(type_node, NonNullTypeNode):
        return type_string(type_node.type) + "!"
    if isinstance(type_node, ListTypeNode):
        return "[" + type_string(type_node.type) + "]"
    if isinstance(type_node, NamedTypeNode):
        return type_node.name.value
    return "unknown"


def base_type(type_node: TypeNode) -> str:
    """Strip list and non-null wrappers off a type reference."""
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        type_node = type_node.type
    if isinstance(type_node, NamedTypeNode):
        return type_node.name.value
    return "unknown"


def _description(node) -> str:
    desc: Optional[StringValueNode] = getattr(node, "description", None)
    return desc.value if desc is not None else ""


class _Builder:
    """Collects entities and relations for one parsed document."""

    def __init__(self, definitions):
        self.definitions = definitions
        self.inputs = {
            d.name.value for d in definitions if isinstance(d, InputObjectTypeDefinitionNode)
        }
        self.scalars = {
            d.name.value for d in definitions if isinstance(d, ScalarTypeDefinitionNode)
        }
        self.document = SchemaDocument()

    def target(self, type_name: str) -> str:
        """Identity of the entity a type name refers to."""
        if type_name in self.scalars:
            return f"scalar_{type_name}"
        return type_name

    def relate(self, source: str, type_name: str, label: str, hint: EdgeHint) -> None:
        self.document.relations.append(
            Edge(source=source, target=self.target(type_name), label=label, hint=hint)
        )

    def build(self) -> SchemaDocument:
        for definition in self.definitions:
            if isinstance(definition, (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode)):
                self.add_object(definition)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self.add_input(definition)
            elif isinstance(definition, EnumTypeDefinitionNode):
                self.add_enum(definition)
            elif isinstance(definition, ScalarTypeDefinitionNode):
                self.document.entities.append(ScalarEntity(
                    name=definition.name.value,
                    description=_description(definition),
                ))
            elif isinstance(definition, DirectiveDefinitionNode):
                self.add_directive(definition)
            else:
                logger.debug("Ignoring %s definition", definition.kind)
        return self.document

    def add_object(self, definition) -> None:
        name = definition.name.value
        fields = definition.fields or ()
        self.document.entities.append(ClassEntity(
            name=name,
            stereotype=_STEREOTYPES[type(definition)],
            description=_description(definition),
            fields=[
                FieldSpec(
                    name=f.name.value,
                    type=type_string(f.type),
                    required=isinstance(f.type, NonNullTypeNode),
                )
                for f in fields
            ],
        ))

        for field in fields:
            field_type = base_type(field.type)
            if field_type not in BUILTIN_SCALARS:
                if field_type in self.scalars:
                    self.relate(name, field_type, "uses", EdgeHint.PLAIN)
                elif field_type in self.inputs:
                    self.relate(name, field_type, "uses", EdgeHint.DEPENDENCY)
                else:
                    self.relate(name, field_type, "has", EdgeHint.PLAIN)

            for arg in field.arguments or ():
                arg_type = base_type(arg.type)
                if arg_type in self.inputs:
                    self.relate(name, arg_type, "uses", EdgeHint.DEPENDENCY)

    def add_input(self, definition: InputObjectTypeDefinitionNode) -> None:
        name = definition.name.value
        fields = definition.fields or ()
        self.document.entities.append(ClassEntity(
            name=name,
            stereotype=ClassStereotype.INPUT,
            description=_description(definition),
            fields=[
                FieldSpec(
                    name=f.name.value,
                    type=type_string(f.type),
                    required=isinstance(f.type, NonNullTypeNode),
                )
                for f in fields
            ],
        ))

        for field in fields:
            field_type = base_type(field.type)
            if field_type not in BUILTIN_SCALARS:
                self.relate(name, field_type, "uses", EdgeHint.DEPENDENCY)

    def add_enum(self, definition: EnumTypeDefinitionNode) -> None:
        self.document.entities.append(ClassEntity(
            name=definition.name.value,
            stereotype=ClassStereotype.ENUM,
            description=_description(definition),
            fields=[FieldSpec(name=v.name.value) for v in definition.values or ()],
        ))

    def add_directive(self, definition: DirectiveDefinitionNode) -> None:
        directive = DirectiveEntity(
            name=definition.name.value,
            description=_description(definition),
            locations=[loc.value for loc in definition.locations or ()],
        )

        for arg in definition.arguments or ():
            directive.arguments.append(ArgumentSpec(
                name=arg.name.value,
                type=type_string(arg.type),
                required=isinstance(arg.type, NonNullTypeNode),
                default_value=print_ast(arg.default_value) if arg.default_value is not None else "",
            ))

            arg_type = base_type(arg.type)
            if arg_type not in BUILTIN_SCALARS:
                self.relate(directive.identity, arg_type, "uses", EdgeHint.DIRECTIVE)

        self.document.entities.append(directive)


def parse_schema(source: str) -> SchemaDocument:
    """
    Parse GraphQL SDL into a schema document.

    Args:
        source: Schema source text

    Returns:
        SchemaDocument with entities in definition order

    Raises:
        SchemaParseError: If the source is not valid SDL
    """
    if not source.strip():
        return SchemaDocument()

    try:
        ast = parse(source, no_location=True)
    except GraphQLSyntaxError as e:
        raise SchemaParseError(e.message) from e

    document = _Builder(ast.definitions).build()
    logger.debug(
        "Parsed schema: %d entities, %d relations",
        len(document.entities), len(document.relations),
    )
    return document


def load_schema(path: Union[str, Path]) -> SchemaDocument:
    """Read and parse a schema file."""
    return parse_schema(Path(path).read_text(encoding="utf-8"))
