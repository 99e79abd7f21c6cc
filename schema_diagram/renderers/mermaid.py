"""
Mermaid class diagram renderer.

Mermaid lays the diagram out itself, so this renderer only needs the schema
document: directives, then scalars, then classes, then relations.
"""

from ..core.models import ClassStereotype, EdgeHint, SchemaDocument

_STEREOTYPE_LABELS = {
    ClassStereotype.INPUT: "input",
    ClassStereotype.INTERFACE: "interface",
    ClassStereotype.ENUM: "enumeration",
}


def _mermaid_names(document: SchemaDocument) -> dict[str, str]:
    """Map entity identities to the bare names Mermaid uses for classes."""
    return {entity.identity: entity.name for entity in document.entities}


def render_mermaid(document: SchemaDocument) -> str:
    """Render the document as a Mermaid `classDiagram`."""
    lines = ["classDiagram"]

    for directive in document.directives():
        lines.append(f"class {directive.name} {{")
        lines.append("    <<directive>>")
        for arg in directive.arguments:
            lines.append(f"    +{arg.display()}")
        if directive.locations:
            lines.append(f"    +on {', '.join(directive.locations)}")
        lines.append("}")

    for scalar in document.scalars():
        lines.append(f"class {scalar.name} {{")
        lines.append("    <<scalar>>")
        lines.append("}")

    for cls in document.classes():
        lines.append(f"class {cls.name} {{")
        stereotype = _STEREOTYPE_LABELS.get(cls.stereotype)
        if stereotype:
            lines.append(f"    <<{stereotype}>>")
        for field in cls.fields:
            if field.type:
                lines.append(f"    +{field.name} {field.type}")
            else:
                lines.append(f"    {field.name}")
        lines.append("}")

    names = _mermaid_names(document)
    for rel in document.relations:
        arrow = "-->" if rel.hint == EdgeHint.PLAIN else "..>"
        source = names.get(rel.source, rel.source)
        target = names.get(rel.target, rel.target)
        lines.append(f"{source} {arrow} {target} : {rel.label}")

    return "\n".join(lines) + "\n"
