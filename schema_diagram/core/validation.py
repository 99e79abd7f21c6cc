"""
Schema document validation - Check entities and relations for structural issues.

Layout tolerates most of these (dangling relations are skipped), so only
duplicate identities are reported as errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import SchemaDocument


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    ERROR = "error"      # Layout will refuse this document
    WARNING = "warning"  # Layout proceeds, output may be incomplete
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in a schema document."""
    severity: IssueSeverity
    message: str
    node_id: str | None = None
    relation: tuple[str, str] | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.node_id:
            result["node_id"] = self.node_id
        if self.relation:
            result["source"], result["target"] = self.relation
        return result


def validate_document(document: "SchemaDocument") -> list[ValidationIssue]:
    """
    Validate a schema document and return a list of issues.

    Checks for:
    - Empty document - INFO
    - Duplicate entity identities - ERROR
    - Relations whose source/target doesn't exist - WARNING
    - Self-referencing relations - INFO
    - Duplicate relations (same source->target and label) - WARNING
    - Orphan entities (no relations) - INFO

    Args:
        document: The document to validate

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    if not document.entities:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Schema has no entities to diagram"
        ))
        return issues

    identities: list[str] = [e.identity for e in document.entities]
    node_ids = set(identities)

    # Duplicate identities
    seen: set[str] = set()
    for identity in identities:
        if identity in seen:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"Duplicate entity identity: {identity}",
                node_id=identity
            ))
        seen.add(identity)

    # Dangling relation endpoints
    for rel in document.relations:
        pair = (rel.source, rel.target)
        if rel.source not in node_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Relation references undefined source: {rel.source}",
                relation=pair
            ))
        if rel.target not in node_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Relation references undefined target: {rel.target}",
                relation=pair
            ))

    # Self-references (recursive types are common in schemas)
    for rel in document.relations:
        if rel.source == rel.target:
            issues.append(ValidationIssue(
                severity=IssueSeverity.INFO,
                message=f"Self-referencing relation on {rel.source}",
                node_id=rel.source,
                relation=(rel.source, rel.target)
            ))

    # Duplicate relations
    seen_relations: set[tuple[str, str, str]] = set()
    for rel in document.relations:
        key = (rel.source, rel.target, rel.label)
        if key in seen_relations:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate relation from {rel.source} to {rel.target} ({rel.label})",
                relation=(rel.source, rel.target)
            ))
        else:
            seen_relations.add(key)

    # Orphans
    connected: set[str] = set()
    for rel in document.relations:
        connected.add(rel.source)
        connected.add(rel.target)
    orphans = [i for i in identities if i not in connected]
    if orphans:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message=f"Entities without relations: {', '.join(orphans)}"
        ))

    return issues


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """
    Create a summary of validation issues.

    Args:
        issues: List of validation issues

    Returns:
        Dictionary with counts by severity
    """
    return {
        "total": len(issues),
        "errors": len([i for i in issues if i.severity == IssueSeverity.ERROR]),
        "warnings": len([i for i in issues if i.severity == IssueSeverity.WARNING]),
        "info": len([i for i in issues if i.severity == IssueSeverity.INFO]),
        "valid": len([i for i in issues if i.severity == IssueSeverity.ERROR]) == 0
    }
