"""
Object Analyzer — completeness diagnostics for RPSL objects.

This module provides lightweight analysis of Entity objects:
    - Attribute inventory (declared / defined / values)
    - Missing mandatory attributes
    - Typed references to other objects
    - Warning flags for records a registry would reject

IMPORTANT: The analyzer does NOT modify the object.
It only produces read-only reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from rpsl.entity import Entity


@dataclass
class Reference:
    """A value pointing at another RPSL object."""
    attribute: str
    type: str
    handle: str


@dataclass
class EntityReport:
    """Analysis report for one RPSL object."""

    type: str
    handle: Optional[str] = None
    is_valid: bool = False

    # Inventory
    declared_attributes: int = 0
    defined_attributes: int = 0
    total_values: int = 0
    commented_values: int = 0

    missing_attributes: List[str] = field(default_factory=list)
    generated_attributes: List[str] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def referenced_types(self) -> List[str]:
        """Distinct referenced types in first-seen order."""
        seen: List[str] = []
        for ref in self.references:
            if ref.type not in seen:
                seen.append(ref.type)
        return seen


def analyze_entity(entity: Entity) -> EntityReport:
    """
    Inspect an RPSL object.

    Checks for:
    - Mandatory and primary key attributes without value
    - Generated attributes carrying input (the registry overwrites them)
    - Typed references and inline comments

    Returns an EntityReport with counts and warnings.
    """
    report = EntityReport(type=entity.get_type(), handle=entity.get_handle())
    report.is_valid = entity.is_valid()

    report.declared_attributes = len(entity.get_attribute_names())
    report.defined_attributes = len(entity)
    report.missing_attributes = entity.get_missing_attributes()

    for name, attribute in entity:
        if attribute.is_generated() and attribute.is_defined():
            report.generated_attributes.append(name)

    for value in entity.iter_values():
        report.total_values += 1
        if value.comment is not None:
            report.commented_values += 1
        if value.type is not None:
            report.references.append(Reference(value.name, value.type, value.value))

    if report.missing_attributes:
        report.add_warning(
            f"Missing mandatory attributes: {', '.join(report.missing_attributes)}"
        )

    if report.handle is None:
        report.add_warning("Incomplete primary key: the object has no handle")

    if report.generated_attributes:
        report.add_warning(
            f"Generated attributes set on input: {', '.join(report.generated_attributes)}"
        )

    return report


def reference_pairs(report: EntityReport) -> List[Tuple[str, str]]:
    """(type, handle) pairs of all references, e.g. for bulk lookups."""
    return [(ref.type, ref.handle) for ref in report.references]
