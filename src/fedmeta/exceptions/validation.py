"""Structured validation error model for metadata file validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single metadata diagnostic with stable code and location context."""

    code: str
    path: str
    entity: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path
        if self.entity:
            location = f"{location}[{self.entity!r}]"
        if self.field:
            location = f"{location}.{self.field}"
        parts = [f"[{self.code}]", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, path, entity, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.entity, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))
