"""Validation result models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ElementReference(BaseModel):
    """One occurrence of an HTML tag in a lesson."""

    model_config = ConfigDict(frozen=True)

    name: str
    section: str  # heading of the section the tag occurs in
    kind: Literal["mention", "demonstration"]
    line: int


class ValidationReport(BaseModel):
    """The outcome of validating one lesson against the glossary.

    ``undefined`` lists elements the lesson references that have no glossary
    entry. ``undemonstrated`` lists glossary elements that never appear in a
    code example.
    """

    model_config = ConfigDict(frozen=True)

    source_path: str = "<string>"
    title: str = ""
    undefined: tuple[str, ...] = ()
    undemonstrated: tuple[str, ...] = ()
    references: tuple[ElementReference, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.undefined and not self.undemonstrated

    def to_dict(self) -> dict[str, Any]:
        """Summary form for JSON export (references omitted)."""
        return {
            "source_path": self.source_path,
            "title": self.title,
            "undefined": list(self.undefined),
            "undemonstrated": list(self.undemonstrated),
            "clean": self.is_clean,
        }
