"""Canonical glossary of HTML5 semantic elements."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from src.errors import GlossaryError

logger = logging.getLogger(__name__)


class GlossaryEntry(BaseModel):
    """One semantic element and what it is meant to contain."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class Glossary(BaseModel):
    """Ordered, read-only mapping from element name to description.

    Declaration order is significant: validation reports list glossary
    elements in this order.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[GlossaryEntry, ...]

    @model_validator(mode="after")
    def _check_unique_names(self) -> "Glossary":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.name in seen:
                raise ValueError(f"Duplicate glossary element: {entry.name}")
            seen.add(entry.name)
        return self

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.entries)

    def describe(self, name: str) -> str:
        """Return the canonical description of an element.

        Raises:
            KeyError: If the element is not in the glossary.
        """
        for entry in self.entries:
            if entry.name == name:
                return entry.description
        raise KeyError(name)


SEMANTIC_ELEMENTS = Glossary(
    entries=(
        GlossaryEntry(name="header", description="Introductory content or navigational aids for a page or section."),
        GlossaryEntry(name="nav", description="A block of major navigation links."),
        GlossaryEntry(name="main", description="The dominant, unique content of the document."),
        GlossaryEntry(name="article", description="A self-contained composition that makes sense on its own."),
        GlossaryEntry(name="section", description="A thematic grouping of content, typically with a heading."),
        GlossaryEntry(name="aside", description="Content tangentially related to the content around it."),
        GlossaryEntry(name="footer", description="Closing information for its nearest sectioning ancestor."),
        GlossaryEntry(name="figure", description="Self-contained media or illustration referenced from the main flow."),
        GlossaryEntry(name="figcaption", description="A caption or legend for the parent figure."),
        GlossaryEntry(name="details", description="A disclosure widget the user can open to reveal more information."),
        GlossaryEntry(name="mark", description="Text highlighted for reference or relevance."),
        GlossaryEntry(name="time", description="A specific moment or duration, optionally machine-readable."),
    )
)


def load_glossary(path: str | Path) -> Glossary:
    """Load a glossary from a YAML file.

    The file is a mapping of element name to description; mapping order is
    the declaration order.

    Args:
        path: Path to the YAML glossary.

    Returns:
        The loaded Glossary.

    Raises:
        GlossaryError: If the file is missing, not a mapping, or invalid.
    """
    glossary_file = Path(path)
    if not glossary_file.is_file():
        raise GlossaryError(f"Glossary not found: {glossary_file}")

    with open(glossary_file, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise GlossaryError(f"Invalid glossary YAML in {glossary_file}: {exc}") from exc

    if not isinstance(raw, dict) or not raw:
        raise GlossaryError(f"Glossary {glossary_file} must be a non-empty mapping")

    try:
        glossary = Glossary(
            entries=tuple(
                GlossaryEntry(name=str(name).strip().lower(), description=str(description or ""))
                for name, description in raw.items()
            )
        )
    except ValidationError as exc:
        raise GlossaryError(f"Invalid glossary {glossary_file}: {exc}") from exc

    logger.debug("Loaded %d glossary entries from %s", len(glossary), glossary_file)
    return glossary
