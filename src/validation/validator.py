"""Check element references in a parsed lesson against the glossary."""

import logging
import re
from collections.abc import Container, Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from src.config import DEFAULT_IGNORED_TAGS
from src.models.document import Document
from src.models.parsed import CodeBlock, Section
from src.models.report import ElementReference, ValidationReport
from src.validation.glossary import Glossary

logger = logging.getLogger(__name__)

# An opening or closing tag: "<header>", "</footer>", "<time datetime=...>".
# Requires a letter right after "<" so comparisons like "a < b" and autolinks
# like "<https://...>" do not match.
TAG_PATTERN = r"</?([A-Za-z][A-Za-z0-9-]*)(?=[\s/>])"


class TagPolicy(BaseModel):
    """What counts as a reference to an HTML element."""

    model_config = ConfigDict(frozen=True)

    pattern: str = TAG_PATTERN
    ignored_tags: frozenset[str] = Field(default_factory=lambda: frozenset(DEFAULT_IGNORED_TAGS))

    def find_tags(self, text: str, keep: Container[str] = ()) -> list[tuple[str, int]]:
        """Return ``(name, line_offset)`` for each tag found in text.

        ``line_offset`` is the 0-based line within ``text``. Names are
        lower-cased. Ignored tags are skipped unless listed in ``keep``.
        """
        found: list[tuple[str, int]] = []
        for match in re.finditer(self.pattern, text):
            name = match.group(1).lower()
            if name in self.ignored_tags and name not in keep:
                continue
            found.append((name, text.count("\n", 0, match.start())))
        return found


def _code_body_offset(block: CodeBlock) -> int:
    # Content starts on the line after the opening fence.
    return block.line_start + 1


class ElementReferenceValidator:
    """Validates that referenced elements are defined and demonstrated.

    A *mention* is a tag inside prose; a *demonstration* is a tag inside a
    code block. The validator holds no mutable state, so one instance can be
    shared across threads.

    Args:
        glossary: The canonical element glossary.
        policy: Tag detection policy. Defaults to ``TagPolicy()``.
    """

    def __init__(self, glossary: Glossary, policy: TagPolicy | None = None) -> None:
        self._glossary = glossary
        self._policy = policy or TagPolicy()

    @property
    def glossary(self) -> Glossary:
        return self._glossary

    def collect_references(self, sections: Iterable[Section]) -> list[ElementReference]:
        """Find every element reference, in document order."""
        references: list[ElementReference] = []
        keep = self._glossary.names
        for section in sections:
            for name, _ in self._policy.find_tags(section.heading, keep=keep):
                references.append(
                    ElementReference(name=name, section=section.heading, kind="mention", line=section.line_start)
                )

            for block in section.blocks:
                if isinstance(block, CodeBlock):
                    kind = "demonstration"
                    text = block.content
                    first_line = _code_body_offset(block)
                else:
                    kind = "mention"
                    text = block.text
                    first_line = block.line_start

                for name, offset in self._policy.find_tags(text, keep=keep):
                    references.append(
                        ElementReference(
                            name=name,
                            section=section.heading,
                            kind=kind,
                            line=first_line + offset,
                        )
                    )
        return references

    def validate(
        self, sections: Sequence[Section], document: Document | None = None
    ) -> ValidationReport:
        """Produce a ValidationReport for a parsed lesson.

        Args:
            sections: Sections in document order.
            document: The source document, used only for report labels.

        Returns:
            The report. ``undefined`` is sorted by name; ``undemonstrated``
            follows glossary declaration order.
        """
        references = self.collect_references(sections)
        referenced = {ref.name for ref in references}
        demonstrated = {ref.name for ref in references if ref.kind == "demonstration"}

        known = set(self._glossary.names)
        undefined = tuple(sorted(referenced - known))
        undemonstrated = tuple(name for name in self._glossary.names if name not in demonstrated)

        logger.debug(
            "Validated %d sections: %d references, %d undefined, %d undemonstrated",
            len(sections),
            len(references),
            len(undefined),
            len(undemonstrated),
        )

        return ValidationReport(
            source_path=document.source_path if document else "<string>",
            title=document.title if document else "",
            undefined=undefined,
            undemonstrated=undemonstrated,
            references=tuple(references),
        )
