"""Heading- and fence-aware section parser for markdown lessons."""

import logging
import re
from dataclasses import dataclass, field

from src.config import ParsingConfig
from src.errors import MalformedFenceError
from src.models.document import Document
from src.models.parsed import CodeBlock, ProseBlock, Section

logger = logging.getLogger(__name__)

# ATX headings: up to three leading spaces, 1-6 hashes, then whitespace or
# end of line. Optional closing hashes are dropped from the heading text.
HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
FENCE_CLOSE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")


@dataclass
class _OpenFence:
    """A code fence seen but not yet closed."""

    marker: str
    info: str
    line_start: int
    lines: list[str] = field(default_factory=list)

    def closes_on(self, line: str) -> bool:
        match = FENCE_CLOSE_PATTERN.match(line)
        if not match:
            return False
        closing = match.group(1)
        return closing[0] == self.marker[0] and len(closing) >= len(self.marker)

    def to_block(self) -> CodeBlock:
        info = self.info.strip()
        return CodeBlock(
            language=info.split()[0] if info else "",
            info=info,
            content="\n".join(self.lines),
            line_start=self.line_start,
        )


@dataclass
class _OpenSection:
    """The section currently receiving lines."""

    heading: str | None  # None until the first heading is seen
    level: int
    line_start: int
    blocks: list[ProseBlock | CodeBlock] = field(default_factory=list)
    prose: list[str] = field(default_factory=list)
    prose_start: int = 0

    def add_prose(self, line: str, line_number: int) -> None:
        if not self.prose:
            if not line.strip():
                return
            self.prose_start = line_number
        self.prose.append(line)

    def flush_prose(self) -> None:
        while self.prose and not self.prose[-1].strip():
            self.prose.pop()
        if self.prose:
            self.blocks.append(ProseBlock(text="\n".join(self.prose), line_start=self.prose_start))
        self.prose = []

    def to_section(self) -> Section:
        self.flush_prose()
        return Section(
            heading=self.heading or "",
            level=self.level,
            blocks=tuple(self.blocks),
            line_start=self.line_start,
        )


class SectionParser:
    """Splits a lesson Document into ordered Sections.

    Scanning is line by line:
    1. A heading line closes the open section and starts a new one
    2. A fence line opens a code block; lines up to the matching closing
       fence become that block's literal content
    3. Every other line is prose of the open section

    Args:
        config: ParsingConfig controlling fence/heading interaction.
                Defaults to ``ParsingConfig()``.
    """

    def __init__(self, config: ParsingConfig | None = None) -> None:
        self._config = config or ParsingConfig()

    def parse(self, document: Document) -> list[Section]:
        """Parse a document into sections in document order.

        Args:
            document: The loaded lesson.

        Returns:
            Sections in input order. A document without headings yields a
            single unnamed section.

        Raises:
            MalformedFenceError: If a code fence is still open at end of input,
                or a heading appears inside an open fence.
        """
        sections: list[Section] = []
        current = _OpenSection(heading=None, level=1, line_start=1 + document.line_offset)
        fence: _OpenFence | None = None

        for line_number, line in enumerate(document.body.splitlines(), start=1 + document.line_offset):
            if fence is not None:
                if fence.closes_on(line):
                    current.blocks.append(fence.to_block())
                    fence = None
                elif self._config.headings_close_fences and HEADING_PATTERN.match(line):
                    raise MalformedFenceError(
                        document.source_path,
                        current.heading or "",
                        fence.line_start,
                        f"heading at line {line_number} begins before the fence is closed",
                    )
                else:
                    fence.lines.append(line)
                continue

            fence_match = FENCE_OPEN_PATTERN.match(line)
            if fence_match and not (fence_match.group(1)[0] == "`" and "`" in fence_match.group(2)):
                current.flush_prose()
                fence = _OpenFence(
                    marker=fence_match.group(1),
                    info=fence_match.group(2),
                    line_start=line_number,
                )
                continue

            heading_match = HEADING_PATTERN.match(line)
            if heading_match:
                closed = current.to_section()
                if current.heading is not None or closed.blocks:
                    sections.append(closed)
                current = _OpenSection(
                    heading=(heading_match.group(2) or "").strip(),
                    level=len(heading_match.group(1)),
                    line_start=line_number,
                )
                continue

            current.add_prose(line, line_number)

        if fence is not None:
            raise MalformedFenceError(
                document.source_path,
                current.heading or "",
                fence.line_start,
                "end of input reached before the closing fence",
            )

        closed = current.to_section()
        if current.heading is not None or closed.blocks or not sections:
            sections.append(closed)

        logger.debug("Parsed %d sections from %s", len(sections), document.source_path)
        return sections
