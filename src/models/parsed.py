"""Parsed lesson structure: sections and their content blocks."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ProseBlock(BaseModel):
    """A run of consecutive explanatory text lines."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prose"] = "prose"
    text: str
    line_start: int = 1


class CodeBlock(BaseModel):
    """A fenced code example.

    ``language`` is the first word of the fence info string (``""`` when the
    fence has none); ``info`` keeps the whole info string as written.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    language: str = ""
    info: str = ""
    content: str
    line_start: int = 1


class Section(BaseModel):
    """A titled span of the lesson, from one heading up to the next.

    The unnamed section (empty heading) holds content that precedes any
    heading, or the whole document when it has no headings at all.
    """

    model_config = ConfigDict(frozen=True)

    heading: str = ""
    level: int = Field(default=1, ge=1, le=6)
    blocks: tuple[ProseBlock | CodeBlock, ...] = ()
    line_start: int = 1

    @property
    def prose_blocks(self) -> list[ProseBlock]:
        return [block for block in self.blocks if isinstance(block, ProseBlock)]

    @property
    def code_blocks(self) -> list[CodeBlock]:
        return [block for block in self.blocks if isinstance(block, CodeBlock)]

    @property
    def prose_text(self) -> str:
        """All prose of this section joined by blank lines."""
        return "\n\n".join(block.text for block in self.prose_blocks)
