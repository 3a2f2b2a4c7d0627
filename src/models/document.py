"""Loaded lesson document model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A lesson file read into memory.

    ``body`` is the raw markdown text with any YAML front matter removed;
    the parsed front matter lives in ``metadata``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    source_path: str = "<string>"
    encoding: str = "utf-8"
    metadata: dict[str, Any] = Field(default_factory=dict)
    line_offset: int = 0  # lines of front matter preceding the body
