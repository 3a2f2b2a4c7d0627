"""Data models for the lesson lint tool."""

from src.models.document import Document
from src.models.parsed import CodeBlock, ProseBlock, Section
from src.models.report import ElementReference, ValidationReport

__all__ = [
    "CodeBlock",
    "Document",
    "ElementReference",
    "ProseBlock",
    "Section",
    "ValidationReport",
]
