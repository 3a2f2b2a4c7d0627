"""Lesson ingestion: loading and section parsing."""

from src.ingestion.loader import DocumentLoader
from src.ingestion.sections import SectionParser

__all__ = ["DocumentLoader", "SectionParser"]
