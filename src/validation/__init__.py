"""Element reference validation."""

from src.validation.glossary import SEMANTIC_ELEMENTS, Glossary, GlossaryEntry, load_glossary
from src.validation.validator import ElementReferenceValidator, TagPolicy

__all__ = [
    "ElementReferenceValidator",
    "Glossary",
    "GlossaryEntry",
    "SEMANTIC_ELEMENTS",
    "TagPolicy",
    "load_glossary",
]
