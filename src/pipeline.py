"""Load, parse, and validate lessons, singly or in batches."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import BaseModel

from src.config import AppConfig
from src.errors import LessonLintError
from src.ingestion.loader import DocumentLoader
from src.ingestion.sections import SectionParser
from src.models.document import Document
from src.models.report import ValidationReport
from src.validation.glossary import SEMANTIC_ELEMENTS, Glossary, load_glossary
from src.validation.validator import ElementReferenceValidator, TagPolicy

logger = logging.getLogger(__name__)


class BatchResult(BaseModel):
    """Outcome of linting one document in a batch: a report or an error."""

    source_path: str
    report: ValidationReport | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LessonLinter:
    """Runs the load → parse → validate pipeline.

    The glossary is resolved once at construction and shared read-only by
    every run, including concurrent batch runs.

    Args:
        config: Application configuration. Defaults to ``AppConfig()``.
        glossary: Glossary to validate against. When omitted, the file named
                  by ``config.validation.glossary_path`` is loaded, or the
                  built-in semantic element glossary is used.
    """

    def __init__(self, config: AppConfig | None = None, glossary: Glossary | None = None) -> None:
        self._config = config or AppConfig()
        if glossary is None:
            glossary_path = self._config.validation.glossary_path
            glossary = load_glossary(glossary_path) if glossary_path else SEMANTIC_ELEMENTS

        self._loader = DocumentLoader(self._config.loading)
        self._parser = SectionParser(self._config.parsing)
        self._validator = ElementReferenceValidator(
            glossary, TagPolicy(ignored_tags=frozenset(self._config.validation.ignored_tags))
        )

    @property
    def glossary(self) -> Glossary:
        return self._validator.glossary

    def lint_document(self, document: Document) -> ValidationReport:
        sections = self._parser.parse(document)
        return self._validator.validate(sections, document)

    def lint_file(self, file_path: str | Path) -> ValidationReport:
        """Lint one lesson file.

        Raises:
            NotFoundError, DecodeError, MalformedFenceError: Propagated from
                loading and parsing.
        """
        return self.lint_document(self._loader.load(file_path))

    def lint_text(self, text: str, source: str = "<string>") -> ValidationReport:
        return self.lint_document(self._loader.from_text(text, source))

    def lint_batch(
        self, paths: Sequence[str | Path], max_workers: int | None = None
    ) -> list[BatchResult]:
        """Lint several files independently on a thread pool.

        A failure in one document is recorded in its result and never stops
        the others.

        Args:
            paths: Lesson files to lint.
            max_workers: Pool size. Defaults to ``config.batch.max_workers``.

        Returns:
            One BatchResult per path, in input order.
        """
        workers = max(1, max_workers or self._config.batch.max_workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._lint_one, paths))

    def _lint_one(self, path: str | Path) -> BatchResult:
        try:
            report = self.lint_file(path)
        except LessonLintError as exc:
            logger.error("Failed to lint %s: %s", path, exc)
            return BatchResult(source_path=str(path), error=str(exc))
        return BatchResult(source_path=str(path), report=report)


def lint_file(
    file_path: str | Path, config: AppConfig | None = None, glossary: Glossary | None = None
) -> ValidationReport:
    """Lint one lesson file with a fresh LessonLinter."""
    return LessonLinter(config, glossary).lint_file(file_path)


def lint_text(
    text: str, config: AppConfig | None = None, glossary: Glossary | None = None
) -> ValidationReport:
    """Lint an in-memory lesson with a fresh LessonLinter."""
    return LessonLinter(config, glossary).lint_text(text)
