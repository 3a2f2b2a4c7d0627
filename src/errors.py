"""Exception types raised by the lesson lint pipeline."""


class LessonLintError(Exception):
    """Base class for all lesson lint failures."""


class NotFoundError(LessonLintError, FileNotFoundError):
    """The lesson file does not exist or is not a regular file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Lesson not found: {path}")
        self.path = path


class DecodeError(LessonLintError, ValueError):
    """The lesson content could not be decoded as text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot decode {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedFenceError(LessonLintError, ValueError):
    """A code fence was opened but never closed.

    Carries the heading of the section the fence was opened in and the
    1-based line number of the opening fence.
    """

    def __init__(self, source: str, heading: str, line: int, reason: str) -> None:
        where = f"section '{heading}'" if heading else "unnamed section"
        super().__init__(f"{source}:{line}: unterminated code fence in {where} ({reason})")
        self.source = source
        self.heading = heading
        self.line = line


class GlossaryError(LessonLintError, ValueError):
    """A glossary file is missing, malformed, or declares duplicate elements."""
