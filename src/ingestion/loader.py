"""Lesson file loader with encoding detection and front matter support."""

import logging
import re
from pathlib import Path
from typing import Any

import chardet
import yaml

from src.config import LoadingConfig
from src.errors import DecodeError, NotFoundError
from src.models.document import Document

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.MULTILINE | re.DOTALL)
TITLE_HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE)


class DocumentLoader:
    """Reads lesson files into immutable Document values.

    Args:
        config: LoadingConfig with encoding and detection settings.
                Defaults to ``LoadingConfig()``.
    """

    def __init__(self, config: LoadingConfig | None = None) -> None:
        self._config = config or LoadingConfig()

    def load(self, file_path: str | Path) -> Document:
        """Load a lesson file.

        Args:
            file_path: Path to the markdown lesson.

        Returns:
            The loaded Document.

        Raises:
            NotFoundError: If file_path does not exist or is not a file.
            DecodeError: If the file cannot be read or the content is not
                valid text.
        """
        path = Path(file_path)
        if not path.is_file():
            raise NotFoundError(str(path))

        try:
            with open(path, "rb") as handle:
                raw_bytes = handle.read()
        except FileNotFoundError as exc:
            raise NotFoundError(str(path)) from exc
        except OSError as exc:
            raise DecodeError(str(path), f"cannot read: {exc.strerror or exc}") from exc

        text, encoding = self._decode(raw_bytes, str(path))
        logger.debug("Read %s (%d bytes, %s)", path, len(raw_bytes), encoding)
        return self._build_document(text, str(path), encoding, fallback_title=path.stem)

    def from_text(self, text: str, source: str = "<string>") -> Document:
        """Build a Document from an in-memory lesson string."""
        if "\x00" in text:
            raise DecodeError(source, "content contains NUL characters")
        return self._build_document(text, source, "utf-8", fallback_title=Path(source).stem or source)

    def _decode(self, raw_bytes: bytes, source: str) -> tuple[str, str]:
        """Decode raw bytes, falling back to charset detection.

        Returns:
            The decoded text and the encoding used.

        Raises:
            DecodeError: If no encoding yields valid text.
        """
        encoding = self._config.encoding
        codec = encoding
        if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
            codec = "utf-8-sig"

        try:
            text = raw_bytes.decode(codec)
        except UnicodeDecodeError as exc:
            if not self._config.detect_encoding:
                raise DecodeError(source, f"not valid {self._config.encoding}: {exc.reason}") from exc
            text, encoding = self._decode_detected(raw_bytes, source)
        except LookupError as exc:
            raise DecodeError(source, f"unknown encoding '{encoding}'") from exc

        if "\x00" in text:
            raise DecodeError(source, "content contains NUL characters")
        return text, encoding

    def _decode_detected(self, raw_bytes: bytes, source: str) -> tuple[str, str]:
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding")
        confidence = detected.get("confidence") or 0

        if not encoding:
            raise DecodeError(source, "encoding could not be detected")

        if confidence < self._config.min_confidence:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                source,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding), encoding
        except (UnicodeDecodeError, LookupError) as exc:
            raise DecodeError(source, f"detected encoding {encoding} failed: {exc}") from exc

    def _build_document(self, text: str, source: str, encoding: str, fallback_title: str) -> Document:
        metadata: dict[str, Any] = {}
        body = text
        if self._config.parse_front_matter:
            metadata, body = self._split_front_matter(text, source)
        line_offset = text[: len(text) - len(body)].count("\n")

        title = str(metadata.get("title") or "").strip() or self._extract_title(body, fallback_title)
        return Document(
            title=title,
            body=body,
            source_path=source,
            encoding=encoding,
            metadata=metadata,
            line_offset=line_offset,
        )

    def _split_front_matter(self, text: str, source: str) -> tuple[dict[str, Any], str]:
        """Separate a leading YAML front matter block from the body.

        Raises:
            DecodeError: If the front matter is not a YAML mapping with
                string keys.
        """
        match = FRONT_MATTER_PATTERN.match(text)
        if not match:
            return {}, text

        try:
            data = yaml.safe_load(match.group(1))
        except yaml.YAMLError as exc:
            raise DecodeError(source, f"invalid front matter: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DecodeError(source, "front matter must be a YAML mapping")
        if not all(isinstance(key, str) for key in data):
            raise DecodeError(source, "front matter keys must be strings")
        return data, text[match.end():]

    def _extract_title(self, body: str, fallback: str) -> str:
        """Pick the first level-1 heading, else the first heading, else fallback."""
        first_any: str | None = None
        for match in TITLE_HEADING_PATTERN.finditer(body):
            if len(match.group(1)) == 1:
                return match.group(2).strip()
            if first_any is None:
                first_any = match.group(2).strip()
        return first_any or fallback
