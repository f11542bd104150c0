"""Utilities for extracting text from resume files."""
from __future__ import annotations

import enum
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import ExtractionError, ResumeNotFoundError, UnsupportedFormatError
from .settings import DEFAULT_SETTINGS, MatchSettings

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".txt")


class DocumentKind(enum.Enum):
    RESUME = "resume"
    JOB_DESCRIPTION = "job_description"


@dataclass(frozen=True)
class Document:
    """Plain text of one side of a comparison."""

    kind: DocumentKind
    raw_text: str
    source_path: Path | None = None


@dataclass(frozen=True)
class JobDescription:
    """Job posting supplied by the caller. The title is only used for display."""

    title: str
    text: str

    def to_document(self) -> Document:
        return Document(kind=DocumentKind.JOB_DESCRIPTION, raw_text=self.text)


def _coerce_path(path: Union[str, Path]) -> Path:
    if isinstance(path, Path):
        return path
    return Path(path)


def _read_bounded(path: Path, limit: int) -> bytes:
    if not path.is_file():
        raise ResumeNotFoundError(f"Resume file not found: {path}")

    try:
        with path.open("rb") as handle:
            data = handle.read(limit + 1)
    except OSError as exc:
        raise ResumeNotFoundError(f"Resume file could not be read: {path}") from exc

    if len(data) > limit:
        raise ExtractionError(f"Resume file exceeds the {limit} byte limit: {path}")

    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def _decode_text(data: bytes, path: Path) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("Could not decode %s as UTF-8", path)
        raise ExtractionError(f"Could not decode text file as UTF-8: {path}") from exc


def _parse_pdf(data: bytes, path: Path, max_pages: int) -> str:
    if not data:
        return ""

    from pdfminer.high_level import extract_text as pdf_extract_text

    try:
        text = pdf_extract_text(io.BytesIO(data), maxpages=max_pages)
    except Exception as exc:  # pdfminer raises a wide range of parser errors
        logger.warning("Failed to parse PDF %s: %s", path, exc)
        raise ExtractionError(f"Failed to extract text from {path}: {exc}") from exc

    # pdfminer separates pages with form feeds.
    return text.replace("\f", "\n")


def extract_text(
    path: Union[str, Path], *, settings: MatchSettings = DEFAULT_SETTINGS
) -> str:
    """Extract raw text from a resume file.

    Parameters
    ----------
    path:
        Path to a ``.pdf`` or ``.txt`` file. Strings are automatically
        converted to :class:`~pathlib.Path` objects.
    settings:
        Supplies the read size limit and the PDF page limit.

    Returns
    -------
    str
        The extracted text. An empty file yields an empty string.

    Raises
    ------
    UnsupportedFormatError
        If the extension is not ``.pdf`` or ``.txt``.
    ResumeNotFoundError
        If the file does not exist or cannot be read.
    ExtractionError
        If the file is too large or its content cannot be parsed.
    """

    resume_path = _coerce_path(path)
    suffix = resume_path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Unsupported resume format '{resume_path.suffix or resume_path.name}'. "
            f"Use one of: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    data = _read_bounded(resume_path, settings.max_file_bytes)
    if suffix == ".txt":
        text = _decode_text(data, resume_path)
    else:
        text = _parse_pdf(data, resume_path, settings.max_pdf_pages)

    logger.debug("Extracted %d characters from %s", len(text), resume_path)
    return text


def load_resume(
    path: Union[str, Path], *, settings: MatchSettings = DEFAULT_SETTINGS
) -> Document:
    """Extract a resume file into an immutable :class:`Document`."""

    resume_path = _coerce_path(path)
    text = extract_text(resume_path, settings=settings)
    return Document(kind=DocumentKind.RESUME, raw_text=text, source_path=resume_path)
