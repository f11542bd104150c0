"""Exceptions raised by the resume matching engine."""
from __future__ import annotations


class ScreenerError(Exception):
    """Base class for every error surfaced to callers of the engine."""


class ResumeNotFoundError(ScreenerError, FileNotFoundError):
    """Raised when the resume path does not resolve to a readable file."""


class UnsupportedFormatError(ScreenerError, ValueError):
    """Raised when the resume file extension is not recognised."""


class ExtractionError(ScreenerError, RuntimeError):
    """Raised when a recognised resume file cannot be turned into text.

    The underlying parser or decoder exception is chained as ``__cause__``.
    """


class InvalidInputError(ScreenerError, ValueError):
    """Raised when the job title or job description text is blank."""
