"""Tunable constants used by the matching engine."""
from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "SMART_SCREENER_"


def _env_flag(name: str, *, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class MatchSettings:
    """Constants controlling tokenisation, ranking and extraction limits.

    Attributes
    ----------
    min_token_length:
        Tokens shorter than this are discarded as noise.
    use_stop_words:
        Whether :data:`~smart_screener.preprocessing.STOP_WORDS` are removed.
    top_k:
        Maximum number of overlap entries reported.
    preview_length:
        Maximum number of characters of resume text kept as a preview.
    max_file_bytes:
        Upper bound on the number of bytes read from a resume file.
    max_pdf_pages:
        Number of PDF pages parsed; ``0`` parses every page.
    """

    min_token_length: int = 2
    use_stop_words: bool = True
    top_k: int = 10
    preview_length: int = 500
    max_file_bytes: int = 10 * 1024 * 1024
    max_pdf_pages: int = 0

    def __post_init__(self) -> None:
        for field_name in (
            "min_token_length",
            "top_k",
            "preview_length",
            "max_file_bytes",
            "max_pdf_pages",
        ):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must not be negative.")

    @classmethod
    def from_env(cls) -> "MatchSettings":
        """Build settings from ``SMART_SCREENER_*`` environment variables.

        Unset or malformed values keep their defaults.
        """

        defaults = cls()
        overrides: dict[str, int] = {}
        for field_name, env_name in (
            ("min_token_length", "MIN_TOKEN_LENGTH"),
            ("top_k", "TOP_K"),
            ("preview_length", "PREVIEW_LENGTH"),
            ("max_file_bytes", "MAX_FILE_BYTES"),
            ("max_pdf_pages", "MAX_PDF_PAGES"),
        ):
            value = _env_int(ENV_PREFIX + env_name)
            if value is not None and value >= 0:
                overrides[field_name] = value

        return cls(
            use_stop_words=_env_flag(ENV_PREFIX + "STOP_WORDS", default=defaults.use_stop_words),
            **overrides,
        )


DEFAULT_SETTINGS = MatchSettings()
