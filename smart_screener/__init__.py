"""Resume to job description matching with TF-IDF cosine similarity."""

from .errors import (
    ExtractionError,
    InvalidInputError,
    ResumeNotFoundError,
    ScreenerError,
    UnsupportedFormatError,
)
from .matching import OverlapEntry, Scorer, ScoreResult, TfidfScorer
from .pipeline import format_result, load_job_description, result_to_dict, score_resume, score_texts
from .settings import DEFAULT_SETTINGS, MatchSettings

__all__ = [
    "DEFAULT_SETTINGS",
    "ExtractionError",
    "InvalidInputError",
    "MatchSettings",
    "OverlapEntry",
    "ResumeNotFoundError",
    "ScoreResult",
    "Scorer",
    "ScreenerError",
    "TfidfScorer",
    "UnsupportedFormatError",
    "format_result",
    "load_job_description",
    "result_to_dict",
    "score_resume",
    "score_texts",
]
