"""High level orchestration helpers for the resume matching workflow."""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, List

from . import matching
from .errors import InvalidInputError
from .extractor import JobDescription, load_resume
from .preprocessing import STOP_WORDS, TokenStream
from .settings import DEFAULT_SETTINGS, MatchSettings

logger = logging.getLogger(__name__)


def load_job_description(path: Path | str) -> str:
    """Load a job description from a plain text file."""

    job_path = Path(path)
    if not job_path.exists():
        raise FileNotFoundError(f"Job description file not found: {job_path}")
    return job_path.read_text(encoding="utf-8")


def _tokens(text: str, settings: MatchSettings) -> TokenStream:
    return TokenStream(
        text,
        min_length=settings.min_token_length,
        stop_words=STOP_WORDS if settings.use_stop_words else None,
    )


def _validate(job: JobDescription) -> None:
    if not job.title.strip():
        raise InvalidInputError("Job title must not be empty.")
    if not job.text.strip():
        raise InvalidInputError("Job description text must not be empty.")


def score_texts(
    resume_text: str,
    job_description_text: str,
    *,
    job_title: str = "",
    settings: MatchSettings | None = None,
    scorer: matching.Scorer | None = None,
) -> matching.ScoreResult:
    """Score resume text that has already been extracted.

    Blank job description text is rejected with :class:`InvalidInputError`;
    an empty resume simply scores ``0.0``.
    """

    if not job_description_text.strip():
        raise InvalidInputError("Job description text must not be empty.")

    settings = settings or DEFAULT_SETTINGS
    if scorer is None:
        scorer = matching.TfidfScorer(top_k=settings.top_k)

    result = scorer.score(
        _tokens(resume_text, settings), _tokens(job_description_text, settings)
    )
    return dataclasses.replace(
        result,
        resume_preview=resume_text[: settings.preview_length],
        job_title=job_title,
    )


def score_resume(
    resume_path: Path | str,
    job_title: str,
    job_description_text: str,
    *,
    settings: MatchSettings | None = None,
    scorer: matching.Scorer | None = None,
) -> matching.ScoreResult:
    """Score a resume file against a job description.

    Parameters
    ----------
    resume_path:
        Path to a ``.pdf`` or ``.txt`` resume.
    job_title:
        Display-only title carried through to the result.
    job_description_text:
        Raw text of the job specification.
    settings:
        Engine constants. ``None`` uses :data:`DEFAULT_SETTINGS`.
    scorer:
        Alternative scoring strategy. ``None`` uses :class:`matching.TfidfScorer`.

    Raises
    ------
    InvalidInputError
        If the title or the job description is blank. Checked before the file
        is read.
    ResumeNotFoundError, UnsupportedFormatError, ExtractionError
        Propagated from the extractor.
    """

    job = JobDescription(title=job_title, text=job_description_text)
    _validate(job)

    settings = settings or DEFAULT_SETTINGS
    resume = load_resume(resume_path, settings=settings)
    job_document = job.to_document()
    result = score_texts(
        resume.raw_text,
        job_document.raw_text,
        job_title=job.title,
        settings=settings,
        scorer=scorer,
    )
    logger.info(
        "Scored %s against '%s': %.4f (%d shared terms)",
        resume.source_path,
        job.title,
        result.score,
        len(result.top_overlap),
    )
    return result


def result_to_dict(result: matching.ScoreResult) -> Dict[str, Any]:
    """Convert a :class:`ScoreResult` into its serialisable form."""

    return {
        "score": result.score,
        "topOverlap": [
            {
                "term": entry.term,
                "resumeTfIdf": entry.resume_weight,
                "jdTfIdf": entry.jd_weight,
            }
            for entry in result.top_overlap
        ],
        "resumePreview": result.resume_preview,
    }


def format_result(result: matching.ScoreResult) -> List[str]:
    """Render the score and overlap terms as display lines."""

    lines = [f"Score: {result.score:.4f}"]
    for entry in result.top_overlap:
        lines.append(f"{entry.term}   (r={entry.resume_weight:.3f}, jd={entry.jd_weight:.3f})")
    return lines
