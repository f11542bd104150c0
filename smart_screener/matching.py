"""Core resume matching logic using a light-weight TF-IDF implementation."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Tuple

from .vectorizer import TermVector, vectorize

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 10


@dataclass(frozen=True)
class OverlapEntry:
    """A term carrying non-zero weight in both the resume and the job description."""

    term: str
    resume_weight: float
    jd_weight: float

    @property
    def product(self) -> float:
        return self.resume_weight * self.jd_weight


@dataclass(frozen=True)
class ScoreResult:
    """Represents the similarity between a resume and a job description."""

    score: float
    top_overlap: Tuple[OverlapEntry, ...]
    resume_preview: str = ""
    job_title: str = ""


class Scorer(Protocol):
    """Protocol describing a scoring strategy over two token sequences."""

    def score(self, resume_tokens: Iterable[str], job_tokens: Iterable[str]) -> ScoreResult:
        ...


def _magnitude(vector: TermVector) -> float:
    return math.sqrt(math.fsum(vector[term] * vector[term] for term in sorted(vector)))


def cosine_similarity(vec_a: TermVector, vec_b: TermVector) -> float:
    """Cosine of the angle between two sparse vectors, clamped to ``[0, 1]``.

    A vector with zero magnitude scores ``0.0``.
    """

    if not vec_a or not vec_b:
        return 0.0

    common_terms = sorted(set(vec_a).intersection(vec_b))
    numerator = math.fsum(vec_a[term] * vec_b[term] for term in common_terms)
    norm_a = _magnitude(vec_a)
    norm_b = _magnitude(vec_b)

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return min(1.0, max(0.0, numerator / (norm_a * norm_b)))


def rank_overlap(
    resume_vector: TermVector, job_vector: TermVector, *, top_k: int = DEFAULT_TOP_K
) -> Tuple[OverlapEntry, ...]:
    """Return the shared terms that contribute most to the similarity.

    Entries are ordered by ``resume_weight * jd_weight`` descending, with equal
    products ordered alphabetically, and truncated to ``top_k``.
    """

    if top_k <= 0:
        return ()

    candidates: List[OverlapEntry] = []
    for term in sorted(set(resume_vector).intersection(job_vector)):
        resume_weight = resume_vector[term]
        jd_weight = job_vector[term]
        if resume_weight <= 0.0 or jd_weight <= 0.0:
            continue
        candidates.append(OverlapEntry(term=term, resume_weight=resume_weight, jd_weight=jd_weight))

    candidates.sort(key=lambda entry: (-entry.product, entry.term))
    return tuple(candidates[:top_k])


class TfidfScorer:
    """Cosine similarity between TF-IDF vectors of the resume and job description."""

    def __init__(self, top_k: int = DEFAULT_TOP_K) -> None:
        self.top_k = top_k

    def score(self, resume_tokens: Iterable[str], job_tokens: Iterable[str]) -> ScoreResult:
        corpus = vectorize(resume_tokens, job_tokens)
        score = cosine_similarity(corpus.resume, corpus.job)
        overlap = rank_overlap(corpus.resume, corpus.job, top_k=self.top_k)
        logger.debug(
            "Vocabulary of %d terms, %d shared terms reported, score %.4f",
            len(corpus.vocabulary),
            len(overlap),
            score,
        )
        return ScoreResult(score=score, top_overlap=overlap)
