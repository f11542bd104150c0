"""TF-IDF vectors over the two-document corpus {resume, job description}."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

TermVector = Dict[str, float]

# The corpus always holds exactly the resume and the job description.
CORPUS_SIZE = 2


@dataclass(frozen=True)
class CorpusVectors:
    """Weighted term vectors for both documents plus the shared statistics."""

    vocabulary: Tuple[str, ...]
    resume: TermVector
    job: TermVector
    idf: Dict[str, float]


def term_frequencies(tokens: Iterable[str]) -> Dict[str, float]:
    """Return ``count(t) / total`` for every term; empty for an empty sequence."""

    counts = Counter(tokens)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {term: counts[term] / total for term in sorted(counts)}


def inverse_document_frequencies(
    resume_tokens: Iterable[str], job_tokens: Iterable[str]
) -> Dict[str, float]:
    """Smoothed IDF, ``ln((1 + N) / (1 + df)) + 1``, with ``N`` fixed at two.

    The smoothing keeps every weight strictly positive, including terms found
    in both documents.
    """

    document_frequency: Counter[str] = Counter()
    for tokens in (resume_tokens, job_tokens):
        document_frequency.update(set(tokens))

    return {
        term: math.log((1 + CORPUS_SIZE) / (1 + document_frequency[term])) + 1.0
        for term in sorted(document_frequency)
    }


def tfidf_vector(tokens: Iterable[str], idf: Dict[str, float]) -> TermVector:
    tf = term_frequencies(tokens)
    vector: TermVector = {}
    for term, tf_val in tf.items():
        weight = tf_val * idf.get(term, 0.0)
        if weight > 0.0:
            vector[term] = weight
    return vector


def vectorize(resume_tokens: Iterable[str], job_tokens: Iterable[str]) -> CorpusVectors:
    """Build TF-IDF representations of the resume and the job description.

    Both token iterables are materialised once, so lazy
    :class:`~smart_screener.preprocessing.TokenStream` objects are accepted.
    """

    resume_terms = tuple(resume_tokens)
    job_terms = tuple(job_tokens)

    idf = inverse_document_frequencies(resume_terms, job_terms)
    return CorpusVectors(
        vocabulary=tuple(idf),
        resume=tfidf_vector(resume_terms, idf),
        job=tfidf_vector(job_terms, idf),
        idf=idf,
    )
