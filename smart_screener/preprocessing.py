"""Text normalisation and tokenisation helpers."""
from __future__ import annotations

import re
from typing import AbstractSet, Iterator, List

# A lightweight set of English function words that helps focus on meaningful tokens.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "has",
        "have",
        "in",
        "is",
        "it",
        "its",
        "of",
        "on",
        "or",
        "our",
        "that",
        "the",
        "this",
        "to",
        "was",
        "we",
        "were",
        "will",
        "with",
        "you",
        "your",
    }
)

MIN_TOKEN_LENGTH = 2

# Letters and digits in any script; everything else, underscore included, separates tokens.
TOKEN_PATTERN = re.compile(r"[^\W_]+")


class TokenStream:
    """Lazy, restartable sequence of normalised terms drawn from ``text``.

    Every call to :func:`iter` rescans the source text, so the stream can be
    consumed any number of times. Terms are yielded in order of appearance and
    duplicates are kept.
    """

    def __init__(
        self,
        text: str,
        *,
        min_length: int = MIN_TOKEN_LENGTH,
        stop_words: AbstractSet[str] | None = STOP_WORDS,
    ) -> None:
        self.text = text
        self.min_length = min_length
        self.stop_words = stop_words or frozenset()

    def __iter__(self) -> Iterator[str]:
        for match in TOKEN_PATTERN.finditer(self.text.lower()):
            token = match.group()
            if len(token) < self.min_length or token in self.stop_words:
                continue
            yield token

    def __repr__(self) -> str:
        return f"TokenStream(chars={len(self.text)}, min_length={self.min_length})"


def tokenize(
    text: str,
    *,
    min_length: int = MIN_TOKEN_LENGTH,
    stop_words: AbstractSet[str] | None = STOP_WORDS,
) -> List[str]:
    """Tokenise text into a list of lower-cased alphanumeric words.

    Short tokens and, unless ``stop_words`` is ``None``, a compact list of stop
    words are filtered out to emphasise keywords contained in resumes and job
    descriptions.
    """

    return list(TokenStream(text, min_length=min_length, stop_words=stop_words))


def normalise(text: str) -> str:
    """Collapse whitespace, strip punctuation and lower-case the text."""

    return " ".join(tokenize(text))
