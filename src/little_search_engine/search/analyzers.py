"""Analyzer utilities for keyword extraction.

Documents are split on whitespace by :class:`WhitespaceTokenizer` and each
token is run through a chain of filters mirroring the keyword rules:
lowercase, strip trailing punctuation, keep purely alphabetic words, drop
noise words. ``normalize`` applies the same rules to a single token.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping, Sequence, Set
from dataclasses import dataclass, field
import re
from typing import Any, Protocol


PUNCTUATION = ".,?:;!"

_ALPHABETIC = re.compile(r"[a-z]+")


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int | None = None
    end_char: int | None = None
    attributes: MutableMapping[str, Any] = field(default_factory=dict)

    def copy_with(self, **updates: Any) -> Token:
        data = {
            "text": self.text,
            "position": self.position,
            "start_char": self.start_char,
            "end_char": self.end_char,
            "attributes": dict(self.attributes),
        }
        data.update(updates)
        return Token(**data)


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class WhitespaceTokenizer:
    """Splits text into whitespace-delimited tokens."""

    _PATTERN = re.compile(r"\S+")

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self._PATTERN.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


def strip_trailing_punctuation(word: str) -> str:
    """Remove the maximal trailing run of keyword punctuation characters.

    Only ``. , ? : ; !`` count, and only at the end: ``"e.g.,"`` becomes
    ``"e.g"``.
    """
    return word.rstrip(PUNCTUATION)


def is_alphabetic(word: str) -> bool:
    """True when ``word`` is non-empty and made of lowercase Latin letters only."""
    return _ALPHABETIC.fullmatch(word) is not None


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield token.copy_with(text=token.text.lower())


class TrailingPunctuationFilter:
    """Strips trailing punctuation from each token."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            stripped = strip_trailing_punctuation(token.text)
            if stripped == token.text:
                yield token
            else:
                yield token.copy_with(text=stripped)


class AlphabeticFilter:
    """Drops empty tokens and tokens containing anything but letters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if is_alphabetic(token.text):
                yield token


class StopFilter:
    """Removes noise words from the stream."""

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        self.stopwords = frozenset(word.lower() for word in stopwords or ())

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text not in self.stopwords:
                yield token


class AnalyzerPipeline:
    """Composable chain of token filters."""

    def __init__(self, filters: Sequence[TokenFilter] | None = None) -> None:
        self.filters = list(filters or [])

    def __call__(self, tokens: Iterable[Token]) -> list[Token]:
        stream: Iterable[Token] = tokens
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


class KeywordAnalyzer:
    """Turns a document's raw tokens into keywords."""

    def __init__(self, noise_words: Iterable[str] | None = None) -> None:
        self.stop_filter = StopFilter(noise_words)
        self.pipeline = AnalyzerPipeline(
            [LowercaseFilter(), TrailingPunctuationFilter(), AlphabeticFilter(), self.stop_filter],
        )

    @property
    def noise_words(self) -> frozenset[str]:
        return self.stop_filter.stopwords

    def keywords(self, tokens: Iterable[str]) -> list[str]:
        """Keywords among already-split ``tokens``, in document order."""
        stream = (Token(text=raw, position=position) for position, raw in enumerate(tokens))
        return [token.text for token in self.pipeline(stream)]


def normalize(token: str, noise_words: Set[str] = frozenset()) -> str | None:
    """Return ``token`` as a keyword, or None if it is not one.

    A keyword is the lowercased token with trailing punctuation removed,
    consisting only of letters and not listed in ``noise_words``.
    """
    word = strip_trailing_punctuation(token.lower())
    if not is_alphabetic(word):
        return None
    if word in noise_words:
        return None
    return word
