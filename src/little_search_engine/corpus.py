"""Filesystem sources for the corpus: manifest, noise words and documents.

The manifest and noise-word files are plain text with one entry per
whitespace-separated word. Documents are plain text files tokenized on
whitespace.
"""

from __future__ import annotations

import logging
from pathlib import Path

from little_search_engine.search.analyzers import WhitespaceTokenizer


logger = logging.getLogger(__name__)


class CorpusSourceError(FileNotFoundError):
    """Raised when a corpus input cannot be located."""


class ManifestNotFoundError(CorpusSourceError):
    """The corpus manifest file does not exist."""


class NoiseWordsNotFoundError(CorpusSourceError):
    """The noise-word list does not exist."""


class DocumentNotFoundError(CorpusSourceError):
    """A document listed in the manifest cannot be resolved."""


_TOKENIZER = WhitespaceTokenizer()


def _read_words(path: Path) -> list[str]:
    return [token.text for token in _TOKENIZER(path.read_text(encoding="utf-8"))]


def read_corpus_manifest(path: str | Path) -> list[str]:
    """Return document names from ``path`` in file order."""
    manifest = Path(path)
    if not manifest.is_file():
        raise ManifestNotFoundError(f"Corpus manifest {manifest} not found")
    documents = _read_words(manifest)
    logger.debug("Read %d document names from %s", len(documents), manifest)
    return documents


def read_noise_words(path: str | Path) -> frozenset[str]:
    """Return the lowercased noise words listed in ``path``."""
    noise_file = Path(path)
    if not noise_file.is_file():
        raise NoiseWordsNotFoundError(f"Noise words file {noise_file} not found")
    words = frozenset(word.lower() for word in _read_words(noise_file))
    logger.debug("Loaded %d noise words from %s", len(words), noise_file)
    return words


def tokenize_document(document: str | Path) -> list[str]:
    """Split the document file into raw whitespace-delimited tokens."""
    return DocumentTokenizer()(str(document))


class DocumentTokenizer:
    """Tokenizes documents named relative to a base directory.

    Absolute names are used as-is. The document identifier stays the name
    given in the manifest, only the lookup path is resolved.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resolve(self, document: str) -> Path:
        path = Path(document)
        if self.base_dir is None or path.is_absolute():
            return path
        return self.base_dir / path

    def __call__(self, document: str) -> list[str]:
        path = self.resolve(document)
        if not path.is_file():
            raise DocumentNotFoundError(f"Document {document} not found (looked in {path})")
        return _read_words(path)
