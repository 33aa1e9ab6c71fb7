"""In-memory keyword index.

Each keyword maps to a :class:`PostingList` of the documents it occurs in,
highest frequency first. The index is built once from a corpus and is
read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Set
import logging
from pathlib import Path

from little_search_engine.corpus import DocumentTokenizer, read_corpus_manifest, read_noise_words
from little_search_engine.search.analyzers import KeywordAnalyzer
from little_search_engine.search.models import Occurrence
from little_search_engine.search.postings import PostingList


logger = logging.getLogger(__name__)

DocumentTokenizerFn = Callable[[str], Iterable[str]]


class KeywordIndex(Mapping[str, PostingList]):
    """Keyword to posting list mapping built from one corpus.

    Each document is merged at most once, so no posting list holds two
    occurrences for the same document.
    """

    def __init__(self, noise_words: Set[str] = frozenset()) -> None:
        self.noise_words = frozenset(noise_words)
        self._postings: dict[str, PostingList] = {}
        self._documents: set[str] = set()

    def __getitem__(self, keyword: str) -> PostingList:
        return self._postings[keyword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)

    def __len__(self) -> int:
        return len(self._postings)

    def __repr__(self) -> str:
        return f"KeywordIndex(keywords={len(self._postings)}, documents={len(self._documents)})"

    @property
    def documents(self) -> frozenset[str]:
        """Names of the documents merged so far."""
        return frozenset(self._documents)

    def has_document(self, document: str) -> bool:
        return document in self._documents

    def merge(self, document: str, document_keywords: Mapping[str, Occurrence]) -> bool:
        """Fold one document's keyword occurrences into the index.

        A keyword seen for the first time gets a single-element posting list.
        Otherwise the occurrence is appended to the existing list and moved
        to its ordered position.

        Returns:
            False, leaving the index untouched, if ``document`` was merged before.
        """
        if document in self._documents:
            logger.warning("Document %s is already indexed; skipping", document)
            return False
        self._documents.add(document)
        for keyword, occurrence in document_keywords.items():
            postings = self._postings.get(keyword)
            if postings is None:
                self._postings[keyword] = PostingList([occurrence])
            else:
                postings.add(occurrence)
        return True


def load_keywords(
    document: str,
    tokens: Iterable[str],
    analyzer: KeywordAnalyzer | None = None,
) -> dict[str, Occurrence]:
    """Count keyword occurrences within a single document.

    Tokens the analyzer does not turn into a keyword are skipped.
    """
    analyzer = analyzer or KeywordAnalyzer()
    keywords: dict[str, Occurrence] = {}
    for keyword in analyzer.keywords(tokens):
        occurrence = keywords.get(keyword)
        if occurrence is None:
            keywords[keyword] = Occurrence(document, 1)
        else:
            occurrence.frequency += 1
    return keywords


def merge(index: KeywordIndex, document: str, keyword_freqs: Mapping[str, int]) -> bool:
    """Merge ``document``'s keyword frequencies into ``index``."""
    return index.merge(document, {keyword: Occurrence(document, freq) for keyword, freq in keyword_freqs.items()})


def build_index(
    manifest: Iterable[str],
    noise_words: Set[str],
    tokenizer: DocumentTokenizerFn,
) -> KeywordIndex:
    """Index every document in ``manifest`` order.

    A document listed more than once is read and merged only the first
    time. Errors raised by ``tokenizer`` propagate and no partial index is
    returned.
    """
    analyzer = KeywordAnalyzer(noise_words)
    index = KeywordIndex(analyzer.noise_words)
    for document in manifest:
        if index.has_document(document):
            logger.warning("Document %s is listed more than once; skipping repeat", document)
            continue
        document_keywords = load_keywords(document, tokenizer(document), analyzer)
        index.merge(document, document_keywords)
        logger.debug("Merged %d keywords from %s", len(document_keywords), document)

    logger.info("Built keyword index: %d documents, %d keywords", len(index.documents), len(index))
    return index


def build_index_from_files(docs_file: str | Path, noise_words_file: str | Path) -> KeywordIndex:
    """Build an index from a manifest file and a noise-word file.

    Noise words are loaded first. Relative document names in the manifest
    resolve against the manifest's directory.
    """
    noise_words = read_noise_words(noise_words_file)
    manifest = read_corpus_manifest(docs_file)
    tokenizer = DocumentTokenizer(Path(docs_file).parent)
    return build_index(manifest, noise_words, tokenizer)
