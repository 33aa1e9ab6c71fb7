"""Unit tests for the filesystem corpus sources."""

from pathlib import Path

import pytest

from little_search_engine.corpus import (
    CorpusSourceError,
    DocumentNotFoundError,
    DocumentTokenizer,
    ManifestNotFoundError,
    NoiseWordsNotFoundError,
    read_corpus_manifest,
    read_noise_words,
    tokenize_document,
)


def test_manifest_entries_in_file_order(tmp_path: Path):
    manifest = tmp_path / "docs.txt"
    manifest.write_text("b.txt\na.txt  c.txt\n\n", encoding="utf-8")
    assert read_corpus_manifest(manifest) == ["b.txt", "a.txt", "c.txt"]


def test_missing_manifest(tmp_path: Path):
    with pytest.raises(ManifestNotFoundError):
        read_corpus_manifest(tmp_path / "missing.txt")


def test_noise_words_are_lowercased(tmp_path: Path):
    noise = tmp_path / "noise.txt"
    noise.write_text("The\nA\nthe\n", encoding="utf-8")
    assert read_noise_words(noise) == frozenset({"the", "a"})


def test_missing_noise_words(tmp_path: Path):
    with pytest.raises(NoiseWordsNotFoundError):
        read_noise_words(tmp_path / "missing.txt")


def test_tokenize_document(tmp_path: Path):
    doc = tmp_path / "doc.txt"
    doc.write_text("The Cat\n\tsat.", encoding="utf-8")
    assert tokenize_document(doc) == ["The", "Cat", "sat."]


def test_tokenize_missing_document(tmp_path: Path):
    with pytest.raises(DocumentNotFoundError):
        tokenize_document(tmp_path / "missing.txt")


def test_directory_is_not_a_document(tmp_path: Path):
    with pytest.raises(DocumentNotFoundError):
        tokenize_document(tmp_path)


def test_tokenizer_resolves_relative_names(tmp_path: Path):
    (tmp_path / "doc.txt").write_text("hello world", encoding="utf-8")
    tokenizer = DocumentTokenizer(tmp_path)
    assert tokenizer.resolve("doc.txt") == tmp_path / "doc.txt"
    assert tokenizer("doc.txt") == ["hello", "world"]


def test_tokenizer_keeps_absolute_names(tmp_path: Path):
    other = tmp_path / "elsewhere"
    other.mkdir()
    doc = other / "doc.txt"
    doc.write_text("hi", encoding="utf-8")
    assert DocumentTokenizer(tmp_path / "base")(str(doc)) == ["hi"]


@pytest.mark.parametrize("error", [ManifestNotFoundError, NoiseWordsNotFoundError, DocumentNotFoundError])
def test_errors_are_file_not_found(error):
    assert issubclass(error, CorpusSourceError)
    assert issubclass(error, FileNotFoundError)
