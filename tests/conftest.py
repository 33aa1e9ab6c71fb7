"""Shared test fixtures and configuration."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tests.fixtures.corpus import (  # noqa: E402
    CAT_DOG_DOCUMENTS,
    CAT_DOG_NOISE_WORDS,
    FRUIT_DOCUMENTS,
    FRUIT_NOISE_WORDS,
    write_corpus,
)


# Deterministic environment for every Settings() built during tests
TEST_ENV = {
    "DOCS_FILE": "docs.txt",
    "NOISE_WORDS_FILE": "noisewords.txt",
    "MAX_RESULTS": "5",
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Pin config env vars and run from an empty directory so no .env is picked up."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cat_dog_corpus(tmp_path: Path) -> tuple[Path, Path]:
    """Manifest and noise-word paths for the three-document cat/dog corpus."""
    return write_corpus(tmp_path / "catdog", CAT_DOG_DOCUMENTS, CAT_DOG_NOISE_WORDS)


@pytest.fixture
def fruit_corpus(tmp_path: Path) -> tuple[Path, Path]:
    """Manifest and noise-word paths for the six-document fruit corpus."""
    return write_corpus(tmp_path / "fruit", FRUIT_DOCUMENTS, FRUIT_NOISE_WORDS)
