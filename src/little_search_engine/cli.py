"""CLI for building a keyword index and running a two-keyword query."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

from little_search_engine.config import Settings
from little_search_engine.corpus import CorpusSourceError
from little_search_engine.observability import configure_logging, set_trace_context
from little_search_engine.observability.context import generate_span_id, generate_trace_id
from little_search_engine.search.index import KeywordIndex, build_index_from_files
from little_search_engine.search.query import search


logger = logging.getLogger(__name__)


def build_argument_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="little-search",
        description="Index a corpus and list the documents matching KW1 OR KW2",
    )
    parser.add_argument("kw1", help="First keyword (wins frequency ties)")
    parser.add_argument("kw2", help="Second keyword")
    parser.add_argument(
        "--docs",
        type=Path,
        default=settings.docs_file,
        help=f"Corpus manifest listing document files (default: {settings.docs_file})",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=settings.noise_words_file,
        help=f"Noise word list (default: {settings.noise_words_file})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.max_results,
        help=f"Maximum documents returned (default: {settings.max_results})",
    )
    parser.add_argument(
        "--dump-keyword",
        action="append",
        default=[],
        metavar="KEYWORD",
        help="Also log the posting list of KEYWORD (repeatable)",
    )
    return parser


def _validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.limit < 1:
        parser.error("--limit must be >= 1")


def _dump_postings(index: KeywordIndex, keywords: Sequence[str]) -> None:
    for keyword in keywords:
        postings = index.get(keyword.lower())
        if postings is None:
            logger.info("Keyword %r is not indexed", keyword)
            continue
        logger.info(
            "Postings for %r: %s",
            keyword,
            postings,
            extra={"postings": [occ.to_dict() for occ in postings]},
        )


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings()
    configure_logging(settings.log_level, json_output=settings.log_json)
    parser = build_argument_parser(settings)
    args = parser.parse_args(argv)
    _validate_args(parser, args)

    set_trace_context(generate_trace_id(), generate_span_id(), corpus=str(args.docs))
    try:
        index = build_index_from_files(args.docs, args.noise)
    except CorpusSourceError as exc:
        logger.error("Cannot build index: %s", exc)
        return 1

    _dump_postings(index, args.dump_keyword)

    response = search(index, args.kw1, args.kw2, args.limit)
    if not response.has_matches:
        logger.info("No documents match %r or %r", args.kw1, args.kw2)
    sys.stdout.write(response.model_dump_json() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
