"""
Keyword indexing and query engine package.

- analyzers: keyword normalization and the analyzer pipeline
- models: Occurrence
- postings: posting lists kept in descending frequency order
- index: per-document keyword counting and index construction
- query: two-keyword top-k merge
"""
