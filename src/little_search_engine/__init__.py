"""Little search engine: an in-memory keyword index with two-keyword top-5 queries."""
