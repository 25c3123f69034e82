"""Ingestion helpers: open the zipped dataset and parse it into records."""
