"""Multiblog: CRUD API over a multi-blog schema plus text-to-post ingestion."""

__version__ = "1.0.0"
