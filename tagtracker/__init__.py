"""Smart Tag event tracker: in-memory event ingestion with a stats dashboard."""

__version__ = "1.0.0"
