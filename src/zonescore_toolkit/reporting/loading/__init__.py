"""
Module: reporting.loading

Purpose:
    Record sources: the seam between storage and the report pipeline.
"""

from .sources import (
    InMemoryRecordSource,
    LoaderError,
    RecordSource,
    load_record_source,
)

__all__ = [
    "RecordSource",
    "InMemoryRecordSource",
    "load_record_source",
    "LoaderError",
]
