"""Listing domain model: entry records, metadata probing and ordering.

This package contains non-UI listing primitives:
- immutable entry datatype and name classification
- per-path metadata probe
- directory enumeration with parallel, fail-fast probing
- visibility filtering and sort ordering
"""

from __future__ import annotations

from .types import SOURCE_SUFFIX, Entry, NameClass, classify_name
from .probe import display_name, mtime_to_datetime, probe_entry
from .lister import (
    default_worker_count,
    enumerate_children,
    filter_entries,
    list_directory,
    probe_all,
    sort_entries,
    validate_directory,
)

__all__ = [
    "SOURCE_SUFFIX",
    "Entry",
    "NameClass",
    "classify_name",
    "display_name",
    "mtime_to_datetime",
    "probe_entry",
    "validate_directory",
    "default_worker_count",
    "enumerate_children",
    "probe_all",
    "filter_entries",
    "sort_entries",
    "list_directory",
]
