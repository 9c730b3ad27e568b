"""Directory enumeration, parallel probing, filtering and ordering."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from datetime import datetime
from pathlib import Path

from ..config import ListingConfig
from ..errors import MetadataError, NotDirectoryError, PathNotFoundError
from .probe import probe_entry
from .types import Entry


def validate_directory(path: Path) -> None:
    """Raise when ``path`` is missing or is not a directory.

    A path whose parent is a regular file counts as missing. Any other stat
    failure (permission denied, name too long, symlink loop) raises
    ``MetadataError``.
    """
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise PathNotFoundError(path) from exc
    except OSError as exc:
        raise MetadataError(path, exc) from exc
    if not stat.S_ISDIR(st.st_mode):
        raise NotDirectoryError(path)


def default_worker_count() -> int:
    """Probe pool size matching available hardware parallelism."""
    return max(1, os.cpu_count() or 1)


def enumerate_children(directory: Path) -> list[Path]:
    """Return immediate child paths of ``directory`` in enumeration order."""
    try:
        with os.scandir(directory) as entries:
            return [Path(child.path) for child in entries]
    except OSError as exc:
        raise MetadataError(directory, exc) from exc


def probe_all(paths: list[Path], workers: int | None = None) -> list[Entry]:
    """Probe every path, failing the whole batch on the first error.

    Results keep the order of ``paths`` regardless of completion order. As
    soon as any probe fails, probes that have not started yet are cancelled
    and the failure is raised; when several probes failed before that point,
    the one earliest in ``paths`` wins.
    """
    if not paths:
        return []

    max_workers = min(len(paths), max(1, workers or default_worker_count()))
    if max_workers == 1:
        return [probe_entry(path) for path in paths]

    executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="zls-probe")
    try:
        futures = [executor.submit(probe_entry, path) for path in paths]
        done, _pending = wait(futures, return_when=FIRST_EXCEPTION)
        failed = [future for future in futures if future in done and future.exception() is not None]
        if failed:
            raise failed[0].exception()
        return [future.result() for future in futures]
    finally:
        # Probes already running are left to finish; queued ones never start.
        executor.shutdown(wait=False, cancel_futures=True)


def filter_entries(entries: Iterable[Entry], show_hidden: bool) -> list[Entry]:
    """Drop hidden entries unless ``show_hidden`` is set."""
    if show_hidden:
        return list(entries)
    return [entry for entry in entries if not entry.is_hidden]


def _time_sort_key(entry: Entry) -> tuple[bool, float]:
    modified: datetime | None = entry.modified
    if modified is None:
        return (True, 0.0)
    return (False, -modified.timestamp())


def sort_entries(entries: Iterable[Entry], sort_by_time: bool) -> list[Entry]:
    """Order entries newest-first or by case-insensitive name.

    Entries without a timestamp sort after every timestamped entry. Both
    orders are stable, so ties keep enumeration order.
    """
    if sort_by_time:
        return sorted(entries, key=_time_sort_key)
    return sorted(entries, key=lambda entry: entry.name.lower())


def list_directory(path: Path, config: ListingConfig) -> list[Entry]:
    """List, filter and sort the immediate children of ``path``.

    Raises ``PathNotFoundError`` or ``NotDirectoryError`` before any probing,
    and ``MetadataError`` if enumeration or any single probe fails.
    """
    validate_directory(path)
    entries = probe_all(enumerate_children(path), workers=config.workers)
    entries = filter_entries(entries, config.show_hidden)
    return sort_entries(entries, config.sort_by_time)


__all__ = [
    "validate_directory",
    "default_worker_count",
    "enumerate_children",
    "probe_all",
    "filter_entries",
    "sort_entries",
    "list_directory",
]
