"""Queries for the memory used by the current process."""

from __future__ import annotations

import os
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

_STATM = "/proc/self/statm"


def max_size() -> int:
    """Return the peak resident set size of this process in bytes, or 0 if unknown."""
    if resource is None:
        return 0
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        return int(peak)
    return int(peak) * 1024


def current_size() -> int:
    """Return the current resident set size of this process in bytes.

    Supported on Linux; other platforms report 0. Raises OSError if the
    process information cannot be read.
    """
    if not sys.platform.startswith("linux"):
        return 0
    try:
        with open(_STATM) as fh:
            fields = fh.read().split()
    except OSError as exc:
        raise OSError("failed to read process information file") from exc
    try:
        rss = int(fields[1])
    except (IndexError, ValueError) as exc:
        raise OSError("failed to retrieve RSS information") from exc
    return rss * os.sysconf("SC_PAGE_SIZE")