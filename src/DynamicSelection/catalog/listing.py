"""Parsing of a test runner's textual listing into candidate lines."""
from __future__ import annotations

import re

SEPARATORS = ("›", ">")
SUMMARY_PREFIX = "Listing tests:"
COUNT_PREFIX = "Total:"

_PROJECT_SEGMENT = re.compile(r"^\[[^\]]*\]$")
_LOCATION_SUFFIX = re.compile(r":\d+(?::\d+)?$")


def find_separator(line: str) -> str | None:
    """Return the hierarchy separator used by ``line``, if any."""
    for sep in SEPARATORS:
        if sep in line:
            return sep
    return None


def normalize_line(line: str, separator: str) -> str:
    """Drop the ``[project]`` segment and the ``:line:col`` file locator.

    ``[chromium] › a.spec.ts:1:1 › t1 @smoke`` becomes ``a.spec.ts › t1 @smoke``.
    Only the project and file segments are rewritten; the title after the
    file segment is kept verbatim.
    """
    head, sep, rest = line.partition(separator)
    if sep and _PROJECT_SEGMENT.match(head.strip()):
        head, sep, rest = rest.partition(separator)
    location = _LOCATION_SUFFIX.sub("", head.strip())
    title = rest.strip()
    if not sep or not title:
        return location
    return f"{location} {separator} {title}"


def parse_list_output(output: str) -> list[str]:
    """Turn listing text into candidate lines, keeping listing order."""
    candidates: list[str] = []
    for raw in output.splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith(SUMMARY_PREFIX) or line.startswith(COUNT_PREFIX):
            continue
        separator = find_separator(line)
        if separator is None:
            continue
        candidates.append(normalize_line(line, separator))
    return candidates
