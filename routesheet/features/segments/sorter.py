"""
Segment Sorter

Orders segments by title. Routes are usually pre-labelled
"1 - Trailhead", "2 - Junction", ..., so digit runs compare as numbers:
"2 - Ridge" sorts before "10 - Summit".
"""

import re
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .models import Segment

# Leading ordering token plus its separator, e.g. "12 - ", "3. ", "07) ".
# The digits must end the title or be followed by a separator or whitespace
# that is not itself followed by a digit, so "3.5 Mile Loop" and "10km Run"
# keep their numbers.
PREFIX_PATTERN = re.compile(r"^\s*(\d+)(?:\s*[-.:)_]+\s*(?!\d)|\s+(?!\d)|\s*$)")

_CHUNK_PATTERN = re.compile(r"(\d+)")


def natural_key(title: str) -> Tuple:
    """
    Sort key comparing digit runs numerically and text case-insensitively.

    Numbers sort before text at the same position. The raw title is the
    final tie-breaker so the order is total.
    """
    chunks = []
    for part in _CHUNK_PATTERN.split(title):
        if not part:
            continue
        if part.isdigit():
            chunks.append((0, int(part), ""))
        else:
            chunks.append((1, 0, part.casefold()))
    return tuple(chunks), title


def split_prefix(title: str) -> Tuple[Optional[int], str]:
    """
    Split a leading ordering number off a title.

    Returns:
        (number, remainder); number is None when the title has no prefix.
        A title that is only a number keeps its text as the remainder.
    """
    match = PREFIX_PATTERN.match(title)
    if not match:
        return None, title
    remainder = title[match.end():]
    return int(match.group(1)), remainder or title


def _prefix_key(segment: Segment) -> Tuple:
    number, remainder = split_prefix(segment.title)
    if number is None:
        return (1, 0) + natural_key(segment.title)
    return (0, number) + natural_key(remainder)


def sort_segments(
    segments: Iterable[Segment],
    strip_prefix: bool = False
) -> List[Segment]:
    """
    Sort segments by title.

    Args:
        segments: Segments in input order
        strip_prefix: Use the leading number as the primary key and drop it
            (with its separator) from the displayed title afterwards

    Returns:
        New list of new Segment values. The sort is stable.
    """
    segments = list(segments)

    if not strip_prefix:
        ordered = sorted(segments, key=lambda s: natural_key(s.title))
        return [replace(s) for s in ordered]

    ordered = sorted(segments, key=_prefix_key)
    return [replace(s, title=split_prefix(s.title)[1]) for s in ordered]
