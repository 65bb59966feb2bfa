"""In-memory praise store.

Entries are plain strings addressed by their current position. Deleting an
entry shifts every later entry down by one, so an index is only meaningful
against the list a client last rendered.
"""

import re
from typing import List, Optional

from loguru import logger


_INDEX_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_index(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``raw`` ("2", " 2", "2abc" -> 2).

    Returns None when ``raw`` does not start with an integer, or when the
    digit run is too long to convert; no such index can be in range.
    """
    if raw is None:
        return None
    match = _INDEX_PREFIX.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


class PraiseStore:
    """Ordered, mutable, non-persistent sequence of praises."""

    def __init__(self, praises: Optional[List[str]] = None):
        self._praises: List[str] = list(praises or [])

    def __len__(self) -> int:
        return len(self._praises)

    def entries(self) -> List[str]:
        """Return a snapshot of all praises in order."""
        return list(self._praises)

    def add(self, text: str) -> int:
        """Append a praise and return its index."""
        self._praises.append(text)
        index = len(self._praises) - 1
        logger.debug(f"Praise added at index {index}")
        return index

    def _resolve(self, index) -> Optional[int]:
        if isinstance(index, str):
            index = parse_index(index)
        if index is None or not 0 <= index < len(self._praises):
            return None
        return index

    def update(self, index, text: str) -> bool:
        """Replace the praise at ``index``. Out-of-range indices are ignored."""
        position = self._resolve(index)
        if position is None:
            logger.debug(f"Ignoring update of praise at index {index!r}")
            return False
        self._praises[position] = text
        logger.debug(f"Praise updated at index {position}")
        return True

    def delete(self, index) -> bool:
        """Remove the praise at ``index``. Out-of-range indices are ignored."""
        position = self._resolve(index)
        if position is None:
            logger.debug(f"Ignoring delete of praise at index {index!r}")
            return False
        del self._praises[position]
        logger.debug(f"Praise deleted at index {position}")
        return True

    def clear(self) -> None:
        """Drop every praise."""
        self._praises.clear()
