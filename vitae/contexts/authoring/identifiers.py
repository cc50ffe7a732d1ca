"""
Project identifier generation.

Projects need an id that is unique within a resume and never reused, because
edits and UI state (expanded cards, etc.) key off it. A resume rebuilt from
storage resumes counting past the ids it already carries. Generators are injectable so migrations and tests are reproducible.
"""

import json
import re
from abc import ABC, abstractmethod
from typing import AbstractSet, Any, Iterable, Mapping, Optional

from vitae.utils.text_processing import sha256_hex


class IdGenerator(ABC):
    """Produces project ids that are not already taken."""

    @abstractmethod
    def next_id(self, project: Optional[Mapping[str, Any]] = None, taken: AbstractSet[str] = frozenset()) -> str:
        """
        Return a fresh id.

        Args:
            project: Raw project content the id is being minted for (may be ignored)
            taken: Ids already in use in the record

        Returns:
            An id not contained in taken
        """


class SequentialIdGenerator(IdGenerator):
    """
    Monotonic counter ids: p1, p2, p3, ...

    The counter only moves forward, so an id handed out by this generator is
    never handed out again even after the project carrying it is removed.
    """

    def __init__(self, prefix: str = "p", start: int = 1):
        self.prefix = prefix
        self._counter = start

    @classmethod
    def following(cls, existing_ids: Iterable[str], prefix: str = "p") -> "SequentialIdGenerator":
        """
        Generator whose counter starts past the highest prefixed id in existing_ids.

        Used when a resume is rebuilt from storage, so ids removed after the
        reload are not minted again.

        Example:
            >>> SequentialIdGenerator.following(["p1", "p7", "legacy"]).next_id()
            'p8'
        """
        pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$", re.ASCII)
        suffixes = [int(m.group(1)) for m in map(pattern.match, existing_ids) if m]
        return cls(prefix=prefix, start=max(suffixes, default=0) + 1)

    def next_id(self, project=None, taken=frozenset()) -> str:
        while True:
            candidate = f"{self.prefix}{self._counter}"
            self._counter += 1
            if candidate not in taken:
                return candidate


class ContentHashIdGenerator(IdGenerator):
    """
    Content-derived ids: a truncated sha256 of the project's JSON content.

    Identical content (e.g., two empty projects) is disambiguated with a salt
    until the id is free.
    """

    def __init__(self, length: int = 10):
        self.length = length

    def next_id(self, project=None, taken=frozenset()) -> str:
        payload = json.dumps(dict(project or {}), sort_keys=True, default=str)
        salt = 0
        while True:
            candidate = sha256_hex(f"{payload}#{salt}")[: self.length]
            if candidate not in taken:
                return candidate
            salt += 1
