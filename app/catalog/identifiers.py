"""
==============================================================================
Identifier Generation Module
==============================================================================

Opaque string identifiers for new catalog records.

Identifiers look like ``_3f9a0c1b2d`` (underscore followed by hex), matching
the shape of the built-in seed ids. Uniqueness is best-effort: ids come from
uuid4 entropy and are never re-checked against the store.

==============================================================================
"""

from __future__ import annotations

import itertools
import uuid


class IdentifierGenerator:
    """
    Random identifier generator backed by uuid4.

    Example:
        >>> generator = IdentifierGenerator()
        >>> generator.generate()
        '_9c2f41d07a3b'
    """

    PREFIX = "_"
    LENGTH = 12

    def generate(self) -> str:
        """Return a fresh identifier."""
        return f"{self.PREFIX}{uuid.uuid4().hex[:self.LENGTH]}"


class SequenceIdentifierGenerator(IdentifierGenerator):
    """
    Deterministic generator producing ``_seq1``, ``_seq2``, ...

    Substitute for IdentifierGenerator where predictable ids are needed.
    """

    def __init__(self, prefix: str = "_seq", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def generate(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
