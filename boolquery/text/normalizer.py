"""Turn raw query tokens into matchable index terms.

Literal nodes keep a reference to a normalizer so the evaluation engine can
normalize their text when it looks terms up. Parsing itself never calls it.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

DEFAULT_STRIP_PATTERN = r"\W"


@runtime_checkable
class TermNormalizer(Protocol):
    """Capability for turning a raw token into zero or more terms."""

    def process_token(self, token: str) -> list[str]:
        """Normalize a raw token into index terms."""
        ...

    def normalization(self, text: str) -> str | None:
        """Apply class-specific normalization to an already-normalized string.

        Returns None when the normalizer has nothing extra to apply.
        """
        ...


class BasicTermNormalizer:
    """Strip non-word characters and lowercase.

    Patterns are compiled with ``re.ASCII``, so ``\\W`` removes every
    character outside ``[A-Za-z0-9_]``.

    Args:
        lowercase: Fold terms to lowercase.
        strip_pattern: Regex whose matches are removed from every token.
    """

    __slots__ = ("_lowercase", "_strip")

    def __init__(self, lowercase: bool = True, strip_pattern: str = DEFAULT_STRIP_PATTERN) -> None:
        self._lowercase = lowercase
        self._strip = re.compile(strip_pattern, re.ASCII)

    @property
    def lowercase(self) -> bool:
        return self._lowercase

    @property
    def strip_pattern(self) -> str:
        return self._strip.pattern

    def process_token(self, token: str) -> list[str]:
        term = self._strip.sub("", token)
        if self._lowercase:
            term = term.lower()
        if not term:
            return []
        return [term]

    def normalization(self, text: str) -> str | None:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicTermNormalizer):
            return NotImplemented
        return self._lowercase == other._lowercase and self.strip_pattern == other.strip_pattern

    def __hash__(self) -> int:
        return hash((self._lowercase, self.strip_pattern))

    def __repr__(self) -> str:
        return f"BasicTermNormalizer(lowercase={self._lowercase!r}, strip_pattern={self.strip_pattern!r})"
