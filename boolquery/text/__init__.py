"""Term normalization for query literals."""

from boolquery.text.normalizer import BasicTermNormalizer, TermNormalizer

__all__ = ["BasicTermNormalizer", "TermNormalizer"]
