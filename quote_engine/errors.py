"""
Exception types raised by the quote engine.
"""


class QuoteEngineError(Exception):
	"""Base class for all quote engine errors."""


class EmptyQueryError(QuoteEngineError, ValueError):
	"""Raised when the query is empty or whitespace only."""


class InvalidTopNError(QuoteEngineError, ValueError):
	"""Raised when the requested number of results is below 1."""


class EngineNotInitializedError(QuoteEngineError):
	"""Raised when a search runs before any quotes were loaded."""


class QuoteDataError(QuoteEngineError):
	"""Raised when the quote collection cannot be parsed or is empty."""


class LexiconError(QuoteEngineError):
	"""Raised when lexicon data violates its structural rules."""


class NoMatchError(QuoteEngineError):
	"""Raised by the ranker when no candidate survived filtering with a positive score."""
