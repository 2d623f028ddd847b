"""
Tone compatibility module.
Hard gate that removes quotes whose emotional register clashes with the query's mood.
"""

from typing import Iterable, Optional, Tuple

from loguru import logger  # console logging

from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import FeatureVector


def _any_present(features: FeatureVector, names: Iterable[str]) -> bool:
	return any(features.get(name, 0.0) > 0 for name in names)


def _first_phrase(text: str, phrases: Iterable[str]) -> Optional[str]:
	for phrase in phrases:
		if phrase in text:
			return phrase
	return None


class ToneFilter:
	"""
	Three independent mood rules; a quote must pass every rule that applies to the query.
	- positive / celebratory query: no serious or conflict phrasing, no net-negative quote
	- worried / health query: no threatening, dismissive or platitude phrasing
	- struggling query: no overly cheerful phrasing
	"""

	POSITIVE_EMOTIONS: Tuple[str, ...] = ("emotion:happy", "emotion:excited", "emotion:grateful", "emotion:loved")
	CELEBRATORY_THEMES: Tuple[str, ...] = ("theme:family", "theme:connection", "theme:celebration", "theme:home")
	WORRIED_SIGNALS: Tuple[str, ...] = ("emotion:worried", "emotion:sad", "theme:health")
	STRUGGLING_EMOTIONS: Tuple[str, ...] = ("emotion:struggling", "emotion:overwhelmed", "emotion:tired")

	# A query counts as positive/negative from sentiment alone above this word count
	SENTIMENT_COUNT_THRESHOLD = 1.0

	def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
		self.lexicon = lexicon

	# --- Query mood classes ---

	def is_positive(self, query_features: FeatureVector) -> bool:
		return (
			_any_present(query_features, self.POSITIVE_EMOTIONS)
			or query_features.get("sentiment:positive", 0.0) > self.SENTIMENT_COUNT_THRESHOLD
			or _any_present(query_features, self.CELEBRATORY_THEMES)
		)

	def is_worried(self, query_features: FeatureVector) -> bool:
		return _any_present(query_features, self.WORRIED_SIGNALS)

	def is_struggling(self, query_features: FeatureVector) -> bool:
		return (
			_any_present(query_features, self.STRUGGLING_EMOTIONS)
			or query_features.get("sentiment:negative", 0.0) > self.SENTIMENT_COUNT_THRESHOLD
		)

	# --- Gate ---

	def rejection_reason(self, query_features: FeatureVector, quote_features: FeatureVector, quote_text: str) -> Optional[str]:
		"""Return why the quote is blocked for this query, or None if it passes."""
		text = quote_text.lower()

		if self.is_positive(query_features):
			phrase = _first_phrase(text, self.lexicon.serious_phrases)
			if phrase:
				return f"serious phrase '{phrase}' for a positive query"
			if quote_features.get("sentiment:negative", 0.0) > quote_features.get("sentiment:positive", 0.0):
				return "net-negative quote for a positive query"

		if self.is_worried(query_features):
			phrase = _first_phrase(text, self.lexicon.inappropriate_phrases)
			if phrase:
				return f"inappropriate phrase '{phrase}' for a worried query"
			phrase = _first_phrase(text, self.lexicon.dismissive_phrases)
			if phrase:
				return f"dismissive phrase '{phrase}' for a worried query"

		if self.is_struggling(query_features):
			phrase = _first_phrase(text, self.lexicon.cheerful_phrases)
			if phrase:
				return f"cheerful phrase '{phrase}' for a struggling query"

		return None

	def compatible(self, query_features: FeatureVector, quote_features: FeatureVector, quote_text: str) -> bool:
		reason = self.rejection_reason(query_features, quote_features, quote_text)
		if reason:
			logger.debug(f"[ToneFilter] Blocked | quote='{quote_text[:40]}' | {reason}")
			return False
		return True
