"""
Safety module.
Keyword-based crisis detection that runs before any quote matching.

A query that mentions suicide or self-harm never gets quotes back; the caller gets
the crisis-resources message instead. Matching is plain phrase containment and is
deliberately broad: a false alarm costs far less than a missed one. Phrasings not in
the lexicon will be missed.
"""

import re  # whitespace normalization
from typing import Optional

from loguru import logger  # console logging

from .lexicon import DEFAULT_LEXICON, Lexicon


CRISIS_MESSAGE = """
It sounds like you might be going through a really difficult time.

While movie quotes can be inspiring, what you're experiencing may need
professional support. Please consider reaching out:

  - 988 Suicide & Crisis Lifeline (US): call or text 988, available 24/7
  - Crisis Text Line (US): text HOME to 741741
  - International Association for Suicide Prevention:
    https://www.iasp.info/resources/Crisis_Centres/
  - Emergency services: call 911 (US) or your local emergency number

You don't have to go through this alone. These trained professionals are
available to listen and help, any time.
""".strip()

_TYPOGRAPHIC_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})
_WHITESPACE = re.compile(r"\s+")


def normalize_for_crisis_scan(text: str) -> str:
	"""Lowercase, straighten curly apostrophes and collapse runs of whitespace."""
	return _WHITESPACE.sub(" ", text.lower().translate(_TYPOGRAPHIC_APOSTROPHES)).strip()


class CrisisDetector:
	"""Scans raw query text for self-harm indicator phrases."""

	def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
		self.phrases = lexicon.crisis_phrases

	def detect(self, raw_query: str) -> Optional[str]:
		"""
		Return the first crisis phrase found in the query, or None.

		Example:
			>>> CrisisDetector().detect("I don't want to live anymore")
			"don't want to live"
			>>> CrisisDetector().detect("I'm nervous about my exam") is None
			True
		"""
		if not raw_query:
			return None
		normalized = normalize_for_crisis_scan(raw_query)
		for phrase in self.phrases:
			if phrase in normalized:
				# Log the trigger, never the query itself
				logger.warning(f"[Safety] Crisis phrase detected: '{phrase}'")
				return phrase
		return None

	def is_crisis(self, raw_query: str) -> bool:
		return self.detect(raw_query) is not None
