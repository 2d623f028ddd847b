"""
Rephrase suggestions.
When nothing matches, fuzzy-match the query's words against the emotion vocabulary
to suggest feeling words the engine understands.
"""

from typing import Dict, List, Sequence

from rapidfuzz import fuzz, process  # fuzzy matching utilities

from loguru import logger  # console logging

from .lexicon import DEFAULT_LEXICON, Lexicon


REPHRASE_MESSAGE = "No matching quotes found for your situation. Try describing your feelings differently."

# Shown when no query word is close to anything in the lexicon
FALLBACK_SUGGESTIONS = ("overwhelmed", "hopeful", "worried")


class RephraseAdvisor:
	"""Maps near-miss query words to emotion category names."""

	def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, cutoff: float = 80.0, limit: int = 3):
		self.cutoff = cutoff
		self.limit = limit
		# Each category name and each whole-word keyword points back to its category
		self._vocabulary: Dict[str, str] = {}
		for emotion, keywords in lexicon.emotion_keywords.items():
			self._vocabulary.setdefault(emotion, emotion)
			for keyword in keywords:
				self._vocabulary.setdefault(keyword, emotion)
		self._choices = sorted(self._vocabulary)

	def suggest(self, tokens: Sequence[str]) -> List[str]:
		"""Return up to `limit` emotion names, in query order, without duplicates."""
		suggestions: List[str] = []
		for token in tokens:
			match = process.extractOne(token, self._choices, scorer=fuzz.ratio, score_cutoff=self.cutoff)
			if not match:
				continue
			emotion = self._vocabulary[match[0]]
			logger.debug(f"[Suggest] token='{token}' -> '{emotion}' via '{match[0]}' (score={match[1]:.1f})")
			if emotion not in suggestions:
				suggestions.append(emotion)
			if len(suggestions) >= self.limit:
				break
		return suggestions or list(FALLBACK_SUGGESTIONS[:self.limit])
