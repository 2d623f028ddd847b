"""
Feature extraction module.
Converts text into a sparse vector of named emotion, theme, sentiment and tone features.
"""

from collections import defaultdict  # accumulate weights without key checks
from typing import Iterable, List

from loguru import logger  # console logging

from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import FeatureVector
from .tokenizer import tokenize


# Weight added per direct category hit, and per related emotion of that category
DIRECT_HIT_WEIGHT = 1.0
RELATED_EMOTION_WEIGHT = 0.3


def keyword_match(token: str, keywords: Iterable[str]) -> bool:
	"""
	Bidirectional substring test: "overwhelmed" hits "overwhelm" and "sad" hits "sadness".
	Works as a rough stand-in for stemming.
	"""
	return any(keyword in token or token in keyword for keyword in keywords)


class FeatureExtractor:
	"""
	Builds feature vectors from the lexicon.
	- emotion:<name>   +1.0 per token hitting the category, +0.3 to each related emotion
	- theme:<name>     +1.0 per token hitting the category (no spreading)
	- sentiment:positive / sentiment:negative   exact-word counts, present only when > 0
	- tone:action / tone:reflective             exact-word counts, present only when > 0
	"""

	def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
		self.lexicon = lexicon

	def tokenize(self, text: str) -> List[str]:
		return tokenize(text, self.lexicon.stop_words)

	def extract(self, text: str) -> FeatureVector:
		"""Return the feature vector for a text. Empty or stop-word-only text gives {}."""
		tokens = self.tokenize(text)
		if not tokens:
			logger.debug("[Extractor] No tokens in text; empty feature vector")
			return {}

		features = defaultdict(float)

		# 1) Emotions with relation spreading
		for emotion, keywords in self.lexicon.emotion_keywords.items():
			for token in tokens:
				if keyword_match(token, keywords):
					features[f"emotion:{emotion}"] += DIRECT_HIT_WEIGHT
					for related in self.lexicon.related_emotions(emotion):
						features[f"emotion:{related}"] += RELATED_EMOTION_WEIGHT
					logger.debug(f"[Extractor] Emotion hit: token='{token}' -> '{emotion}'")

		# 2) Themes
		for theme, keywords in self.lexicon.theme_keywords.items():
			for token in tokens:
				if keyword_match(token, keywords):
					features[f"theme:{theme}"] += DIRECT_HIT_WEIGHT
					logger.debug(f"[Extractor] Theme hit: token='{token}' -> '{theme}'")

		# 3) Sentiment and tone use exact token equality
		self._count_exact(features, tokens, self.lexicon.positive_words, "sentiment:positive")
		self._count_exact(features, tokens, self.lexicon.negative_words, "sentiment:negative")
		self._count_exact(features, tokens, self.lexicon.action_words, "tone:action")
		self._count_exact(features, tokens, self.lexicon.reflective_words, "tone:reflective")

		return dict(features)

	@staticmethod
	def _count_exact(features, tokens: List[str], words, name: str) -> None:
		count = sum(1.0 for token in tokens if token in words)
		if count > 0:
			features[name] += count
