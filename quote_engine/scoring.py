"""
Scoring module.
Weighted cosine similarity between feature vectors, shaped by sentiment and tone penalties.
"""

# NumPy for the weighted vector arithmetic
import numpy as np  # numeric arrays

from loguru import logger  # console logging

from .models import FeatureVector


POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"


def sentiment_of(features: FeatureVector) -> str:
	"""Classify a vector as positive, negative or neutral from its sentiment counts."""
	positive = features.get("sentiment:positive", 0.0)
	negative = features.get("sentiment:negative", 0.0)
	if positive > negative:
		return POSITIVE
	if negative > positive:
		return NEGATIVE
	return NEUTRAL


class SimilarityScorer:
	"""
	Computes a score in [0..1]:
	- cosine similarity over the union of features, emotions weighted 3.0, themes 2.5, others 1.0
	- times a sentiment-mismatch multiplier
	- times a joy-vs-conflict multiplier
	"""

	JOY_EMOTIONS = ("emotion:happy", "emotion:excited", "emotion:grateful")
	CONFLICT_THEMES = ("theme:challenge", "theme:truth")

	def __init__(
		self,
		emotion_weight: float = 3.0,
		theme_weight: float = 2.5,
		default_weight: float = 1.0,
		negative_to_positive_penalty: float = 0.4,
		positive_to_negative_penalty: float = 0.3,
		neutral_to_polar_penalty: float = 0.8,
		joy_conflict_penalty: float = 0.3,
	):
		self.emotion_weight = emotion_weight
		self.theme_weight = theme_weight
		self.default_weight = default_weight
		self.negative_to_positive_penalty = negative_to_positive_penalty
		self.positive_to_negative_penalty = positive_to_negative_penalty
		self.neutral_to_polar_penalty = neutral_to_polar_penalty
		self.joy_conflict_penalty = joy_conflict_penalty

	def dimension_weight(self, feature: str) -> float:
		if feature.startswith("emotion:"):
			return self.emotion_weight
		if feature.startswith("theme:"):
			return self.theme_weight
		return self.default_weight

	def cosine(self, query_features: FeatureVector, quote_features: FeatureVector) -> float:
		"""Weighted cosine similarity; 0.0 when either vector carries no signal."""
		names = sorted(set(query_features) | set(quote_features))
		if not names:
			return 0.0

		weights = np.array([self.dimension_weight(n) for n in names])
		q = np.array([query_features.get(n, 0.0) for n in names]) * weights
		c = np.array([quote_features.get(n, 0.0) for n in names]) * weights

		q_mag = float(np.dot(q, q))
		c_mag = float(np.dot(c, c))
		if q_mag == 0 or c_mag == 0:
			return 0.0
		return float(np.dot(q, c)) / (np.sqrt(q_mag) * np.sqrt(c_mag))

	def sentiment_penalty(self, query_features: FeatureVector, quote_features: FeatureVector) -> float:
		query_sentiment = sentiment_of(query_features)
		quote_sentiment = sentiment_of(quote_features)
		if query_sentiment == NEGATIVE and quote_sentiment == POSITIVE:
			return self.negative_to_positive_penalty
		if query_sentiment == POSITIVE and quote_sentiment == NEGATIVE:
			return self.positive_to_negative_penalty
		if query_sentiment == NEUTRAL and quote_sentiment != NEUTRAL:
			return self.neutral_to_polar_penalty
		return 1.0

	def tone_penalty(self, query_features: FeatureVector, quote_features: FeatureVector) -> float:
		query_has_joy = any(query_features.get(n, 0.0) > 0 for n in self.JOY_EMOTIONS)
		quote_has_conflict = any(quote_features.get(n, 0.0) > 0 for n in self.CONFLICT_THEMES)
		return self.joy_conflict_penalty if query_has_joy and quote_has_conflict else 1.0

	def score(self, query_features: FeatureVector, quote_features: FeatureVector) -> float:
		"""Combine cosine and penalties into one score, clamped to [0..1]."""
		cosine = self.cosine(query_features, quote_features)
		if cosine == 0.0:
			return 0.0
		sentiment = self.sentiment_penalty(query_features, quote_features)
		tone = self.tone_penalty(query_features, quote_features)
		final_score = cosine * sentiment * tone
		logger.debug(f"[Scorer] cosine={cosine:.3f} sentiment_x={sentiment} tone_x={tone} -> {final_score:.3f}")
		# Clamp
		return max(0.0, min(1.0, final_score))

	@staticmethod
	def shared_features(query_features: FeatureVector, quote_features: FeatureVector):
		"""Names of features present (non-zero) in both vectors, sorted."""
		return sorted(
			n for n in set(query_features) & set(quote_features)
			if query_features[n] > 0 and quote_features[n] > 0
		)
