"""
Ranking module.
Orders scored candidates and keeps the best few.
"""

from typing import List

from loguru import logger  # console logging

from .errors import InvalidTopNError, NoMatchError
from .models import SearchResult


class Ranker:
	"""
	Sorts candidates by score, highest first. Equal scores keep their original
	(quote collection) order. Candidates scoring 0 or less are dropped.
	"""

	def __init__(self, min_score: float = 0.0):
		self.min_score = min_score  # exclusive lower bound for keeping a candidate

	def rank(self, scored: List[SearchResult], top_n: int) -> List[SearchResult]:
		"""
		Return the first min(top_n, len(survivors)) results.
		Raises NoMatchError when nothing scores above min_score.
		"""
		if top_n < 1:
			raise InvalidTopNError(f"top_n must be at least 1, got {top_n}")

		survivors = [r for r in scored if r.score > self.min_score]
		if not survivors:
			logger.info(f"[Ranker] No candidates above {self.min_score} out of {len(scored)}")
			raise NoMatchError("No matching quotes found for your situation")

		# sorted() is stable, also with reverse=True
		ordered = sorted(survivors, key=lambda r: r.score, reverse=True)
		logger.info(f"[Ranker] Returning top {min(top_n, len(ordered))} of {len(ordered)} ranked results")
		return ordered[:top_n]
