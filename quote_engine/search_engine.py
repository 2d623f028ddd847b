"""
Search engine module.
Runs crisis detection, feature extraction, tone filtering, scoring and ranking for one query.
"""

from typing import List, Optional, Sequence, Tuple

# Import loguru for console logging
from loguru import logger  # simple structured logger

# Import project modules for data structures and components
from .errors import EmptyQueryError, EngineNotInitializedError, InvalidTopNError, NoMatchError, QuoteDataError
from .feature_extractor import FeatureExtractor  # text -> features
from .lexicon import DEFAULT_LEXICON, Lexicon  # injected vocabulary
from .models import FeatureVector, OutcomeStatus, Quote, SearchOutcome, SearchResult
from .ranking import Ranker  # ordering and truncation
from .safety import CRISIS_MESSAGE, CrisisDetector  # self-harm short-circuit
from .scoring import SimilarityScorer  # weighted cosine + penalties
from .suggestions import REPHRASE_MESSAGE, RephraseAdvisor  # no-match help
from .tone_filter import ToneFilter  # mood compatibility gate


DEFAULT_TOP_N = 3


class QuoteSearchEngine:
	"""
	High-level search API.
	The lexicon and quote collection are read-only once loaded; every search builds
	its own query vector and result list, so one engine can serve many callers.
	"""

	def __init__(
		self,
		quotes: Optional[Sequence[Quote]] = None,  # collection to search, may be loaded later
		lexicon: Lexicon = DEFAULT_LEXICON,  # shared vocabulary for every component
		scorer: Optional[SimilarityScorer] = None,
		ranker: Optional[Ranker] = None,
	):
		self.lexicon = lexicon
		self.extractor = FeatureExtractor(lexicon)
		self.crisis_detector = CrisisDetector(lexicon)
		self.tone_filter = ToneFilter(lexicon)
		self.scorer = scorer or SimilarityScorer()
		self.ranker = ranker or Ranker()
		self.advisor = RephraseAdvisor(lexicon)

		# (quote, features) pairs in collection order
		self._index: List[Tuple[Quote, FeatureVector]] = []

		if quotes is not None:
			self.load(quotes)

	@property
	def ready(self) -> bool:
		return bool(self._index)

	@property
	def quotes(self) -> List[Quote]:
		return [quote for quote, _ in self._index]

	def load(self, quotes: Sequence[Quote]) -> None:
		"""Index a quote collection, replacing any previous one."""
		if not quotes:
			raise QuoteDataError("No quotes available")
		logger.info(f"[Engine] Extracting features for {len(quotes)} quotes (lexicon v{self.lexicon.version})")
		# Quote vectors depend only on immutable text, so compute them once
		self._index = [(quote, self.extractor.extract(quote.text)) for quote in quotes]
		silent = sum(1 for _, features in self._index if not features)
		if silent:
			logger.info(f"[Engine] {silent} quotes have no lexicon features and can never match")
		logger.info(f"[Engine] Index ready with {len(self._index)} quotes")

	def search(self, query: str, top_n: int = DEFAULT_TOP_N) -> SearchOutcome:
		"""
		Match a description of how someone feels against the quote collection.
		Returns a matched, crisis or no-match outcome. Raises EmptyQueryError,
		InvalidTopNError or EngineNotInitializedError for bad calls.
		"""
		if not self.ready:
			raise EngineNotInitializedError("Search engine not initialized: no quotes loaded")
		if not query or not query.strip():  # empty input guard
			raise EmptyQueryError("Query cannot be empty")
		if top_n < 1:
			raise InvalidTopNError(f"top_n must be at least 1, got {top_n}")

		# Crisis check comes before everything else
		if self.crisis_detector.is_crisis(query):
			return SearchOutcome(status=OutcomeStatus.CRISIS, query=query, message=CRISIS_MESSAGE)

		query_features = self.extractor.extract(query)
		logger.debug(f"[Engine] Query features: {query_features}")

		candidates: List[SearchResult] = []  # accumulator
		if query_features:
			for quote, quote_features in self._index:
				if not self.tone_filter.compatible(query_features, quote_features, quote.text):
					continue  # reject
				score = self.scorer.score(query_features, quote_features)
				logger.debug(f"[Engine] Candidate | quote='{quote.text[:40]}' | score={score:.3f}")
				candidates.append(SearchResult(
					quote=quote,
					score=score,
					matched_features=self.scorer.shared_features(query_features, quote_features),
				))
		else:
			logger.info("[Engine] Query produced no features")

		try:
			results = self.ranker.rank(candidates, top_n)
		except NoMatchError as e:
			suggestions = self.advisor.suggest(self.extractor.tokenize(query))
			logger.info(f"[Engine] No match: {e}")
			return SearchOutcome(
				status=OutcomeStatus.NO_MATCH,
				query=query,
				message=REPHRASE_MESSAGE,
				suggestions=suggestions,
			)

		return SearchOutcome(status=OutcomeStatus.MATCHED, query=query, results=results)
