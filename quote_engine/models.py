"""
Data models for the Movie Quote Engine.
Defines the core data structures shared by the matching pipeline and the front ends.
"""

# dataclasses give us small immutable records without boilerplate
from dataclasses import dataclass, field  # record classes
from enum import Enum  # closed set of search outcomes
# Typing helpers for self-documenting signatures
from typing import Dict, List, Optional  # containers and optional values


# Sparse named features, e.g. {"emotion:sad": 1.3, "theme:loss": 1.0}
FeatureVector = Dict[str, float]


@dataclass(frozen=True)
class Quote:
	"""
	A single movie quote. Identity is the quote text.
	"""
	text: str  # the quotation itself
	movie: str = ""  # movie title
	character: str = ""  # who says it


@dataclass
class SearchResult:
	quote: Quote  # matched quote
	score: float  # confidence in [0, 1]
	matched_features: List[str] = field(default_factory=list)  # features shared with the query


class OutcomeStatus(str, Enum):
	"""The three ways a search can end."""
	MATCHED = "matched"
	CRISIS = "crisis"
	NO_MATCH = "no_match"


@dataclass
class SearchOutcome:
	"""
	Result of one search call.
	Crisis outcomes never carry results; no-match outcomes carry rephrase suggestions.
	"""
	status: OutcomeStatus  # which of the three outcomes happened
	query: str  # the raw query as typed
	results: List[SearchResult] = field(default_factory=list)  # ranked results (matched only)
	message: Optional[str] = None  # user-facing text for crisis / no-match
	suggestions: List[str] = field(default_factory=list)  # emotion words to try (no-match only)

	@property
	def is_crisis(self) -> bool:
		return self.status is OutcomeStatus.CRISIS

	@property
	def has_results(self) -> bool:
		return self.status is OutcomeStatus.MATCHED and bool(self.results)
