"""
End-to-end tests for QuoteSearchEngine.
Run: pytest tests/test_search_engine.py -v
"""

import pytest

from quote_engine.errors import EmptyQueryError, EngineNotInitializedError, InvalidTopNError, QuoteDataError
from quote_engine.models import OutcomeStatus, Quote
from quote_engine.safety import CRISIS_MESSAGE
from quote_engine.search_engine import QuoteSearchEngine
from quote_engine.suggestions import FALLBACK_SUGGESTIONS, REPHRASE_MESSAGE

BUNDLED_QUERIES = [
	"I feel overwhelmed with everything at work",
	"I just got rejected and feel like giving up",
	"Feeling hopeful about the future and a new beginning",
	"I'm so happy to see my family tonight",
	"My mom is sick and I'm worried",
	"I'm tired and stuck",
]


def test_search_before_load_raises():
	with pytest.raises(EngineNotInitializedError):
		QuoteSearchEngine().search("I feel sad")


def test_load_empty_collection_raises():
	with pytest.raises(QuoteDataError):
		QuoteSearchEngine().load([])


def test_empty_query_raises(engine):
	with pytest.raises(EmptyQueryError):
		engine.search("")
	with pytest.raises(EmptyQueryError):
		engine.search("   \n\t")


def test_invalid_top_n_raises(engine):
	with pytest.raises(InvalidTopNError):
		engine.search("I feel happy", top_n=0)


def test_crisis_short_circuits(engine):
	outcome = engine.search("I don't want to live anymore")
	assert outcome.status is OutcomeStatus.CRISIS
	assert outcome.is_crisis
	assert outcome.results == []
	assert outcome.message == CRISIS_MESSAGE
	assert not outcome.has_results


def test_crisis_wins_over_matching_words(engine):
	outcome = engine.search("happy family time but I want to die")
	assert outcome.status is OutcomeStatus.CRISIS
	assert outcome.results == []


def test_happy_family_query_skips_refusal_quote(engine):
	outcome = engine.search("I'm very happy meeting my family tonight", top_n=5)

	assert outcome.status is OutcomeStatus.MATCHED
	texts = [r.quote.text for r in outcome.results]
	print(f"\nResults: {texts}")
	assert "Happy family time." in texts
	assert not any("refuse" in t for t in texts)
	assert "You're gonna need a bigger boat." not in texts


def test_worried_query_blocks_dismissive_and_threatening(engine):
	outcome = engine.search("My dog is sick, and I'm worried", top_n=6)

	assert outcome.status is OutcomeStatus.MATCHED
	texts = [r.quote.text for r in outcome.results]
	assert "I'm worried about you and I will help." in texts
	assert "You're gonna need a bigger boat." not in texts
	assert "Life is like a box of chocolates." not in texts
	assert not any("refuse" in t for t in texts)


def test_results_carry_shared_features(engine):
	outcome = engine.search("My dog is sick, and I'm worried", top_n=6)
	top = next(r for r in outcome.results if r.quote.text.startswith("I'm worried"))
	assert "emotion:worried" in top.matched_features


def test_zero_overlap_is_no_match():
	engine = QuoteSearchEngine([Quote("Shhh.", "Sample", "Librarian")])
	outcome = engine.search("I'm excited for my trip")

	assert outcome.status is OutcomeStatus.NO_MATCH
	assert outcome.results == []
	assert outcome.message == REPHRASE_MESSAGE
	assert "excited" in outcome.suggestions


def test_featureless_query_gets_fallback_suggestions(engine):
	outcome = engine.search("zzzz qqqq")
	assert outcome.status is OutcomeStatus.NO_MATCH
	assert outcome.suggestions == list(FALLBACK_SUGGESTIONS)


def test_top_n_truncates(engine):
	outcome = engine.search("Happy family time", top_n=1)
	assert outcome.status is OutcomeStatus.MATCHED
	assert len(outcome.results) == 1
	assert outcome.results[0].quote.text == "Happy family time."


@pytest.mark.parametrize("query", BUNDLED_QUERIES)
def test_bundled_results_are_bounded_and_sorted(bundled_engine, query):
	outcome = bundled_engine.search(query, top_n=3)

	assert outcome.status in (OutcomeStatus.MATCHED, OutcomeStatus.NO_MATCH)
	scores = [r.score for r in outcome.results]
	assert len(scores) <= 3
	assert all(0.0 < s <= 1.0 for s in scores)
	assert scores == sorted(scores, reverse=True)
	if outcome.status is OutcomeStatus.NO_MATCH:
		assert outcome.results == []
		assert outcome.suggestions


@pytest.mark.parametrize("query", BUNDLED_QUERIES)
def test_search_is_repeatable(bundled_engine, query):
	first = bundled_engine.search(query, top_n=5)
	second = bundled_engine.search(query, top_n=5)
	assert first.status == second.status
	assert [(r.quote, r.score) for r in first.results] == [(r.quote, r.score) for r in second.results]


def test_reload_replaces_collection(engine):
	engine.load([Quote("Happy family time.", "Sample", "Narrator")])
	assert len(engine.quotes) == 1
	assert engine.ready
