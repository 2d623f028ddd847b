"""
Tests for the similarity scorer and the ranker.
"""

import math

import pytest

from quote_engine.errors import InvalidTopNError, NoMatchError
from quote_engine.models import Quote, SearchResult
from quote_engine.ranking import Ranker
from quote_engine.scoring import NEGATIVE, NEUTRAL, POSITIVE, SimilarityScorer, sentiment_of


@pytest.fixture
def scorer():
	return SimilarityScorer()


def test_sentiment_of():
	assert sentiment_of({"sentiment:positive": 2.0, "sentiment:negative": 1.0}) == POSITIVE
	assert sentiment_of({"sentiment:negative": 1.0}) == NEGATIVE
	assert sentiment_of({"sentiment:positive": 1.0, "sentiment:negative": 1.0}) == NEUTRAL
	assert sentiment_of({}) == NEUTRAL


def test_identical_vectors_score_one(scorer):
	features = {"emotion:sad": 1.0, "theme:loss": 2.0}
	assert scorer.score(features, dict(features)) == pytest.approx(1.0)


def test_no_signal_scores_zero(scorer):
	assert scorer.score({}, {"emotion:sad": 1.0}) == 0.0
	assert scorer.score({"emotion:sad": 1.0}, {}) == 0.0
	assert scorer.score({}, {}) == 0.0


def test_disjoint_vectors_score_zero(scorer):
	assert scorer.score({"emotion:excited": 1.0}, {"theme:loss": 1.0}) == 0.0


def test_dimension_weights(scorer):
	assert scorer.dimension_weight("emotion:sad") == 3.0
	assert scorer.dimension_weight("theme:loss") == 2.5
	assert scorer.dimension_weight("tone:action") == 1.0
	# query (3, 2.5) against quote (3, 0)
	score = scorer.score({"emotion:sad": 1.0, "theme:loss": 1.0}, {"emotion:sad": 1.0})
	assert score == pytest.approx(3 / math.sqrt(15.25))


def test_negative_query_positive_quote_penalty(scorer):
	query = {"emotion:sad": 1.0, "sentiment:negative": 1.0}
	quote = {"emotion:sad": 1.0, "sentiment:positive": 1.0}
	assert scorer.sentiment_penalty(query, quote) == 0.4
	assert scorer.score(query, quote) == pytest.approx(0.9 * 0.4)


def test_positive_query_negative_quote_penalty(scorer):
	query = {"emotion:sad": 1.0, "sentiment:positive": 1.0}
	quote = {"emotion:sad": 1.0, "sentiment:negative": 1.0}
	assert scorer.score(query, quote) == pytest.approx(0.9 * 0.3)


def test_neutral_query_polar_quote_penalty(scorer):
	query = {"emotion:sad": 1.0}
	quote = {"emotion:sad": 1.0, "sentiment:positive": 1.0}
	assert scorer.score(query, quote) == pytest.approx(3 / math.sqrt(10) * 0.8)


def test_joy_against_conflict_penalty(scorer):
	query = {"emotion:happy": 1.0}
	quote = {"emotion:happy": 1.0, "theme:truth": 1.0}
	assert scorer.tone_penalty(query, quote) == 0.3
	assert scorer.score(query, quote) == pytest.approx(3 / math.sqrt(15.25) * 0.3)
	assert scorer.tone_penalty({"emotion:sad": 1.0}, quote) == 1.0


def test_score_stays_in_unit_interval(scorer):
	vectors = [
		{},
		{"emotion:sad": 5.0, "sentiment:negative": 3.0},
		{"emotion:happy": 1.0, "sentiment:positive": 4.0, "theme:challenge": 1.0},
		{"theme:home": 2.0, "tone:action": 1.0},
	]
	for a in vectors:
		for b in vectors:
			assert 0.0 <= scorer.score(a, b) <= 1.0


def test_shared_features():
	shared = SimilarityScorer.shared_features({"emotion:sad": 1.0, "theme:loss": 1.0}, {"theme:loss": 2.0, "tone:action": 1.0})
	assert shared == ["theme:loss"]


def _result(text, score):
	return SearchResult(quote=Quote(text), score=score)


def test_ranker_orders_and_truncates():
	scored = [_result("a", 0.2), _result("b", 0.9), _result("c", 0.5)]
	ranked = Ranker().rank(scored, top_n=2)
	assert [r.quote.text for r in ranked] == ["b", "c"]


def test_ranker_keeps_collection_order_on_ties():
	scored = [_result("first", 0.5), _result("second", 0.7), _result("third", 0.5), _result("fourth", 0.5)]
	ranked = Ranker().rank(scored, top_n=10)
	assert [r.quote.text for r in ranked] == ["second", "first", "third", "fourth"]


def test_ranker_drops_zero_scores():
	ranked = Ranker().rank([_result("zero", 0.0), _result("some", 0.1)], top_n=3)
	assert [r.quote.text for r in ranked] == ["some"]


def test_ranker_raises_when_nothing_survives():
	with pytest.raises(NoMatchError):
		Ranker().rank([_result("zero", 0.0)], top_n=3)
	with pytest.raises(NoMatchError):
		Ranker().rank([], top_n=3)


def test_ranker_rejects_bad_top_n():
	with pytest.raises(InvalidTopNError):
		Ranker().rank([_result("a", 0.5)], top_n=0)
