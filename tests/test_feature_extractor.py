"""
Unit tests for the tokenizer and the feature extractor.
"""

import pytest
from loguru import logger

from quote_engine.feature_extractor import FeatureExtractor, keyword_match
from quote_engine.lexicon import DEFAULT_LEXICON
from quote_engine.tokenizer import tokenize


def assert_equal(actual, expected, msg):
	if actual != expected:
		raise AssertionError(f"{msg} | expected={expected}, actual={actual}")


@pytest.fixture
def extractor():
	return FeatureExtractor(DEFAULT_LEXICON)


def test_tokenize_strips_punctuation_and_apostrophes():
	tokens = tokenize("I'm very happy, meeting my family tonight!", DEFAULT_LEXICON.stop_words)
	assert_equal(tokens, ["im", "very", "happy", "meeting", "my", "family", "tonight"], "tokens")


def test_tokenize_drops_stop_words_and_single_letters():
	assert_equal(tokenize("A dog, a cat (and I)", DEFAULT_LEXICON.stop_words), ["dog", "cat"], "stop words")
	assert_equal(tokenize('"Don\'t"; panic: ok?'), ["dont", "panic", "ok"], "quotes removed")


def test_tokenize_empty():
	assert tokenize("") == []
	assert tokenize("   ") == []


def test_keyword_match_is_bidirectional():
	assert keyword_match("overwhelmed", ["overwhelm"])  # keyword inside token
	assert keyword_match("sad", ["sadness"])  # token inside keyword
	assert not keyword_match("dog", ["cat", "bird"])


def test_empty_text_yields_empty_vector(extractor):
	assert extractor.extract("") == {}
	assert extractor.extract("the and of it") == {}


def test_emotion_hit_spreads_to_related_emotions(extractor):
	features = extractor.extract("overwhelmed")
	assert features == pytest.approx({
		"emotion:overwhelmed": 1.0,
		"emotion:stressed": 0.3,
		"emotion:anxious": 0.3,
		"emotion:tired": 0.3,
	})


def test_spreading_is_additive(extractor):
	features = extractor.extract("overwhelmed drowning")
	assert features["emotion:overwhelmed"] == pytest.approx(2.0)
	assert features["emotion:stressed"] == pytest.approx(0.6)
	assert features["emotion:tired"] == pytest.approx(0.6)


def test_theme_and_negative_sentiment(extractor):
	assert extractor.extract("sick") == {"theme:health": 1.0, "sentiment:negative": 1.0}


def test_sentiment_uses_exact_words(extractor):
	features = extractor.extract("good goodness")
	assert features["sentiment:positive"] == 1.0
	assert "sentiment:negative" not in features


def test_tone_counts(extractor):
	features = extractor.extract("think and push")
	assert features["tone:reflective"] == 1.0
	assert features["tone:action"] == 1.0
	# "push" is also a motivation keyword
	assert features["emotion:motivated"] >= 1.0


def test_happy_family_query_features(extractor):
	features = extractor.extract("I'm very happy, meeting my family tonight")
	assert features["emotion:happy"] >= 1.0
	assert features["emotion:grateful"] == pytest.approx(0.3)  # only via spreading from happy
	assert features["theme:family"] == 1.0
	assert features["theme:connection"] == 1.0
	assert features["sentiment:positive"] == 1.0


def test_extraction_is_deterministic(extractor):
	text = "My dog is sick, and I'm worried"
	assert extractor.extract(text) == extractor.extract(text)


def test_debug_log_names_token_and_category():
	messages = []
	sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
	try:
		FeatureExtractor().extract("overwhelmed")
	finally:
		logger.remove(sink_id)

	print(f"\nDebug lines: {messages}")
	assert any("Emotion hit: token='overwhelmed' -> 'overwhelmed'" in m for m in messages)
	assert not any("%s" in m for m in messages)
