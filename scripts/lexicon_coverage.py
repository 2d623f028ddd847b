"""
Report how well the lexicon covers a quote collection.

This script:
1) Loads quotes from the configured quote file (or the path given as argument)
2) Extracts each quote's feature vector with the configured lexicon
3) Lists quotes with no features (the engine can never return them)
4) Counts hits per feature dimension

Usage:
    python -m scripts.lexicon_coverage [quotes_file]
"""

import sys  # optional path argument
from collections import Counter  # per-dimension counts

from loguru import logger  # console logging

from quote_engine.config import get_settings  # default paths
from quote_engine.data_loader import QuoteLoader  # data ingestion
from quote_engine.feature_extractor import FeatureExtractor  # text -> features


def coverage_report(quotes, extractor: FeatureExtractor):
	"""Return (quotes without features, Counter of dimension -> number of quotes hitting it)."""
	silent = []
	dimensions = Counter()
	for quote in quotes:
		features = extractor.extract(quote.text)
		if not features:
			silent.append(quote)
			continue
		dimensions.update({name.split(':', 1)[0] for name in features})
	return silent, dimensions


def main():
	settings = get_settings()
	quotes_path = sys.argv[1] if len(sys.argv) > 1 else str(settings.quotes_path)

	logger.info("=" * 60)
	logger.info("Lexicon Coverage Report")
	logger.info("=" * 60)

	quotes = QuoteLoader().load_quotes(quotes_path)
	lexicon = settings.load_lexicon()
	logger.info(f"[OK] Loaded {len(quotes)} quotes; lexicon v{lexicon.version}")

	silent, dimensions = coverage_report(quotes, FeatureExtractor(lexicon))

	for dimension, count in sorted(dimensions.items()):
		logger.info(f"  {dimension:<10} {count} quotes")

	if silent:
		logger.warning(f"{len(silent)} quotes have no features and will never match:")
		for quote in silent:
			logger.warning(f"  - \"{quote.text}\" ({quote.movie})")
	else:
		logger.info("Every quote has at least one feature.")
	logger.info("=" * 60)


if __name__ == '__main__':
	main()
