"""
Shared fixtures for the quote engine tests.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from quote_engine.data_loader import QuoteLoader
from quote_engine.models import Quote
from quote_engine.search_engine import QuoteSearchEngine

BUNDLED_QUOTES = ROOT / 'data' / 'quotes.json'


@pytest.fixture(scope='session')
def bundled_quotes():
	return QuoteLoader().load_quotes(str(BUNDLED_QUOTES))


@pytest.fixture
def bundled_engine(bundled_quotes):
	return QuoteSearchEngine(bundled_quotes)


@pytest.fixture
def sample_quotes():
	return [
		Quote("I'm gonna make him an offer he can't refuse. I'm happy with family tonight.", "The Godfather", "Vito Corleone"),
		Quote("Happy family time.", "Sample", "Narrator"),
		Quote("You're gonna need a bigger boat.", "Jaws", "Martin Brody"),
		Quote("Life is like a box of chocolates.", "Forrest Gump", "Forrest Gump"),
		Quote("I'm worried about you and I will help.", "Sample", "Friend"),
		Quote("Shhh.", "Sample", "Librarian"),
	]


@pytest.fixture
def engine(sample_quotes):
	return QuoteSearchEngine(sample_quotes)
