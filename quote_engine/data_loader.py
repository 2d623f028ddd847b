"""
Data loading module.
Reads quote collections from JSON or JSON Lines files into Quote records.
"""

# Standard libs for JSON parsing, typing and paths
import json  # read JSON documents and lines
from typing import Any, Dict, Iterable, List  # type hints
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logger

from .errors import QuoteDataError
from .models import Quote  # structured quote record


class QuoteLoader:
	"""
	Handles loading of quote data.
	Accepted layouts:
	- {"query": "...", "quotes": [{"text": ..., "movie": ..., "character": ...}, ...]}
	- a bare JSON array of quote objects
	- JSON Lines (.jsonl), one quote object per line
	"""

	def load_quotes(self, filepath: str) -> List[Quote]:
		"""
		Load quotes from disk. Entries without text are skipped with a warning.
		Raises FileNotFoundError if the file is missing and QuoteDataError if
		nothing usable could be read.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Quote data file not found: {filepath}")

		logger.info(f"[QuoteLoader] Loading quotes from {filepath}...")

		if filepath.is_dir():
			raise QuoteDataError(f"Quote data path is a directory: {filepath}")

		try:
			if filepath.suffix.lower() == '.jsonl':
				records = self._read_jsonl(filepath)
			else:
				records = self._read_json(filepath)
		except UnicodeDecodeError as e:
			raise QuoteDataError(f"Quotes file {filepath} is not valid UTF-8: {e}") from e

		quotes = self.parse_records(records)
		if not quotes:
			raise QuoteDataError(f"No quotes available in {filepath}")

		logger.info(f"[QuoteLoader] Successfully loaded {len(quotes)} quotes.")  # summary
		return quotes

	def parse_records(self, records: Iterable[Any]) -> List[Quote]:
		"""Convert raw records into Quote objects, skipping invalid ones."""
		quotes = []
		for index, record in enumerate(records, 1):
			try:
				quotes.append(self._parse_quote(record))
			except (TypeError, ValueError) as e:
				logger.warning(f"[QuoteLoader] Skipping quote #{index}: {e}")  # malformed record
		return quotes

	def _read_json(self, filepath: Path) -> List[Any]:
		with open(filepath, 'r', encoding='utf-8') as f:
			try:
				data = json.load(f)
			except json.JSONDecodeError as e:
				raise QuoteDataError(f"Failed to parse quotes file {filepath}: {e}") from e

		if isinstance(data, list):  # bare array
			return data
		if isinstance(data, dict) and isinstance(data.get('quotes'), list):  # {"quotes": [...]}
			return data['quotes']
		raise QuoteDataError(f"Quotes file {filepath} has no 'quotes' list")

	def _read_jsonl(self, filepath: Path) -> List[Any]:
		records = []
		# Read line-by-line; one bad line should not lose the whole collection
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):
				line = line.strip()
				if not line:  # blank separator lines
					continue
				try:
					records.append(json.loads(line))
				except json.JSONDecodeError as e:
					logger.warning(f"[QuoteLoader] Skipping invalid JSON at line {line_num}: {e}")
		return records

	def _parse_quote(self, data: Dict) -> Quote:
		"""Build a Quote from a raw dictionary with safe defaults for optional fields."""
		if not isinstance(data, dict):
			raise TypeError(f"expected an object, got {type(data).__name__}")

		text = self._clean(data.get('text'))
		if not text:
			raise ValueError("missing quote text")

		return Quote(
			text=text,
			movie=self._clean(data.get('movie')),
			character=self._clean(data.get('character')),
		)

	def _clean(self, value) -> str:
		"""Collapse whitespace; None becomes an empty string."""
		if value is None:
			return ''
		return ' '.join(str(value).split())
