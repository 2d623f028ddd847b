"""
Tokenizer module.
Turns raw text into the lowercase word tokens used for feature extraction.
"""

from typing import AbstractSet, List

# Sentence punctuation splits words; quote marks are deleted so "don't" -> "dont"
_PUNCTUATION_TABLE = str.maketrans({
	".": " ", ",": " ", "!": " ", "?": " ", ";": " ", ":": " ",
	"(": " ", ")": " ",
	"'": None, '"': None,
})

MIN_TOKEN_LENGTH = 2


def tokenize(text: str, stop_words: AbstractSet[str] = frozenset()) -> List[str]:
	"""
	Lowercase, strip punctuation, split on whitespace, then drop stop words and
	single-character tokens. No stemming.
	"""
	if not text:
		return []
	cleaned = text.lower().translate(_PUNCTUATION_TABLE)
	return [w for w in cleaned.split() if len(w) >= MIN_TOKEN_LENGTH and w not in stop_words]
