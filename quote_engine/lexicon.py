"""
Lexicon module.
The read-only knowledge base behind feature extraction, tone filtering and crisis detection.

A Lexicon is built once at startup and handed to every component that needs it.
The default English data lives in DEFAULT_LEXICON; alternative data can be loaded
from a JSON file with load_lexicon() without touching any matching code.
"""

import json  # lexicon override files
from dataclasses import dataclass  # immutable configuration record
from pathlib import Path  # filesystem-safe paths
from types import MappingProxyType  # read-only dict views
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger  # console logging

from .errors import LexiconError


# Section names used in lexicon JSON files
TONE_PHRASE_KINDS = ("serious", "inappropriate", "dismissive", "cheerful")


@dataclass(frozen=True, eq=False)
class Lexicon:
	"""
	Emotion, theme and tone vocabulary.

	Keyword mappings are matched with a bidirectional substring test, so entries may be
	word stems ("overwhelm", "motivat"). Word sets are matched by exact token equality.
	Phrase lists are matched by containment against lowercased raw text.
	"""
	version: str
	emotion_keywords: Mapping[str, Tuple[str, ...]]
	emotion_relations: Mapping[str, Tuple[str, ...]]
	theme_keywords: Mapping[str, Tuple[str, ...]]
	positive_words: frozenset
	negative_words: frozenset
	action_words: frozenset
	reflective_words: frozenset
	stop_words: frozenset
	crisis_phrases: Tuple[str, ...]
	serious_phrases: Tuple[str, ...]  # blocked for joyful / celebratory queries
	inappropriate_phrases: Tuple[str, ...]  # threatening or dismissive, blocked for worried queries
	dismissive_phrases: Tuple[str, ...]  # platitudes that minimize an immediate worry
	cheerful_phrases: Tuple[str, ...]  # blocked for struggling queries

	def __post_init__(self):
		self.validate()

	def validate(self) -> None:
		"""Check structural rules; raise LexiconError on the first violation."""
		for dimension, mapping in (("emotion", self.emotion_keywords), ("theme", self.theme_keywords)):
			if not mapping:
				raise LexiconError(f"Lexicon declares no {dimension} categories")
			for name, keywords in mapping.items():
				if not keywords:
					raise LexiconError(f"{dimension.title()} category '{name}' has no keywords")
		for source in self.emotion_relations:
			if source not in self.emotion_keywords:
				raise LexiconError(f"Emotion relation declared for unknown emotion '{source}'")
		if not self.crisis_phrases:
			raise LexiconError("Lexicon declares no crisis phrases")

	@property
	def emotions(self) -> List[str]:
		return list(self.emotion_keywords)

	@property
	def themes(self) -> List[str]:
		return list(self.theme_keywords)

	def related_emotions(self, emotion: str) -> Tuple[str, ...]:
		return self.emotion_relations.get(emotion, ())

	def tone_phrases(self, kind: str) -> Tuple[str, ...]:
		"""Return one of the tone-filter phrase lists by name."""
		if kind not in TONE_PHRASE_KINDS:
			raise KeyError(f"Unknown tone phrase list '{kind}'")
		return getattr(self, f"{kind}_phrases")

	@classmethod
	def from_dict(cls, data: Mapping[str, Any], base: Optional["Lexicon"] = None) -> "Lexicon":
		"""
		Build a lexicon from plain data (as read from JSON).
		Sections missing from `data` are taken from `base` (the default lexicon if omitted).
		"""
		base = base or DEFAULT_LEXICON
		tone = data.get("tone_phrases", {})
		if not isinstance(tone, Mapping):
			raise LexiconError("Lexicon section 'tone_phrases' must be an object of phrase lists")

		def keywords(key: str, fallback: Mapping[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
			if key not in data:
				return fallback
			return _freeze_mapping(data[key], key)

		def words(key: str, fallback: frozenset) -> frozenset:
			return frozenset(_normalize(data[key], key)) if key in data else fallback

		def phrases(key: str, values: Optional[Iterable[str]], fallback: Tuple[str, ...]) -> Tuple[str, ...]:
			return tuple(_normalize(values, key)) if values is not None else fallback

		emotion_keywords = keywords("emotions", base.emotion_keywords)
		if "emotions" in data and "relations" not in data:
			# Default relations only for emotions the override still declares
			emotion_relations = MappingProxyType({
				source: targets for source, targets in base.emotion_relations.items()
				if source in emotion_keywords
			})
		else:
			emotion_relations = keywords("relations", base.emotion_relations)

		return cls(
			version=str(data.get("version", base.version)),
			emotion_keywords=emotion_keywords,
			emotion_relations=emotion_relations,
			theme_keywords=keywords("themes", base.theme_keywords),
			positive_words=words("positive_words", base.positive_words),
			negative_words=words("negative_words", base.negative_words),
			action_words=words("action_words", base.action_words),
			reflective_words=words("reflective_words", base.reflective_words),
			stop_words=words("stop_words", base.stop_words),
			crisis_phrases=phrases("crisis_phrases", data.get("crisis_phrases"), base.crisis_phrases),
			serious_phrases=phrases("tone_phrases.serious", tone.get("serious"), base.serious_phrases),
			inappropriate_phrases=phrases("tone_phrases.inappropriate", tone.get("inappropriate"), base.inappropriate_phrases),
			dismissive_phrases=phrases("tone_phrases.dismissive", tone.get("dismissive"), base.dismissive_phrases),
			cheerful_phrases=phrases("tone_phrases.cheerful", tone.get("cheerful"), base.cheerful_phrases),
		)


def _normalize(values: Iterable[str], section: str) -> List[str]:
	if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple, set, frozenset)):
		raise LexiconError(f"Lexicon section '{section}' must be a list of strings, got {type(values).__name__}")
	if not all(isinstance(v, str) for v in values):
		raise LexiconError(f"Lexicon section '{section}' must contain only strings")
	# Tokens are always lowercase, so keywords must be too
	return [v.strip().lower() for v in values if v.strip()]


def _freeze_mapping(raw: Mapping[str, Iterable[str]], section: str) -> Mapping[str, Tuple[str, ...]]:
	if not isinstance(raw, Mapping):
		raise LexiconError(f"Lexicon section '{section}' must be an object of keyword lists, got {type(raw).__name__}")
	return MappingProxyType({str(k).strip().lower(): tuple(_normalize(v, f"{section}.{k}")) for k, v in raw.items()})


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
	"""json object_pairs_hook: category names must be unique within their section."""
	out: Dict[str, Any] = {}
	for key, value in pairs:
		if key in out:
			raise LexiconError(f"Duplicate lexicon entry '{key}'")
		out[key] = value
	return out


def load_lexicon(path: str) -> Lexicon:
	"""
	Load a lexicon JSON file layered over the default lexicon.
	Raises FileNotFoundError for a missing file and LexiconError for invalid content.
	"""
	path = Path(path)
	if not path.exists():
		raise FileNotFoundError(f"Lexicon file not found: {path}")

	logger.info(f"[Lexicon] Loading lexicon from {path}")
	try:
		with open(path, "r", encoding="utf-8") as f:
			data = json.load(f, object_pairs_hook=_reject_duplicate_keys)
	except (json.JSONDecodeError, UnicodeDecodeError) as e:
		raise LexiconError(f"Invalid lexicon JSON in {path}: {e}") from e
	except IsADirectoryError as e:
		raise LexiconError(f"Lexicon path {path} is a directory") from e

	if not isinstance(data, dict):
		raise LexiconError(f"Lexicon file {path} must contain a JSON object")

	lexicon = Lexicon.from_dict(data)
	logger.info(
		f"[Lexicon] Loaded version {lexicon.version} | emotions={len(lexicon.emotion_keywords)} | themes={len(lexicon.theme_keywords)}"
	)
	return lexicon


DEFAULT_LEXICON = Lexicon(
	version="1.0",
	emotion_keywords=MappingProxyType({
		"overwhelmed": ("overwhelm", "too much", "swamp", "drown", "bury", "flood"),
		"motivated": ("motivat", "inspir", "driven", "determin", "pump", "energiz", "push"),
		"worried": ("worr", "anxious", "nervous", "concern", "afraid", "scare", "fear"),
		"sad": ("sad", "depress", "down", "unhappy", "heartbreak", "griev", "mourn"),
		"excited": ("excit", "thrill", "eager", "enthusias", "can't wait", "looking forward"),
		"happy": ("happy", "joy", "delight", "glad", "pleased", "cheer", "content", "elated"),
		"tired": ("tire", "exhaust", "worn", "drain", "fatigue", "burnt out", "weary"),
		"stuck": ("stuck", "trap", "stagnant", "block", "immobil"),
		"uncertain": ("uncertain", "unsure", "confus", "lost", "unclear", "doubt"),
		"hopeful": ("hope", "optimis", "positive", "bright", "promising"),
		"struggling": ("struggl", "difficult", "hard", "tough", "challeng", "fight"),
		"lonely": ("lone", "isolat", "disconnect", "apart", "solo"),
		"rejected": ("reject", "dismiss", "refus", "turn down", "decline"),
		"proud": ("proud", "accomplish", "achiev", "success", "triumph"),
		"grateful": ("grateful", "thankful", "appreciat", "bless"),
		"angry": ("angry", "mad", "furious", "irritat", "frustrat"),
		"peaceful": ("peace", "calm", "serene", "tranquil", "relax"),
		"loved": ("love", "loved", "caring", "affection", "warm"),
		"nostalgic": ("nostalg", "remember", "miss", "memories", "past"),
	}),
	# Spreading activation: a hit on the key also nudges each related emotion
	emotion_relations=MappingProxyType({
		"overwhelmed": ("stressed", "anxious", "tired"),
		"worried": ("anxious", "uncertain", "stressed"),
		"sad": ("lonely", "hopeless", "disappointed"),
		"excited": ("hopeful", "motivated", "energized", "happy"),
		"happy": ("excited", "grateful", "joyful", "content"),
		"struggling": ("overwhelmed", "tired", "stuck"),
		"stuck": ("frustrated", "uncertain", "lost"),
		"rejected": ("sad", "disappointed", "hurt"),
		"motivated": ("determined", "hopeful", "energized"),
		"grateful": ("happy", "content", "blessed"),
		"loved": ("happy", "grateful", "warm"),
	}),
	theme_keywords=MappingProxyType({
		"persistence": ("keep", "continu", "persist", "endur", "carry on", "push through", "stay", "swimming"),
		"change": ("chang", "transiti", "shift", "transform", "evolv", "new"),
		"future": ("future", "ahead", "tomorrow", "next", "coming", "forward"),
		"challenge": ("challeng", "obstacle", "difficult", "problem", "hurdle", "barrier"),
		"opportunity": ("opportun", "chance", "possibil", "option", "opening"),
		"home": ("home", "belong", "place", "family", "roots", "comfort", "house"),
		"family": ("family", "families", "relatives", "parents", "children", "together", "reunion"),
		"journey": ("journey", "path", "road", "way", "travel", "adventure"),
		"truth": ("truth", "reality", "honest", "real", "genuine", "authentic"),
		"action": ("action", "doing", "act", "move", "step", "initiative"),
		"choice": ("choice", "decis", "choose", "select", "pick", "option"),
		"life": ("life", "living", "exist", "being", "alive"),
		"time": ("time", "moment", "now", "present", "today", "day", "tonight", "evening"),
		"support": ("support", "help", "assist", "guid", "encourag", "force", "with you"),
		"beginning": ("begin", "start", "new", "fresh", "commence", "launch"),
		"loss": ("loss", "lost", "missing", "gone", "absence"),
		"health": ("sick", "ill", "health", "medical", "disease", "pain", "dying", "doctor", "hospital"),
		"moving": ("mov", "relocat", "transfer", "shift"),
		"preparation": ("prepar", "ready", "plan", "arrang", "organiz"),
		"connection": ("meet", "meeting", "see", "visit", "reunion", "gather", "connect"),
		"celebration": ("celebrat", "party", "event", "occasion", "special"),
		"hope": ("hope", "better", "improve", "forward", "through"),
		"difficulty": ("difficult", "hard", "tough", "struggle", "through", "out"),
	}),
	positive_words=frozenset({
		"good", "great", "happy", "joy", "love", "wonderful", "amazing",
		"beautiful", "excellent", "fantastic", "brilliant", "superb",
		"beyond", "infinity", "force", "blessed", "lucky", "glad",
		"delight", "pleased", "cheerful", "sweet", "nice", "fun",
	}),
	negative_words=frozenset({
		"bad", "terrible", "awful", "horrible", "sad", "pain", "hurt",
		"problem", "crisis", "emergency", "sick", "dying", "death",
		"refuse", "reject", "serious", "difficult", "struggle",
	}),
	action_words=frozenset({
		"do", "act", "move", "go", "make", "create", "build",
		"fight", "push", "drive", "run", "work", "try", "living",
		"swimming", "busy", "defines",
	}),
	reflective_words=frozenset({
		"think", "feel", "believe", "understand", "know", "wonder",
		"consider", "reflect", "remember", "realize", "learn",
		"life", "truth", "defined", "opportunities", "miss",
	}),
	stop_words=frozenset({
		"a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he",
		"in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "will", "with",
		"we", "you", "your",
	}),
	# Apostrophe-free spellings are listed too; over-triggering is preferred to a miss
	crisis_phrases=(
		"kill myself",
		"end my life",
		"don't want to live",
		"dont want to live",
		"want to die",
		"suicide",
		"suicidal",
		"hurt myself",
		"harm myself",
		"self-harm",
		"not worth living",
		"better off dead",
		"end it all",
		"can't go on",
		"cant go on",
		"no reason to live",
	),
	serious_phrases=(
		"defines me", "who i am", "underneath",
		"refuse", "offer", "handle the truth",
		"fight club", "rule", "serious",
		"problem", "crisis", "boat",
	),
	inappropriate_phrases=(
		"refuse", "offer", "can't refuse",
		"i'll be back",
		"fight club", "rule",
		"boat", "gonna need",
		"nobody puts", "corner",
		"handle the truth",
	),
	dismissive_phrases=(
		"tomorrow is another day",
		"life is like", "box of chocolates",
		"life moves pretty fast",
	),
	cheerful_phrases=(
		"infinity and beyond",
		"had me at hello",
	),
)
