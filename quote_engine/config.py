"""
Configuration settings for the Movie Quote Engine.
Values come from environment variables, optionally loaded from a .env file.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from .lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon

# Load environment variables from .env file if it exists
load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent  # repository root
DEFAULT_QUOTES_PATH = BASE_DIR / "data" / "quotes.json"

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_TOP_N = 3
DEFAULT_LOG_LEVEL = "WARNING"  # keep the CLI quiet unless asked


@dataclass(frozen=True)
class Settings:
	quotes_path: Path
	lexicon_path: Optional[Path]
	top_n: int
	log_level: str

	def load_lexicon(self) -> Lexicon:
		"""The configured lexicon, or the built-in one when no override file is set."""
		if self.lexicon_path is None:
			return DEFAULT_LEXICON
		return load_lexicon(str(self.lexicon_path))


def _int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or not raw.strip():
		return default
	try:
		return int(raw)
	except ValueError:
		logger.warning(f"[Config] Ignoring non-integer {name}={raw!r}; using {default}")
		return default


def get_settings() -> Settings:
	"""Read settings from the environment at call time."""
	lexicon_path = os.getenv("QUOTE_ENGINE_LEXICON_PATH", "").strip()
	return Settings(
		quotes_path=Path(os.getenv("QUOTE_ENGINE_QUOTES_PATH", str(DEFAULT_QUOTES_PATH))),
		lexicon_path=Path(lexicon_path) if lexicon_path else None,
		top_n=max(1, _int_env("QUOTE_ENGINE_TOP_N", DEFAULT_TOP_N)),
		log_level=os.getenv("QUOTE_ENGINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
	)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
	"""Replace loguru's default sink with a single stderr sink at `level`."""
	logger.remove()
	logger.add(sys.stderr, level=level)
