"""
Tests for the command-line front end.
"""

import io
from pathlib import Path

from rich.console import Console

from quote_engine.cli import QuoteCLI, build_parser, main
from quote_engine.models import OutcomeStatus, Quote, SearchOutcome, SearchResult

BUNDLED_QUOTES = str(Path(__file__).resolve().parents[1] / "data" / "quotes.json")


def _cli(engine):
	buffer = io.StringIO()
	return QuoteCLI(engine, top_n=3, console=Console(file=buffer, width=120)), buffer


def test_parser_defaults():
	args = build_parser().parse_args([])
	assert args.quotes_file is None
	assert args.query is None
	assert args.top_n is None


def test_single_query_crisis(capsys):
	assert main([BUNDLED_QUOTES, "-q", "I don't want to live anymore"]) == 0
	out = capsys.readouterr().out
	assert "988" in out


def test_single_query_results(capsys):
	assert main([BUNDLED_QUOTES, "-q", "I feel overwhelmed and stressed", "-n", "2"]) == 0
	out = capsys.readouterr().out
	assert "Query: I feel overwhelmed and stressed" in out


def test_missing_quote_file(tmp_path):
	assert main([str(tmp_path / "missing.json"), "-q", "hello"]) == 1


def test_unreadable_quote_paths(tmp_path):
	assert main([str(tmp_path), "-q", "hello"]) == 1
	binary = tmp_path / "quotes.json"
	binary.write_bytes(b"\xff\xfe\x00")
	assert main([str(binary), "-q", "hello"]) == 1


def test_malformed_lexicon_file(tmp_path):
	lexicon = tmp_path / "lexicon.json"
	lexicon.write_text('{"themes": ["home", "family"]}', encoding="utf-8")
	assert main([BUNDLED_QUOTES, "--lexicon", str(lexicon), "-q", "hello"]) == 1


def test_bad_top_n():
	assert main([BUNDLED_QUOTES, "-q", "hello", "-n", "0"]) == 2


def test_display_results(engine):
	cli, buffer = _cli(engine)
	outcome = SearchOutcome(
		status=OutcomeStatus.MATCHED,
		query="q",
		results=[SearchResult(Quote("Just keep swimming.", "Finding Nemo", "Dory"), 0.5)],
	)
	cli.display(outcome)
	out = buffer.getvalue()
	assert "1. [0.50] \"Just keep swimming.\"" in out
	assert "Dory (Finding Nemo)" in out


def test_display_no_match_lists_suggestions(engine):
	cli, buffer = _cli(engine)
	cli.search_and_display("zzzz")
	out = buffer.getvalue()
	assert "Words that might help: overwhelmed, hopeful, worried" in out


def test_empty_query_prints_error(engine):
	cli, buffer = _cli(engine)
	cli.search_and_display("   ")
	assert "Query cannot be empty" in buffer.getvalue()
