"""
Command-line front end.
Single-shot (--query) or interactive search over a quote file, rendered with rich.
"""

import argparse
from typing import List, Optional

from loguru import logger
from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import configure_logging, get_settings
from .data_loader import QuoteLoader
from .errors import LexiconError, QuoteDataError, QuoteEngineError
from .lexicon import load_lexicon
from .models import OutcomeStatus, SearchOutcome
from .search_engine import QuoteSearchEngine


EXIT_WORDS = ("exit", "quit")


class QuoteCLI:
	def __init__(self, engine: QuoteSearchEngine, top_n: int, console: Optional[Console] = None):
		self.engine = engine
		self.top_n = top_n
		self.console = console or Console()

	def print_welcome(self):
		title = Text("Movie Quote Search Engine", style="bold white")
		subtitle = Text("Finding inspiration in cinema", style="cyan")
		self.console.print(Panel(Align.center(title + "\n" + subtitle), border_style="green", box=box.DOUBLE))

	def run(self):
		"""Prompt until the user types exit/quit or closes input."""
		self.print_welcome()
		while True:
			try:
				query = self.console.input("\n[bold cyan]How are you feeling? Describe your situation:[/bold cyan]\n> ").strip()
			except (EOFError, KeyboardInterrupt):
				break

			if not query:
				continue
			if query.lower() in EXIT_WORDS:
				self.console.print("\n[yellow]Take care! Remember: just keep swimming.[/yellow]")
				break

			self.search_and_display(query)

	def run_single(self, query: str):
		self.print_welcome()
		self.console.print(f"Query: {query}")
		self.search_and_display(query)

	def search_and_display(self, query: str):
		try:
			outcome = self.engine.search(query, top_n=self.top_n)
		except QuoteEngineError as e:
			self.console.print(f"\n[red]{e}[/red]")
			return
		self.display(outcome)

	def display(self, outcome: SearchOutcome):
		"""Main display router."""
		if outcome.status is OutcomeStatus.CRISIS:
			self.console.print(Panel(outcome.message, title="Crisis resources", border_style="red", box=box.DOUBLE))
		elif outcome.status is OutcomeStatus.NO_MATCH:
			self.console.print(f"\n[yellow]{outcome.message}[/yellow]")
			if outcome.suggestions:
				self.console.print(f"Words that might help: {', '.join(outcome.suggestions)}")
		else:
			self._display_results(outcome)

	def _display_results(self, outcome: SearchOutcome):
		self.console.print("\n[bold green]Here are some quotes that might resonate with you:[/bold green]\n")
		for i, result in enumerate(outcome.results, 1):
			quote = result.quote
			self.console.print(f"{i}. [{result.score:.2f}] \"{quote.text}\"", markup=False)
			self.console.print(f"   - {quote.character} ({quote.movie})", markup=False, style="dim")
		self.console.rule()


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="quote-engine",
		description="Movie Quote Search Engine - find inspiration in cinema",
	)
	parser.add_argument("quotes_file", nargs="?", help="Path to quotes JSON/JSONL file")
	parser.add_argument("-q", "--query", help="Search once and exit (skips interactive mode)")
	parser.add_argument("-n", "--top-n", type=int, help="Number of quotes to show")
	parser.add_argument("--lexicon", help="Path to a lexicon JSON override")
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	settings = get_settings()
	configure_logging(settings.log_level)

	quotes_path = args.quotes_file or str(settings.quotes_path)
	top_n = args.top_n if args.top_n is not None else settings.top_n
	console = Console()

	if top_n < 1:
		console.print(f"[red]Error: --top-n must be at least 1, got {top_n}[/red]")
		return 2

	try:
		lexicon = load_lexicon(args.lexicon) if args.lexicon else settings.load_lexicon()
		quotes = QuoteLoader().load_quotes(quotes_path)
	except (FileNotFoundError, QuoteDataError, LexiconError) as e:
		logger.error(f"[CLI] Startup failed: {e}")
		console.print(f"[red]Error: {e}[/red]")
		return 1

	cli = QuoteCLI(QuoteSearchEngine(quotes, lexicon=lexicon), top_n=top_n, console=console)
	if args.query:
		cli.run_single(args.query)
	else:
		cli.run()
	return 0
