"""
Streamlit UI for the Movie Quote Engine.
Calls the local FastAPI server at http://localhost:8000 to fetch quotes,
or runs a local engine over the configured quote file.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from quote_engine.config import get_settings  # where the quotes live
from quote_engine.data_loader import QuoteLoader  # load quotes from file
from quote_engine.search_engine import QuoteSearchEngine  # crisis check + matching + ranking

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8000"  # default API base URL

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Quote Engine", layout="centered")

# Main page title
st.title("🎬 Movie Quote Engine – Finding inspiration in cinema")

# Cache the local engine so we only load quotes once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[QuoteSearchEngine]:
	"""Create a local QuoteSearchEngine from the configured quote file and lexicon."""
	try:
		settings = get_settings()
		quotes = QuoteLoader().load_quotes(str(settings.quotes_path))  # read dataset
		return QuoteSearchEngine(quotes, lexicon=settings.load_lexicon())
	except Exception as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local quote engine: {e}")
		return None  # signal failure

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	top_n = st.slider("Quotes to show", min_value=1, max_value=10, value=3)
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	use_local = st.toggle("Use local engine", value=False, help="If enabled or the API is unreachable, the app runs fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[QuoteSearchEngine] = None  # placeholder
if use_local or not api_available:
	with st.spinner("Loading quotes..."):
		local_engine = init_local_engine()
		if local_engine is not None:
			st.sidebar.success("Local engine ready.")
		else:
			st.sidebar.error("Local engine failed to initialize.")

# Main text input where users describe how they feel
query = st.text_input("How are you feeling? Describe your situation", placeholder="e.g., I just got rejected and feel like giving up")
search_btn = st.button("Find quotes", type="primary")

# When user clicks the button and the field isn't empty, perform the query
if search_btn and query.strip():
	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				# Local mode: run the full pipeline inside this process
				outcome = local_engine.search(query, top_n=top_n)
				payload = {
					"status": outcome.status.value,
					"message": outcome.message,
					"suggestions": outcome.suggestions,
					"results": [
						{
							"quote": {"text": r.quote.text, "movie": r.quote.movie, "character": r.quote.character},
							"score": round(r.score, 3),
						}
						for r in outcome.results
					],
				}
			else:
				# API mode: call the server and let it perform the search
				resp = requests.get(f"{api_url}/search", params={"q": query, "top_n": top_n}, timeout=30)
				resp.raise_for_status()  # raise error if server responded with an error code
				payload = resp.json()

			status = payload.get("status")
			if status == "crisis":
				st.error(payload.get("message"))
			elif status == "no_match":
				st.warning(payload.get("message"))
				if payload.get("suggestions"):
					st.caption(f"Words that might help: {', '.join(payload['suggestions'])}")
			else:
				st.success("Here are some quotes that might resonate with you:")
				for i, item in enumerate(payload.get("results", []), start=1):
					quote = item["quote"]
					st.subheader(f"{i}. “{quote['text']}”")
					st.caption(f"— {quote['character']} ({quote['movie']}) | Score: {item['score']:.2f}")
					st.divider()

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")
		except ValueError as e:  # empty query and similar caller errors
			st.error(f"Search failed: {e}")

# Show a footer indicator of current mode
st.sidebar.markdown("---")
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")
