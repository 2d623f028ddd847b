"""
FastAPI server exposing the quote search API.
Endpoints:
- GET /health: basic health check
- GET /search?q=...&top_n=3: returns matched quotes, a crisis response, or a no-match hint

Startup loads the quote file and lexicon named by the QUOTE_ENGINE_* settings.
"""

# Import standard libraries for timing and lifecycle hooks
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # startup hook
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and search
from quote_engine.config import get_settings  # environment-driven settings
from quote_engine.data_loader import QuoteLoader  # loads quotes from file
from quote_engine.errors import EmptyQueryError, InvalidTopNError  # caller mistakes -> 400
from quote_engine.search_engine import QuoteSearchEngine  # core search engine

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Globals that hold the search engine instance and measured startup time
ENGINE: Optional[QuoteSearchEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Initialize the search engine once when the server starts."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency
	settings = get_settings()  # read QUOTE_ENGINE_* variables

	logger.info("[API] Startup: loading quotes and initializing engine...")
	quotes = QuoteLoader().load_quotes(str(settings.quotes_path))  # read dataset
	ENGINE = QuoteSearchEngine(quotes, lexicon=settings.load_lexicon())  # create engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(quotes)} quotes.")
	yield


# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Quote Engine API", version="0.1.0", lifespan=lifespan)


# Pydantic model that describes a single quote in responses
class QuoteOut(BaseModel):
	text: str  # the quotation
	movie: str  # movie title
	character: str  # speaker


# Pydantic model for a single ranked search item
class SearchResponseItem(BaseModel):
	quote: QuoteOut  # quote metadata
	score: float  # confidence in [0, 1]
	matched_features: List[str]  # features shared with the query


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	query: str  # original query string
	top_n: int  # number of results requested
	status: str  # matched | crisis | no_match
	elapsed_ms: float  # server-side search time in ms
	results: List[SearchResponseItem]  # ranked items (empty unless matched)
	message: Optional[str] = None  # crisis resources or rephrase hint
	suggestions: List[str] = []  # emotion words to try after a no-match


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None and ENGINE.ready,  # True if quotes indexed
		"quote_count": len(ENGINE.quotes) if ENGINE is not None else 0,
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


# Main search endpoint that accepts a free-text description of a feeling
@app.get("/search", response_model=SearchResponse)
async def search(q: str = Query(..., description="How are you feeling? Describe your situation"), top_n: int = 3):
	"""Execute a quote search and return the outcome."""
	if ENGINE is None or not ENGINE.ready:  # engine must be ready to serve
		logger.warning("[API] Search requested but engine not initialized")
		raise HTTPException(status_code=503, detail="Search engine not initialized")

	start = time.time()  # start timer
	logger.debug(f"[API] /search top_n={top_n}")  # the query text itself is never logged

	try:
		outcome = ENGINE.search(q, top_n=top_n)  # run search
	except (EmptyQueryError, InvalidTopNError) as e:
		raise HTTPException(status_code=400, detail=str(e))

	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /search status={outcome.status.value} results={len(outcome.results)} in {elapsed_ms:.2f} ms")

	# Convert engine results to response schema
	items = [
		SearchResponseItem(
			quote=QuoteOut(text=r.quote.text, movie=r.quote.movie, character=r.quote.character),
			score=round(r.score, 3),
			matched_features=r.matched_features,
		)
		for r in outcome.results
	]

	return SearchResponse(
		query=q,
		top_n=top_n,
		status=outcome.status.value,
		elapsed_ms=round(elapsed_ms, 2),
		results=items,
		message=outcome.message,
		suggestions=outcome.suggestions,
	)
