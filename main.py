"""
Slide Deck Server - markdown deck engine behind an HTTP API.

Endpoints:
  GET  /deck              - Compiled slides (title + HTML content)
  GET  /state             - Progress, control availability, TOC, navigation flags
  POST /commands/{name}   - next | previous | openToc | closeToc | toggleFullscreen
  POST /keys/{key}        - Dispatch through the key binding table
  POST /toc/{index}       - Jump to a TOC entry
  POST /settle            - Renderer acknowledges the running transition finished
  GET  /events            - Lifecycle events after a sequence number (renderer polling)
  GET  /status            - Health: slide count, gate state, stuck transition

The browser page is the Render Coordinator: it polls /events, animates each
transition_started, then POSTs /settle exactly once. All handlers are async
so every engine call runs on the event loop thread, one at a time.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request

from config import get_settings, get_fullscreen_provider
from slidedeck.coordinator import BufferedCoordinator
from slidedeck.dispatcher import InputDispatcher
from slidedeck.logging_config import setup_logging
from slidedeck.navigation import SlideEngine
from slidedeck.projection import project
from slidedeck.sources import load_deck_or_placeholder

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    deck, error = load_deck_or_placeholder(settings.deck_source, settings.fetch_timeout)
    events = BufferedCoordinator(maxlen=settings.event_buffer_size)
    engine = SlideEngine(
        deck,
        coordinators=[events],
        fullscreen=get_fullscreen_provider(settings),
    )
    app.state.events = events
    app.state.engine = engine
    app.state.dispatcher = InputDispatcher(
        engine, toc_blocks_navigation=settings.toc_blocks_navigation
    )
    app.state.compile_error = str(error) if error else None
    yield


app = FastAPI(
    title="Slide Deck Server",
    description="Markdown slide deck with single-flight animated navigation.",
    version="1.0.0",
    lifespan=lifespan,
)


# ----- Helpers -----


def _accepted(request: Request, accepted: bool) -> dict:
    return {
        "accepted": accepted,
        "state": project(request.app.state.engine).model_dump(),
    }


# ----- Endpoints -----


@app.get("/deck")
async def deck(request: Request):
    engine = request.app.state.engine
    return {
        "slides": [s.model_dump() for s in engine.deck],
        "error": request.app.state.compile_error,
    }


@app.get("/state")
async def state(request: Request):
    return project(request.app.state.engine).model_dump()


@app.post("/commands/{name}")
async def command(name: str, request: Request):
    try:
        accepted = request.app.state.dispatcher.dispatch(name)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown command: {name}")
    return _accepted(request, accepted)


@app.post("/keys/{key}")
async def key(key: str, request: Request):
    return _accepted(request, request.app.state.dispatcher.dispatch_key(key))


@app.post("/toc/{index}")
async def toc_select(index: int, request: Request):
    return _accepted(request, request.app.state.dispatcher.select(index))


@app.post("/settle")
async def settle(request: Request):
    return _accepted(request, request.app.state.engine.settle_transition())


@app.get("/events")
async def events(
    request: Request,
    after: int = Query(0, ge=0, description="Return events with a sequence number above this"),
):
    buffer = request.app.state.events
    return {"last_seq": buffer.last_seq, "events": buffer.events_after(after)}


@app.get("/status")
async def status(request: Request):
    """Deck health. 'stuck' means the renderer never settled a transition."""
    engine = request.app.state.engine
    error = request.app.state.compile_error
    return {
        "slides": len(engine.deck),
        "content": "ok" if len(engine.deck) else "no content",
        "error": error,
        "animating": engine.animating,
        "stuck": engine.stuck(settings.stuck_transition_seconds),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
