"""
CompoundWatch API — Main Application

POST /cycle              — Run one refresh cycle over a batch of items
GET  /patterns           — Compound pattern catalog (localized)
GET  /topics             — Topic catalog
GET  /sources/weight     — Credibility weight for a source name
GET  /annotations/{loc}  — Merged narrative (built-in + manual) per pattern
POST /annotations        — Append a manual narrative bullet
GET  /health             — Health check
"""

from __future__ import annotations

import threading
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from compoundwatch import __version__
from compoundwatch.config import settings
from compoundwatch.engine import MonitorEngine
from compoundwatch.logging import setup_logging, get_logger
from compoundwatch.schemas.cycle import (
    AnnotationListResponse,
    AnnotationRequest,
    AnnotationResponse,
    CycleRequest,
    CycleResponse,
    HealthResponse,
    PatternListResponse,
    SourceWeightResponse,
    TopicListResponse,
)

logger = get_logger("api")

# Cycle numbers are assigned in request order
_engine_lock = threading.Lock()
_engine: Optional[MonitorEngine] = None


def get_engine() -> MonitorEngine:
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = MonitorEngine()
        return _engine


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build and validate the catalog before accepting traffic."""
    setup_logging()
    engine = get_engine()
    logger.info(
        "CompoundWatch API starting",
        extra={"engine_version": settings.ENGINE_VERSION, "items": len(engine.catalog.patterns)},
    )
    yield
    logger.info("CompoundWatch API shutting down")


app = FastAPI(
    title="CompoundWatch API",
    description="Compound signal detection over news topic co-occurrence",
    version=f"{__version__} (engine {settings.ENGINE_VERSION})",
    lifespan=lifespan,
)

# CORS: set COMPOUNDWATCH_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Return a structured 500 for unhandled exceptions without leaking internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error. The request could not be completed.",
        },
    )


# ============================================================
# ROUTES
# ============================================================

@app.post("/cycle", response_model=CycleResponse)
def run_cycle(request: CycleRequest):
    """Feed one refresh cycle of items through the engine."""
    engine = get_engine()
    items = [i.to_item() for i in request.items]
    with _engine_lock:
        report = engine.run_cycle(items, locale=request.locale)
    result = report.to_dict()
    result["summary"] = engine.summary(report)
    return result


@app.get("/patterns", response_model=PatternListResponse)
def get_patterns(
    locale: Optional[str] = Query(None, pattern="^[a-z]{2}(-[A-Z]{2})?$"),
):
    """Compound pattern catalog. Unknown locales fall back to English."""
    localizer = get_engine().catalog.localizer
    patterns = [p.to_dict() for p in localizer.localize_all(locale)]
    resolved = locale if localizer.supports(locale) else localizer.canonical_locale
    return {"locale": resolved, "total": len(patterns), "patterns": patterns}


@app.get("/topics", response_model=TopicListResponse)
def get_topics():
    topics = get_engine().catalog.matcher.get_topics()
    return {"total": len(topics), "topics": topics}


@app.get("/sources/weight", response_model=SourceWeightResponse)
def get_source_weight(source: str = Query(..., max_length=200)):
    return {"source": source, "weight": get_engine().catalog.sources.weight(source)}


@app.get("/annotations/{locale}", response_model=AnnotationListResponse)
def get_annotations(locale: str):
    """Every pattern's narrative in `locale`: built-in bullets, then manual additions."""
    engine = get_engine()
    if not engine.catalog.localizer.supports(locale):
        raise HTTPException(status_code=404, detail=f"Unknown locale '{locale}'")
    views = engine.annotations.load(locale)
    return {
        "locale": locale,
        "patterns": {pid: view.as_dict() for pid, view in views.items()},
    }


@app.post("/annotations", response_model=AnnotationResponse)
def add_annotation(request: AnnotationRequest):
    engine = get_engine()
    localizer = engine.catalog.localizer
    if localizer.get_pattern(request.pattern_id) is None:
        raise HTTPException(status_code=404, detail=f"Unknown pattern '{request.pattern_id}'")
    if not localizer.supports(request.locale):
        raise HTTPException(status_code=422, detail=f"Unsupported locale '{request.locale}'")
    appended = engine.annotations.append(
        request.locale, request.pattern_id, request.category, request.text,
    )
    return {"appended": appended}


@app.get("/health", response_model=HealthResponse)
def health():
    """Health check."""
    engine = get_engine()
    return {
        "status": "operational",
        "version": __version__,
        "engine_version": settings.ENGINE_VERSION,
        "window_cycles": engine.config.WINDOW_CYCLES,
        "current_cycle": engine.current_cycle,
        "tracked_topics": len(engine.tracker),
        "locales": engine.catalog.localizer.locales,
    }


# --- Version Headers Middleware ---
@app.middleware("http")
async def add_version_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-CompoundWatch-Version"] = __version__
    response.headers["X-Engine-Version"] = settings.ENGINE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} -> {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
