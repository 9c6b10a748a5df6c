"""
FastAPI application and API routes for QuickCalc.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from quickcalc import __version__
from quickcalc.config import settings
from quickcalc.log import configure_logging
from quickcalc.models import EvaluateRequest, Evaluation, RegistryInfo
from quickcalc.service import compute
from quickcalc.tokens import CONSTANTS, FUNCTIONS

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Starting API", app_name=settings.app_name, version=__version__)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Calculator expression evaluation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# =============================================================================
# Evaluation API
# =============================================================================

@app.get("/api/v1/evaluate", response_model=Evaluation)
async def evaluate_query(
    q: str = Query("", max_length=1000, description="Expression, optionally prefixed with '='"),
):
    """Evaluate an expression passed in the query string."""
    return compute(q)


@app.post("/api/v1/evaluate", response_model=Evaluation)
async def evaluate_body(request: EvaluateRequest):
    """Evaluate an expression passed in the request body."""
    return compute(request.expression)


@app.get("/api/v1/registry", response_model=RegistryInfo)
async def get_registry():
    """List the functions and constants the evaluator understands."""
    return RegistryInfo(functions=sorted(FUNCTIONS), constants=dict(CONSTANTS))
