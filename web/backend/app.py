#!/usr/bin/env python3
"""
iRemodel API - contractor matches for homeowner remodeling jobs.

Usage:
    python -m web.backend.app

Endpoints:
    GET /api/jobs                   - Jobs, optionally filtered by ?zip_code=
    GET /api/jobs/{job_id}          - A single job
    GET /api/jobs/{job_id}/matches  - Qualified contractors, best first
    GET /health                     - Liveness probe
    GET /docs                       - Swagger UI
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config_loader import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import matches_router, jobs_router

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.logging.level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    scorer = config.matching.scorer
    logger.info(
        f"Matching with weights specialty={scorer.specialty_weight} "
        f"proximity={scorer.proximity_weight} rating={scorer.rating_weight}, "
        f"min score {scorer.min_match_score}"
    )
    yield


app = FastAPI(
    title="iRemodel API",
    description="Contractor matching for homeowner remodeling jobs",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(jobs_router)
app.include_router(matches_router)


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "iremodel-api"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting iRemodel API on {config.web.host}:{config.web.port}")
    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
