"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lendermatch.api.v1.router import api_router
from lendermatch.config import settings
from lendermatch.deps import get_matcher

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Reject invalid MATCH_WEIGHT_OVERRIDES before serving requests
get_matcher()

app = FastAPI(
    title="Lender Matching API",
    description="Ranks panel lenders an applicant is eligible to be introduced to",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Service banner with pointers to the docs and the match endpoint."""
    return {
        "service": app.title,
        "version": app.version,
        "docs": app.docs_url,
        "match": "/api/v1/matching/lenders",
    }
