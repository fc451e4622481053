from __future__ import annotations

import logging
import os
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from scoring import NetworkTopologyScorer
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

setup_logging(os.environ.get("NETWORK_GRADER_LOG_LEVEL", "INFO"))

app = FastAPI(title="Network Grader API", version="1.0.0")

# Allow local dev frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

scorer = NetworkTopologyScorer()


class NetworkBuilderRequest(BaseModel):
    network: Optional[Any] = None
    moduleId: Optional[str] = None


@app.post("/games/network-builder")
def post_network_builder(body: NetworkBuilderRequest):
    if body.moduleId:
        logger.debug(f"Grading network for module {body.moduleId}")
    try:
        result = scorer.evaluate(body.network)
    except Exception as e:
        logger.error(f"Network validation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to validate network topology")
    return result.to_response()


@app.get("/health")
def health():
    return {"service": "network-grader", "status": "ok"}
