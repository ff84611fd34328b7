from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="", tags=["pages"])

LIVENESS_TEXT = "FootballAgentSL backend is running"


@router.get("/", response_class=PlainTextResponse)
def liveness():
    return LIVENESS_TEXT
