"""
Ride Service: Health Check Route
================================

What:  Liveness endpoint for uptime probes and load balancers.
How:   Answers from the process alone. It does not touch the database, so a
       probe can never fail or slow down because of a datastore issue.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Service liveness check",
)
async def health_check() -> str:
    return "Healthy"
