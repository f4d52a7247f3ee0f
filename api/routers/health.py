"""
Liveness endpoint for monitoring and load balancers.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """Report that the analytics service is up."""
    return {"status": "ok", "service": "workout-analytics"}
