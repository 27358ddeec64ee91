"""Health check route"""

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    """Liveness check; does not touch the database"""
    return {"status": "OK"}
