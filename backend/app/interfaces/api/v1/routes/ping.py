from fastapi import APIRouter

from app.application.services.health_service import get_status

router = APIRouter(tags=["health"])


@router.get("/ping")
def ping():
    return get_status()
