from app.config import settings


def get_status() -> dict:
    return {
        "message": f"Hello from {settings.app_name}",
        "version": settings.app_version,
    }
