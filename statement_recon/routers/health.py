# statement_recon/routers/health.py

from fastapi import APIRouter, Response, status
from pydantic import ValidationError

from statement_recon.config import Settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness for monitoring."""
    return {
        "status": "healthy",
        "service": "statement-recon",
    }


@router.get("/ready")
async def readiness_check(response: Response):
    """
    Readiness: settings load from the environment and the CSV delimiter
    is usable by the parser.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "not_ready",
            "checks": {"settings": f"{e.error_count()} invalid value(s)"},
        }

    delimiter_ok = len(settings.csv_delimiter) == 1
    if not delimiter_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "ready" if delimiter_ok else "not_ready",
        "checks": {
            "settings": "ok",
            "csv_delimiter": "ok" if delimiter_ok else f"must be one character, got {settings.csv_delimiter!r}",
        },
    }
