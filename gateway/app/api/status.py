from fastapi import APIRouter, Request
from typing import Dict
from gateway.app.core.metrics import metrics

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> Dict[str, str]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "environment": settings.environment,
        "default_model": settings.default_model_id,
    }


@router.get("/metrics")
async def get_metrics() -> dict:
    """Request, error-kind and prediction latency counters."""
    return metrics.get_metrics()
