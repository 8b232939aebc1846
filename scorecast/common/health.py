"""Health Probe."""
from fastapi import APIRouter, Request
from pydantic import BaseModel

from scorecast.config import runtime_config

router = APIRouter(tags=["system"])


class HealthStatus(BaseModel):
    status: str
    version: str = "0.1.0"
    env: str = "dev"
    viewers: int = 0


@router.get("/health", response_model=HealthStatus)
def health_check(request: Request):
    manager = getattr(request.app.state, "scoreboard_connections", None)
    viewers = len(manager.active) if manager is not None else 0
    return HealthStatus(status="ok", env=runtime_config.get_env(), viewers=viewers)
