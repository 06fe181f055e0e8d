#health check endpoint
from fastapi import APIRouter, Request

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
def health(request: Request):
    state = request.app.state
    return {
        "status": "ok",
        "insights": len(state.insight_repository),
        "timers": len(state.timer_store),
        "version": state.config.API_VERSION,
    }
