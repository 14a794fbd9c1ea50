from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/healthz")
async def health_check(request: Request):
    """Health check endpoint; ready once the database is initialized"""
    ready = getattr(request.app.state, "ready", False)
    return {"status": "ok" if ready else "starting", "ready": ready, "service": "soil-moisture-server"}
