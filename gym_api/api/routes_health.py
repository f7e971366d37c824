from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/health")
def health(request: Request):
    return {"ok": True, "service": request.app.state.settings.service_name}
