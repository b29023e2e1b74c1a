from fastapi import APIRouter
from cc_agent.schemas.chat import HealthResponse

router = APIRouter(tags=["meta"])

@router.api_route("/health", methods=["GET", "POST"], response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")
