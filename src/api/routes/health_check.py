from fastapi import APIRouter, status
from pydantic import BaseModel

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    success: bool
    message: str


@router.get("/", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    return HealthResponse(success=True, message="server is live")
