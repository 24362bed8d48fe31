from fastapi import APIRouter, Depends, status

from src.app.use_cases.auth import CurrentUser, MeResponse
from src.depends import get_current_user

router = APIRouter(prefix="/auth", tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(current_user: CurrentUser = Depends(get_current_user)):
    """
    Current User

    Returns the user the session token belongs to.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token, or user deleted
    """
    return MeResponse(user=current_user)
