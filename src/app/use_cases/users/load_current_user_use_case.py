"""
Load Current User Use Case

Resolves the user id carried by a session token to a user record.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.result import Error, Result, Return


class LoadCurrentUserUseCase:
    """
    Use case for loading the authenticated user.

    Business Rules:
    - Token payload provides user_id
    - User must still exist (a valid token for a deleted user is rejected)
    - Returned view never carries the password hash or reset fields
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[CurrentUser]:
        """
        Execute load current user use case.

        Args:
            user_id: User UUID from JWT

        Returns:
            Result with CurrentUser, or Error(USER_NOT_FOUND)
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                CurrentUser(id=str(user.id), email=user.email, created_at=user.created_at)
            )
