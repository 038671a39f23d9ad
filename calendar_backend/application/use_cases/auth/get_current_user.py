# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import decode_access_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user behind a bearer token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Raises:
            ValueError: If token is invalid or user not found
        """
        try:
            payload = decode_access_token(token)
        except ValueError as exception:
            raise ValueError(f"Invalid or expired token: {str(exception)}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")

        # Re-read the user so deleted accounts lose access immediately
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        return UserResponse(
            id=user.id or "",
            full_name=user.full_name,
            email=user.email,
        )
