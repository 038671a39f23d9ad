# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.security import verify_password, create_access_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for exchanging credentials for an access token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate user and generate access token

        Returns:
            TokenResponse if authentication successful, None otherwise
        """
        user = await self.user_repository.find_by_email(request.email.lower())
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.info("Failed login attempt for %s", request.email)
            return None

        token = create_access_token(user.id or "", {UserFields.EMAIL: user.email})
        return TokenResponse(access_token=token)
