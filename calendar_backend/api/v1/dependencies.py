# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=True)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> UserResponse:
    """
    Resolve the calendar owner behind the bearer token.

    Every events route depends on this; the returned id is the only owner
    identity the event use cases ever see.

    Raises:
        HTTPException: 401 if the token is invalid, expired or its user is gone
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )
