from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - account registration, login and token resolution"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Each one only needs the user repository, so they share one factory shape.
        """
        for use_case_class in (RegisterUserUseCase, LoginUserUseCase, GetCurrentUserUseCase):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(user_repository=container.get(UserRepository)),
            )
