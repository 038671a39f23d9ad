from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Pure domain model for an account that owns events.

    The event core only relies on ``id`` as the ownership key; the remaining
    fields exist for registration and login.
    """
    id: Optional[str]
    full_name: str
    email: str
    hashed_password: str

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.full_name or len(self.full_name.strip()) < 2:
            raise ValueError("Full name must be at least 2 characters")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        self.full_name = self.full_name.strip()
        self.email = self.email.strip().lower()
