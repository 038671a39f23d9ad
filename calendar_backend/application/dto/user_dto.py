from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for the authenticated user (never exposes the password hash)"""
    id: str
    full_name: str
    email: EmailStr
