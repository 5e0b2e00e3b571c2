from pydantic import BaseModel, EmailStr
from typing import Optional
from projecthub.models.user import UserRole


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    email: Optional[str] = None


# Login requires the role as well: a user may only sign in under their own role
class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    role: UserRole
