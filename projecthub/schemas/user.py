from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional
from projecthub.models.user import UserRole


# Properties to return to client (never the password hash)
class UserRead(BaseModel):
    id: str
    email: EmailStr
    name: str
    role: UserRole
    department: Optional[str] = None
    avatar: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class NavItem(BaseModel):
    label: str
    href: str
