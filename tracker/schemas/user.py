from typing import Optional

from pydantic import BaseModel


class GoogleUserIn(BaseModel):
    """Profile returned by the identity provider's userinfo endpoint."""

    id: str
    email: str
    name: str
    picture: Optional[str] = None


class UserOut(BaseModel):
    id: str
    email: str
    username: Optional[str] = None
    name: str
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True


class ProfileOut(BaseModel):
    name: str
    email: str
    avatarUrl: Optional[str] = None
