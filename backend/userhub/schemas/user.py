"""User Schemas — response contracts for the user listing."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """Public user record."""
    id: int = Field(ge=1)
    name: str
    email: str


class UserListResponse(BaseModel):
    users: list[User]
