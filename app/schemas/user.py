from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class UserCreate(BaseModel):
    """Schema for creating a new user. Validation happens in UserService."""
    name: Optional[str] = Field(None, max_length=255, description="User name")
    email: Optional[str] = Field(None, max_length=255, description="Email address")
    role: Optional[str] = Field(None, description="Role name, defaults to USER")


class UserUpdate(BaseModel):
    """Schema for updating an existing user. Omitted or blank fields keep their value."""
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    role: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    name: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)
