"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.domain.models.user import User

INVALID_JSON_MESSAGE = "JSON inválido"
USER_CREATED_MESSAGE = "Usuario creado correctamente"


class UserCreateRequest(BaseModel):
    """DTO for creating a user."""
    id: Optional[str] = Field(None, description="Optional identifier, assigned by the store if absent")
    name: str = Field("", description="Display name")
    email: str = Field("", description="Email address")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana",
                "email": "a@x.io"
            }
        }
    )
    
    def to_entity(self) -> User:
        """Convert request to a User entity."""
        return User(id=self.id, name=self.name, email=self.email)


class UserResponse(BaseModel):
    """DTO for user data."""
    id: Optional[str] = None
    name: str
    email: str
    
    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)


class UserCreatedResponse(BaseModel):
    """DTO returned after a successful creation."""
    message: str = USER_CREATED_MESSAGE
    user: UserResponse
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": USER_CREATED_MESSAGE,
                "user": {
                    "id": "6928422b8c9933d948cfdc21",
                    "name": "Ana",
                    "email": "a@x.io"
                }
            }
        }
    )


class ErrorResponse(BaseModel):
    """DTO for error responses."""
    error: str
