from pydantic import BaseModel, Field
from typing import Optional


class RegisterRequest(BaseModel):
    email: Optional[str] = Field(None, description="Email address (required)")
    password: Optional[str] = Field(None, description="Password (required)")
    name: Optional[str] = Field(None, description="Display name, defaults to the email local part")


class SignInRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    email: str
    name: str

    model_config = {"from_attributes": True}
