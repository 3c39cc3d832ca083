from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SignupForm(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""
    age: int = Field(0, ge=0)


class LoginForm(BaseModel):
    email: str = ""
    password: str = ""


class UserResponse(BaseModel):
    id: int
    name: str
    age: int
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
