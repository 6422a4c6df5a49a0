from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    access_token: str
    token_type: str

class UserResponse(BaseModel):
    id: int
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}

class SignupResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str

class LoginResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str

class LogoutResponse(BaseModel):
    success: bool
