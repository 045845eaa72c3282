# File: app/schemas/auth.py

from pydantic import BaseModel, EmailStr

from app.schemas.user import UserRead


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class LoginResponse(Token):
    message: str = "Login successful"


class RegisterResponse(Token):
    message: str = "User registered successfully"
    user: UserRead


class MessageResponse(BaseModel):
    message: str
