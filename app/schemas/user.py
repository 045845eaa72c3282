# File: app/schemas/user.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(min_length=1)
    name: Optional[str] = None


class UserRead(UserBase):
    id: int
    name: Optional[str] = None
    role: str

    model_config = ConfigDict(from_attributes=True)
