# invoicing/models/users.py

from pydantic import BaseModel, EmailStr, Field


class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserOut(BaseModel):
    """Authenticated principal; the stored password hash is not part of it."""

    id: str
    name: str
    email: EmailStr

    class Config:
        from_attributes = True
