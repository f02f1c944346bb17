# invoicing/models/customers.py

from typing import Optional

from pydantic import BaseModel, EmailStr


class CustomerOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    image_url: Optional[str] = None

    class Config:
        from_attributes = True
