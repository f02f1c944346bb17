# invoicing/models/actions.py
"""
Results handed back by the form actions to whatever renders them.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from invoicing.models.users import UserOut


class FormState(BaseModel):
    message: Optional[str] = None
    errors: Dict[str, List[str]] = Field(default_factory=dict)


class Redirect(BaseModel):
    path: str


class AuthOutcome(BaseModel):
    user: Optional[UserOut] = None
    message: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.user is not None
