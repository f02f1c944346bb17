# invoicing/api/auth.py

from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse

from invoicing.actions.auth import authenticate
from invoicing.actions.errors import INVALID_CREDENTIALS
from invoicing.api.deps import get_user_gateway
from invoicing.config import DASHBOARD_PATH
from invoicing.db.gateways import UserGateway
from invoicing.security import PasswordHasher, get_password_hasher

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(
    email: Optional[str] = Form(default=None),
    password: Optional[str] = Form(default=None),
    users: UserGateway = Depends(get_user_gateway),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Check the submitted credentials. Session issuing is left to whatever
    sits in front of this service; on success the caller is sent on to the
    dashboard.
    """
    outcome = authenticate(None, {"email": email, "password": password}, users, hasher)

    if outcome.authenticated:
        return RedirectResponse(DASHBOARD_PATH, status_code=303)

    status_code = 401 if outcome.message == INVALID_CREDENTIALS else 500
    return JSONResponse({"message": outcome.message}, status_code=status_code)
