# invoicing/actions/auth.py

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.engine import RowMapping

from invoicing.actions.errors import AUTH_FAILURE, INVALID_CREDENTIALS
from invoicing.db.gateways import UserGateway
from invoicing.exceptions import UserLookupError
from invoicing.models.actions import AuthOutcome, FormState
from invoicing.models.users import Credentials, UserOut
from invoicing.security import PasswordHasher

logger = logging.getLogger(__name__)


def authorize(
    credentials: Mapping[str, Any],
    users: UserGateway,
    hasher: PasswordHasher,
) -> Optional[RowMapping]:
    """
    Return the stored user whose email and password match, else None.

    Which check failed (shape, unknown email, wrong password) is not
    distinguishable from the return value. UserLookupError from the gateway
    is not handled here.
    """
    try:
        parsed = Credentials.model_validate(dict(credentials))
    except ValidationError:
        return None

    # EmailStr lowercases the domain; look up exactly what was submitted
    user = users.get_by_email(credentials["email"])
    if user is None:
        return None

    if not hasher.verify(parsed.password, user["password"]):
        logger.info("Invalid credentials")
        return None

    return user


def authenticate(
    prev_state: Optional[FormState],
    raw: Mapping[str, Any],
    users: UserGateway,
    hasher: PasswordHasher,
) -> AuthOutcome:
    try:
        user = authorize(raw, users, hasher)
        if user is None:
            return AuthOutcome(message=INVALID_CREDENTIALS)
        principal = UserOut.model_validate(dict(user))
    except UserLookupError:
        return AuthOutcome(message=AUTH_FAILURE)
    except Exception:
        # e.g. a stored hash passlib cannot identify or parse
        logger.exception("Authentication attempt failed")
        return AuthOutcome(message=AUTH_FAILURE)

    return AuthOutcome(user=principal)
