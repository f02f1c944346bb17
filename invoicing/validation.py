# invoicing/validation.py
"""
Validation of submitted invoice forms.

Runs in two phases: the raw values are checked against `InvoiceForm`, and
only values that passed are transformed into an `InvoiceRecord` (amount
converted from dollars to cents). Neither entry point raises on bad input;
failures come back as a field -> messages map covering every bad field.
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from pydantic import ValidationError

from invoicing.models.invoices import InvoiceForm, InvoiceRecord, ValidationResult

logger = logging.getLogger(__name__)

# One message per field, whatever constraint failed (missing, wrong type,
# out of range all read the same to the user).
FIELD_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "customerId": "Please select a customer.",
        "amount": "Please enter an amount greater than $0.",
        "status": "Please select an invoice status.",
    }
)


def to_minor_units(amount: Decimal) -> int:
    # exact for the <= 2 decimal places InvoiceForm admits
    return int(amount * 100)


def _field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__root__"
        message = FIELD_MESSAGES.get(field, err["msg"])
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def _validate(raw: Mapping[str, Optional[str]], invoice_id: Optional[str]) -> ValidationResult:
    try:
        form = InvoiceForm.model_validate(dict(raw))
    except ValidationError as e:
        errors = _field_errors(e)
        logger.debug("Invoice form rejected, fields: %s", sorted(errors))
        return ValidationResult(errors=errors)

    record = InvoiceRecord(
        customer_id=form.customerId,
        amount=to_minor_units(form.amount),
        status=form.status,
        invoice_id=invoice_id,
    )
    return ValidationResult(record=record)


def validate_create(raw: Mapping[str, Optional[str]]) -> ValidationResult:
    return _validate(raw, invoice_id=None)


def validate_update(invoice_id: str, raw: Mapping[str, Optional[str]]) -> ValidationResult:
    """
    Same rules as `validate_create`; the identifier comes from the caller
    (the URL), never from the form body.
    """
    return _validate(raw, invoice_id=invoice_id)
