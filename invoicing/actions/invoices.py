# invoicing/actions/invoices.py
"""
Create / update / delete actions behind the invoice forms.

Each action validates first, then issues exactly one statement through the
gateway. Success on create/update ends in a Redirect to the listing; every
other outcome is a FormState for the caller to render.
"""

import logging
from datetime import date, datetime
from typing import Callable, Mapping, Optional, Union
from zoneinfo import ZoneInfo

from invoicing.actions.errors import classify_persistence_error
from invoicing.actions.notify import revalidate_and_redirect
from invoicing.cache import ViewCache
from invoicing.config import INVOICES_PATH, TIMEZONE
from invoicing.db.gateways import InvoiceGateway
from invoicing.exceptions import PersistenceError
from invoicing.models.actions import FormState, Redirect
from invoicing.validation import validate_create, validate_update

logger = logging.getLogger(__name__)

RawForm = Mapping[str, Optional[str]]


def today() -> date:
    return datetime.now(ZoneInfo(TIMEZONE)).date()


def create_invoice(
    prev_state: Optional[FormState],
    raw: RawForm,
    gateway: InvoiceGateway,
    cache: ViewCache,
    clock: Callable[[], date] = today,
) -> Union[Redirect, FormState]:
    # prev_state is what the form last rendered; the result never depends on it
    result = validate_create(raw)
    if not result.ok:
        return FormState(
            message="Missing Fields. Failed to Create Invoice.",
            errors=result.errors,
        )

    record = result.record
    try:
        invoice_id = gateway.insert(
            record.customer_id, record.amount, record.status, clock()
        )
    except PersistenceError as e:
        return FormState(message=classify_persistence_error("create", e))

    logger.info("Created invoice %s for customer %s", invoice_id, record.customer_id)
    return revalidate_and_redirect(cache, INVOICES_PATH)


def update_invoice(
    invoice_id: str,
    prev_state: Optional[FormState],
    raw: RawForm,
    gateway: InvoiceGateway,
    cache: ViewCache,
) -> Union[Redirect, FormState]:
    result = validate_update(invoice_id, raw)
    if not result.ok:
        return FormState(
            message="Missing Fields. Failed to Update Invoice.",
            errors=result.errors,
        )

    record = result.record
    try:
        matched = gateway.update(
            record.invoice_id, record.customer_id, record.amount, record.status
        )
    except PersistenceError as e:
        return FormState(message=classify_persistence_error("update", e))

    # An unknown id matches nothing and is still reported as success.
    if matched == 0:
        logger.warning("Update matched no invoice with id %s", invoice_id)
    else:
        logger.info("Updated invoice %s", invoice_id)

    return revalidate_and_redirect(cache, INVOICES_PATH)


def delete_invoice(
    invoice_id: str,
    gateway: InvoiceGateway,
    cache: ViewCache,
) -> FormState:
    logger.info("Invoice about to be deleted: %s", invoice_id)

    try:
        gateway.delete(invoice_id)
    except PersistenceError as e:
        return FormState(message=classify_persistence_error("delete", e))

    cache.invalidate(INVOICES_PATH)
    return FormState(message="Invoice deleted successfully.")
