# invoicing/api/invoices.py
"""
HTTP surface for the invoice form actions.

Routes here play the UI layer's part: they hand the submitted form to the
action and carry out the navigation a Redirect asks for, or render the
FormState it returned.
"""

from decimal import Decimal
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import JSONResponse, RedirectResponse

from invoicing.actions.errors import PERSISTENCE_ERROR_MESSAGES
from invoicing.actions.invoices import create_invoice, delete_invoice, update_invoice
from invoicing.api.deps import get_invoice_gateway
from invoicing.cache import ViewCache, get_view_cache
from invoicing.config import INVOICES_PATH
from invoicing.db.gateways import InvoiceGateway
from invoicing.models.actions import FormState, Redirect
from invoicing.models.invoices import InvoiceOut

router = APIRouter(tags=["invoices"])

CENT = Decimal("0.01")


def _row_to_invoice(row) -> InvoiceOut:
    return InvoiceOut(
        id=row["id"],
        customer_id=row["customer_id"],
        customer_name=row["customer_name"],
        customer_email=row["customer_email"],
        amount=(Decimal(row["amount"]) / 100).quantize(CENT),
        status=row["status"],
        date=row["date"],
    )


def _render(outcome: Union[Redirect, FormState]):
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.path, status_code=303)

    # field errors are the user's to fix; anything else is ours
    status_code = 422 if outcome.errors else 500
    return JSONResponse(outcome.model_dump(), status_code=status_code)


@router.get(INVOICES_PATH, response_model=List[InvoiceOut])
def list_invoices(
    gateway: InvoiceGateway = Depends(get_invoice_gateway),
    cache: ViewCache = Depends(get_view_cache),
) -> List[InvoiceOut]:
    """
    The invoice listing, served from the view cache until a mutation
    invalidates it.
    """
    generation = cache.generation(INVOICES_PATH)
    cached = cache.get(INVOICES_PATH)
    if cached is not None:
        return cached

    items = [_row_to_invoice(row) for row in gateway.list_invoices()]
    cache.put(INVOICES_PATH, items, generation)
    return items


@router.get("/invoices/{invoice_id}", response_model=InvoiceOut)
def get_invoice(
    invoice_id: str,
    gateway: InvoiceGateway = Depends(get_invoice_gateway),
) -> InvoiceOut:
    """
    Look up a single invoice, e.g. to prefill the edit form.
    """
    row = gateway.get(invoice_id)

    if row is None:
        raise HTTPException(status_code=404, detail="Invoice not found")

    return _row_to_invoice(row)


@router.post("/invoices")
def submit_create_invoice(
    customerId: Optional[str] = Form(default=None),
    amount: Optional[str] = Form(default=None),
    status: Optional[str] = Form(default=None),
    gateway: InvoiceGateway = Depends(get_invoice_gateway),
    cache: ViewCache = Depends(get_view_cache),
):
    raw = {"customerId": customerId, "amount": amount, "status": status}
    return _render(create_invoice(None, raw, gateway, cache))


@router.post("/invoices/{invoice_id}")
def submit_update_invoice(
    invoice_id: str,
    customerId: Optional[str] = Form(default=None),
    amount: Optional[str] = Form(default=None),
    status: Optional[str] = Form(default=None),
    gateway: InvoiceGateway = Depends(get_invoice_gateway),
    cache: ViewCache = Depends(get_view_cache),
):
    raw = {"customerId": customerId, "amount": amount, "status": status}
    return _render(update_invoice(invoice_id, None, raw, gateway, cache))


@router.post("/invoices/{invoice_id}/delete", response_model=FormState)
def submit_delete_invoice(
    invoice_id: str,
    gateway: InvoiceGateway = Depends(get_invoice_gateway),
    cache: ViewCache = Depends(get_view_cache),
):
    outcome = delete_invoice(invoice_id, gateway, cache)
    if outcome.message == PERSISTENCE_ERROR_MESSAGES["delete"]:
        return JSONResponse(outcome.model_dump(), status_code=500)
    return outcome
