from datetime import date

from invoicing.actions.invoices import create_invoice, delete_invoice, update_invoice
from invoicing.cache import ViewCache
from invoicing.config import INVOICES_PATH
from invoicing.models.actions import FormState, Redirect

from conftest import RecordingInvoiceGateway

TODAY = date(2024, 3, 1)
VALID_FORM = {"customerId": "c1", "amount": "50", "status": "pending"}


def warm_cache():
    cache = ViewCache()
    cache.put(INVOICES_PATH, ["stale listing"], 0)
    return cache


def test_create_inserts_invalidates_and_redirects():
    gateway = RecordingInvoiceGateway()
    cache = warm_cache()

    outcome = create_invoice(None, VALID_FORM, gateway, cache, clock=lambda: TODAY)

    assert outcome == Redirect(path=INVOICES_PATH)
    assert gateway.calls == [("insert", ("c1", 5000, "pending", TODAY))]
    assert not cache.is_cached(INVOICES_PATH)


def test_create_with_invalid_form_never_reaches_gateway():
    gateway = RecordingInvoiceGateway()
    cache = warm_cache()

    outcome = create_invoice(
        None, {"customerId": "c1", "amount": "-3", "status": "pending"}, gateway, cache
    )

    assert isinstance(outcome, FormState)
    assert outcome.message == "Missing Fields. Failed to Create Invoice."
    assert outcome.errors == {"amount": ["Please enter an amount greater than $0."]}
    assert gateway.calls == []
    assert cache.is_cached(INVOICES_PATH)


def test_create_database_failure_returns_fixed_message():
    gateway = RecordingInvoiceGateway(fail=True)
    cache = warm_cache()

    outcome = create_invoice(None, VALID_FORM, gateway, cache, clock=lambda: TODAY)

    assert outcome == FormState(message="Database Error: Failed to create invoice.")
    assert len(gateway.calls) == 1
    assert cache.is_cached(INVOICES_PATH)


def test_create_ignores_previous_state():
    gateway = RecordingInvoiceGateway()
    prev = FormState(message="Missing Fields. Failed to Create Invoice.", errors={"amount": ["x"]})

    outcome = create_invoice(prev, VALID_FORM, gateway, ViewCache(), clock=lambda: TODAY)

    assert isinstance(outcome, Redirect)


def test_update_issues_single_update_and_redirects():
    gateway = RecordingInvoiceGateway()
    cache = warm_cache()

    outcome = update_invoice(
        "inv-1", None, {"customerId": "c2", "amount": "12.34", "status": "paid"}, gateway, cache
    )

    assert outcome == Redirect(path=INVOICES_PATH)
    assert gateway.calls == [("update", ("inv-1", "c2", 1234, "paid"))]
    assert not cache.is_cached(INVOICES_PATH)


def test_update_validation_failure():
    gateway = RecordingInvoiceGateway()

    outcome = update_invoice("inv-1", None, {}, gateway, ViewCache())

    assert outcome.message == "Missing Fields. Failed to Update Invoice."
    assert set(outcome.errors) == {"customerId", "amount", "status"}
    assert gateway.calls == []


def test_update_database_failure_returns_fixed_message():
    gateway = RecordingInvoiceGateway(fail=True)
    cache = warm_cache()

    outcome = update_invoice("inv-1", None, VALID_FORM, gateway, cache)

    assert outcome == FormState(message="Database Error: Failed to update invoice.")
    assert cache.is_cached(INVOICES_PATH)


def test_delete_missing_invoice_is_success():
    gateway = RecordingInvoiceGateway()
    cache = warm_cache()

    outcome = delete_invoice("does-not-exist", gateway, cache)

    assert outcome == FormState(message="Invoice deleted successfully.")
    assert gateway.calls == [("delete", ("does-not-exist",))]
    assert not cache.is_cached(INVOICES_PATH)


def test_delete_failure_does_not_leak_database_detail():
    gateway = RecordingInvoiceGateway(fail=True)

    outcome = delete_invoice("inv-1", gateway, warm_cache())

    assert outcome.message == "Database Error: Failed to delete invoice."
    assert "delete failed" not in outcome.message
