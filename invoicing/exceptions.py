# invoicing/exceptions.py


class InvoicingError(Exception):
    """Base class for errors raised inside the invoicing package."""


class PersistenceError(InvoicingError):
    """A single statement against the invoices table failed."""


class UserLookupError(InvoicingError):
    """Fetching a user record failed (connectivity or query error)."""
