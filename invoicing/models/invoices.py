# invoicing/models/invoices.py

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

InvoiceStatus = Literal["pending", "paid"]

# largest dollar amount whose cents still fit a signed 64-bit INTEGER column
MAX_AMOUNT = Decimal("92233720368547758.07")


class InvoiceForm(BaseModel):
    """
    Shape of a submitted create/update invoice form, before any transform.

    Field names follow the form's own keys. `id` and `date` are never part
    of it, and any such keys a client sends are ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    customerId: str = Field(min_length=1)
    amount: Decimal = Field(
        gt=0, le=MAX_AMOUNT, decimal_places=2, allow_inf_nan=False
    )
    status: InvoiceStatus


class InvoiceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: str
    # minor units (cents)
    amount: int = Field(gt=0)
    status: InvoiceStatus
    invoice_id: Optional[str] = None


class ValidationResult(BaseModel):
    record: Optional[InvoiceRecord] = None
    errors: Dict[str, List[str]] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.record is not None


class InvoiceOut(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    customer_email: str
    # major units, for display
    amount: Decimal
    status: InvoiceStatus
    date: date

    class Config:
        from_attributes = True
