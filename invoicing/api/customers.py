# invoicing/api/customers.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from invoicing.api.deps import get_customer_gateway
from invoicing.db.gateways import CustomerGateway
from invoicing.models.customers import CustomerOut

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerOut])
def list_customers(
    gateway: CustomerGateway = Depends(get_customer_gateway),
) -> List[CustomerOut]:
    """
    Return all customers, for the invoice form's customer picker.
    """
    rows = gateway.list_customers()

    return [
        CustomerOut(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
        )
        for row in rows
    ]


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(
    customer_id: str,
    gateway: CustomerGateway = Depends(get_customer_gateway),
) -> CustomerOut:
    """
    Return a single customer by ID.
    """
    row = gateway.get(customer_id)

    if row is None:
        raise HTTPException(status_code=404, detail="Customer not found")

    return CustomerOut(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        image_url=row["image_url"],
    )
