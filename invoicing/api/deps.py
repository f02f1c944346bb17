# invoicing/api/deps.py

from fastapi import Depends
from sqlalchemy.engine import Engine

from invoicing.db.engine import get_engine
from invoicing.db.gateways import CustomerGateway, InvoiceGateway, UserGateway


def get_invoice_gateway(engine: Engine = Depends(get_engine)) -> InvoiceGateway:
    return InvoiceGateway(engine)


def get_customer_gateway(engine: Engine = Depends(get_engine)) -> CustomerGateway:
    return CustomerGateway(engine)


def get_user_gateway(engine: Engine = Depends(get_engine)) -> UserGateway:
    return UserGateway(engine)
