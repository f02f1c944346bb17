# invoicing/db/gateways.py
"""
Thin SQLAlchemy Core wrappers around the tables the actions touch.

Each write runs as exactly one statement in its own transaction. Driver
errors (and values the driver cannot bind) are logged here and re-raised
as the package's own exceptions, so callers never see a SQLAlchemyError.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from invoicing.db.schema import customers, invoices, users
from invoicing.exceptions import PersistenceError, UserLookupError

logger = logging.getLogger(__name__)


class InvoiceGateway:
    def __init__(self, engine: Engine):
        self.engine = engine

    def insert(
        self, customer_id: str, amount: int, status: str, invoice_date: date
    ) -> str:
        stmt = insert(invoices).values(
            customer_id=customer_id,
            amount=amount,
            status=status,
            date=invoice_date,
        )
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
                invoice_id = result.inserted_primary_key[0]
        except (SQLAlchemyError, OverflowError) as e:
            logger.error("Insert into invoices failed: %r", e)
            raise PersistenceError("insert failed") from e

        return invoice_id

    def update(
        self, invoice_id: str, customer_id: str, amount: int, status: str
    ) -> int:
        """
        Update customer/amount/status of one invoice; returns the number of
        rows matched (0 when the id does not exist).
        """
        stmt = (
            update(invoices)
            .where(invoices.c.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status)
        )
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        except (SQLAlchemyError, OverflowError) as e:
            logger.error("Update of invoice %s failed: %r", invoice_id, e)
            raise PersistenceError("update failed") from e

        return result.rowcount

    def delete(self, invoice_id: str) -> int:
        stmt = delete(invoices).where(invoices.c.id == invoice_id)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        except (SQLAlchemyError, OverflowError) as e:
            logger.error("Delete of invoice %s failed: %r", invoice_id, e)
            raise PersistenceError("delete failed") from e

        return result.rowcount

    def _select_with_customer(self):
        return select(
            invoices.c.id,
            invoices.c.customer_id,
            customers.c.name.label("customer_name"),
            customers.c.email.label("customer_email"),
            invoices.c.amount,
            invoices.c.status,
            invoices.c.date,
        ).select_from(invoices.join(customers))

    def list_invoices(self) -> List[RowMapping]:
        stmt = self._select_with_customer().order_by(
            invoices.c.date.desc(), invoices.c.id
        )
        try:
            with self.engine.connect() as conn:
                return conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.error("Listing invoices failed: %r", e)
            raise PersistenceError("list failed") from e

    def get(self, invoice_id: str) -> Optional[RowMapping]:
        stmt = self._select_with_customer().where(invoices.c.id == invoice_id)
        try:
            with self.engine.connect() as conn:
                return conn.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            logger.error("Fetching invoice %s failed: %r", invoice_id, e)
            raise PersistenceError("get failed") from e


class CustomerGateway:
    def __init__(self, engine: Engine):
        self.engine = engine

    def list_customers(self) -> List[RowMapping]:
        stmt = (
            select(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
            )
            .order_by(customers.c.name)
        )
        with self.engine.connect() as conn:
            return conn.execute(stmt).mappings().all()

    def get(self, customer_id: str) -> Optional[RowMapping]:
        stmt = (
            select(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
            )
            .where(customers.c.id == customer_id)
        )
        with self.engine.connect() as conn:
            return conn.execute(stmt).mappings().first()


class UserGateway:
    def __init__(self, engine: Engine):
        self.engine = engine

    def get_by_email(self, email: str) -> Optional[RowMapping]:
        """
        Return the single user registered under `email`, or None.

        Raises UserLookupError when the query itself fails; a missing user
        is not an error.
        """
        stmt = select(users).where(users.c.email == email)
        try:
            with self.engine.connect() as conn:
                return conn.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            logger.error("Failed to fetch user: %r", e)
            raise UserLookupError("Failed to fetch user.") from e
