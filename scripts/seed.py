# scripts/seed.py
"""
Fill a freshly created database with placeholder customers, invoices and
one login user.

Run scripts/init_db.py first; this only inserts.
"""

import logging
import os
from datetime import date

from invoicing.config import LOG_FORMAT, LOG_LEVEL
from invoicing.db.engine import get_engine
from invoicing.db.schema import customers, invoices, users
from invoicing.security import PasswordHasher
from invoicing.validation import validate_create

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

SEED_USER_EMAIL = os.environ.get("INVOICING_SEED_EMAIL", "user@nextmail.com")
SEED_USER_PASSWORD = os.environ.get("INVOICING_SEED_PASSWORD", "123456")

CUSTOMERS = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
]

# (customer index, amount in dollars as a form would submit it, status, date)
INVOICES = [
    (0, "157.95", "pending", date(2022, 12, 6)),
    (1, "209.95", "pending", date(2022, 11, 14)),
    (2, "30.40", "paid", date(2022, 10, 29)),
    (0, "448.00", "paid", date(2023, 9, 10)),
    (1, "345.77", "pending", date(2023, 8, 5)),
    (2, "542.46", "paid", date(2023, 6, 9)),
]


def build_invoice_rows():
    rows = []
    for idx, amount, status, invoice_date in INVOICES:
        raw = {"customerId": CUSTOMERS[idx]["id"], "amount": amount, "status": status}
        result = validate_create(raw)
        if not result.ok:
            logger.warning("Skipping seed invoice %r: %s", raw, result.errors)
            continue
        record = result.record
        rows.append(
            {
                "customer_id": record.customer_id,
                "amount": record.amount,
                "status": record.status,
                "date": invoice_date,
            }
        )
    return rows


def main():
    hasher = PasswordHasher()
    invoice_rows = build_invoice_rows()

    engine = get_engine()
    with engine.begin() as conn:
        conn.execute(customers.insert(), CUSTOMERS)
        conn.execute(invoices.insert(), invoice_rows)
        conn.execute(
            users.insert(),
            [
                {
                    "name": "User",
                    "email": SEED_USER_EMAIL,
                    "password": hasher.hash(SEED_USER_PASSWORD),
                }
            ],
        )

    logger.info("Customers seeded:  %s", len(CUSTOMERS))
    logger.info("Invoices seeded:   %s", len(invoice_rows))
    logger.info("Login user:        %s", SEED_USER_EMAIL)


if __name__ == "__main__":
    main()
