from datetime import date

import pytest
from fastapi.testclient import TestClient

from invoicing.cache import ViewCache, get_view_cache
from invoicing.db.engine import build_engine, get_engine
from invoicing.db.schema import customers, invoices, metadata, users
from invoicing.exceptions import PersistenceError
from invoicing.main import app
from invoicing.security import PasswordHasher

CUSTOMER_ID = "c1"
USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
def engine(tmp_path):
    """
    A throwaway SQLite database with the full schema and one customer.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            customers.insert(),
            [{"id": CUSTOMER_ID, "name": "Evil Rabbit", "email": "evil@rabbit.com"}],
        )
    yield engine
    engine.dispose()


@pytest.fixture(scope="session")
def hasher():
    return PasswordHasher()


@pytest.fixture
def seeded_user(engine, hasher):
    with engine.begin() as conn:
        conn.execute(
            users.insert(),
            [{
                "id": "u1",
                "name": "User",
                "email": USER_EMAIL,
                "password": hasher.hash(USER_PASSWORD),
            }],
        )
    return {"id": "u1", "email": USER_EMAIL, "password": USER_PASSWORD}


@pytest.fixture
def seeded_invoice(engine):
    with engine.begin() as conn:
        conn.execute(
            invoices.insert(),
            [{
                "id": "inv-1",
                "customer_id": CUSTOMER_ID,
                "amount": 15795,
                "status": "pending",
                "date": date(2022, 12, 6),
            }],
        )
    return "inv-1"


@pytest.fixture
def view_cache():
    return ViewCache()


@pytest.fixture
def client(engine, view_cache):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_view_cache] = lambda: view_cache
    with TestClient(app, follow_redirects=False) as c:
        yield c
    app.dependency_overrides.clear()


class RecordingInvoiceGateway:
    """In-memory stand-in that records every statement it is asked to run."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def _run(self, name, *args):
        self.calls.append((name, args))
        if self.fail:
            raise PersistenceError(f"{name} failed")

    def insert(self, customer_id, amount, status, invoice_date):
        self._run("insert", customer_id, amount, status, invoice_date)
        return "generated-id"

    def update(self, invoice_id, customer_id, amount, status):
        self._run("update", invoice_id, customer_id, amount, status)
        return 1

    def delete(self, invoice_id):
        self._run("delete", invoice_id)
        return 0


class StubUserGateway:
    def __init__(self, user=None, error: Exception = None):
        self.user = user
        self.error = error
        self.lookups = []

    def get_by_email(self, email):
        self.lookups.append(email)
        if self.error is not None:
            raise self.error
        if self.user is not None and self.user["email"] == email:
            return self.user
        return None
