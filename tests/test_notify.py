import pytest

from invoicing.actions.errors import PERSISTENCE_ERROR_MESSAGES, classify_persistence_error
from invoicing.actions.notify import revalidate_and_redirect
from invoicing.cache import ViewCache
from invoicing.exceptions import PersistenceError
from invoicing.models.actions import Redirect


def test_revalidate_and_redirect():
    cache = ViewCache()
    cache.put("/dashboard/invoices", ["row"], 0)
    cache.put("/customers", ["other"], 0)

    outcome = revalidate_and_redirect(cache, "/dashboard/invoices")

    assert outcome == Redirect(path="/dashboard/invoices")
    assert cache.get("/dashboard/invoices") is None
    assert cache.is_cached("/customers")


def test_invalidating_unknown_path_is_harmless():
    cache = ViewCache()
    cache.invalidate("/never-rendered")
    assert not cache.is_cached("/never-rendered")


@pytest.mark.parametrize("operation", ["create", "update", "delete"])
def test_classify_hides_driver_detail(operation):
    exc = PersistenceError('UNIQUE constraint failed: invoices.id; password="hunter2"')

    message = classify_persistence_error(operation, exc)

    assert message == PERSISTENCE_ERROR_MESSAGES[operation]
    assert "constraint" not in message


def test_classify_unknown_operation():
    with pytest.raises(KeyError):
        classify_persistence_error("archive", PersistenceError("x"))


def test_put_after_invalidation_is_dropped():
    cache = ViewCache()
    generation = cache.generation("/dashboard/invoices")

    cache.invalidate("/dashboard/invoices")

    assert cache.put("/dashboard/invoices", ["rows read before the write"], generation) is False
    assert not cache.is_cached("/dashboard/invoices")
    assert cache.put("/dashboard/invoices", [], cache.generation("/dashboard/invoices")) is True
