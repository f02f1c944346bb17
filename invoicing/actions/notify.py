# invoicing/actions/notify.py

from invoicing.cache import ViewCache
from invoicing.models.actions import Redirect


def revalidate_and_redirect(cache: ViewCache, path: str) -> Redirect:
    """
    Mark cached renderings of `path` stale and send the caller there.

    Only call this once the mutation has been persisted; the returned
    Redirect is terminal for the action that produced it.
    """
    cache.invalidate(path)
    return Redirect(path=path)
