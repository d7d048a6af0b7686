# server/core/state.py

from threading import Lock
from collections import defaultdict


_locks = defaultdict(Lock)
_registry_lock = Lock()


def parent_lock(kind: str, parent_id: int) -> Lock:
    """
    Process-local lock for one ordering parent ("project" or "column").
    Held around append+insert and batch reorder so two requests in this
    process cannot interleave on the same siblings. Other processes are not
    covered.
    """
    with _registry_lock:
        return _locks[(kind, parent_id)]


def discard_lock(kind: str, parent_id: int):
    with _registry_lock:
        _locks.pop((kind, parent_id), None)
