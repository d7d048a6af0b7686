"""
Tests for the per-parent lock registry.
"""
from core.state import parent_lock, discard_lock


def test_same_parent_shares_lock():
    assert parent_lock("column", 1) is parent_lock("column", 1)


def test_distinct_parents_get_distinct_locks():
    assert parent_lock("column", 1) is not parent_lock("column", 2)
    assert parent_lock("column", 1) is not parent_lock("project", 1)


def test_discard_lock_releases_entry():
    first = parent_lock("project", 99)
    discard_lock("project", 99)
    assert parent_lock("project", 99) is not first
    discard_lock("project", 99)
    discard_lock("project", 99)
