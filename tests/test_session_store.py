import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from typetrial.core import SessionInvalid
from typetrial.services import InMemorySessionStore


def test_create_and_consume_once(session_store):
    session = session_store.create("hello")
    assert session.id in session_store
    assert session_store.consume(session.id).target_text == "hello"
    with pytest.raises(SessionInvalid):
        session_store.consume(session.id)


def test_ids_are_unique_and_opaque(session_store):
    ids = {session_store.create("x").id for _ in range(50)}
    assert len(ids) == 50
    assert all(len(sid) >= 16 for sid in ids)


def test_unknown_and_empty_ids_are_invalid(session_store):
    with pytest.raises(SessionInvalid):
        session_store.consume("does-not-exist")
    with pytest.raises(SessionInvalid):
        session_store.consume("")


def test_expired_session_is_rejected(session_store, clock):
    session = session_store.create("hello")
    clock.advance(3601)
    with pytest.raises(SessionInvalid):
        session_store.consume(session.id)
    # consumption attempt still removed it
    assert len(session_store) == 0


def test_expired_sessions_are_purged_on_create(session_store, clock):
    session_store.create("old")
    session_store.create("old")
    clock.advance(4000)
    fresh = session_store.create("new")
    assert len(session_store) == 1
    assert fresh.id in session_store


def test_purge_expired_counts_removed(session_store, clock):
    session_store.create("a")
    clock.advance(10)
    session_store.create("b")
    clock.advance(3595)
    assert session_store.purge_expired() == 1
    assert len(session_store) == 1


def test_zero_ttl_never_expires(clock):
    store = InMemorySessionStore(ttl_seconds=0, max_sessions=10, clock=clock)
    session = store.create("x")
    clock.advance(10**9)
    assert store.consume(session.id).id == session.id


def test_capacity_evicts_oldest(clock):
    store = InMemorySessionStore(ttl_seconds=0, max_sessions=2, clock=clock)
    first = store.create("1")
    second = store.create("2")
    third = store.create("3")
    assert len(store) == 2
    assert first.id not in store
    assert second.id in store and third.id in store


def test_racing_consumers_get_the_session_once(session_store):
    session = session_store.create("hello")
    barrier = threading.Barrier(16)

    def attempt(_):
        barrier.wait()
        try:
            session_store.consume(session.id)
            return True
        except SessionInvalid:
            return False

    with ThreadPoolExecutor(max_workers=16) as pool:
        outcomes = list(pool.map(attempt, range(16)))
    assert outcomes.count(True) == 1
