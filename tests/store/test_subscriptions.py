from __future__ import annotations

from decimal import Decimal

from src.khata.khata.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.khata.khata.store.subscriptions import SubscriptionHub


def _add(repo, name):
    return repo.create(name=name, designation="Helper", contact_number="1", daily_wage=Decimal("300"))


def test_subscriber_gets_initial_snapshot_and_every_write():
    repo = InMemoryEmployeeRepository()
    _add(repo, "A")
    seen = []

    unsubscribe = repo.subscribe(lambda items: seen.append([e.name for e in items]))
    _add(repo, "B")
    repo.delete_by_id("1")

    assert seen == [["A"], ["B", "A"], ["B"]]

    unsubscribe()
    _add(repo, "C")
    assert len(seen) == 3


def test_failing_listener_does_not_break_write_or_other_listeners():
    hub = SubscriptionHub("employees")
    got = []

    def boom(_):
        raise RuntimeError("listener bug")

    hub.subscribe(boom)
    hub.subscribe(got.append)
    hub.publish(["x"])

    assert got == [["x"]]
    assert hub.listener_count == 2


def test_unsubscribe_is_idempotent():
    hub = SubscriptionHub("advances")
    unsubscribe = hub.subscribe(lambda _: None)
    unsubscribe()
    unsubscribe()
    assert hub.listener_count == 0
