"""
Tests for the in-memory event store.
"""

from uuid import uuid4

import pytest

from walletfy.errors import DuplicateIdError, NotFoundError
from walletfy.model.event import Event
from walletfy.storage.event_store import EventStore


def _event(name="Coffee", amount=3.5, date="2025-01-10", type="expense", id=None):
    return Event(id=id or str(uuid4()), name=name, amount=amount, date=date, type=type)


class DescribeEventStore:
    """Test EventStore functionality."""

    @pytest.fixture
    def store(self):
        return EventStore()


class DescribeAddAndList(DescribeEventStore):
    def it_should_start_empty(self, store):
        assert store.list() == []
        assert len(store) == 0

    def it_should_add_events_in_insertion_order(self, store):
        first = _event(name="First", date="2025-03-01")
        second = _event(name="Second", date="2025-01-01")

        store.add(first)
        store.add(second)

        assert [e.name for e in store.list()] == ["First", "Second"]

    def it_should_reject_duplicate_ids_on_add(self, store):
        event = _event()
        store.add(event)

        with pytest.raises(DuplicateIdError):
            store.add(_event(name="Other", id=event.id))

        assert len(store) == 1
        assert store.list()[0].name == "Coffee"

    def it_should_return_a_snapshot_from_list(self, store):
        store.add(_event())
        snapshot = store.list()
        snapshot.clear()

        assert len(store) == 1

    def it_should_get_events_by_id(self, store):
        event = _event()
        store.add(event)

        assert store.get(event.id) == event
        assert event.id in store
        assert store.get(str(uuid4())) is None


class DescribeUpdate(DescribeEventStore):
    def it_should_replace_matching_event_in_place(self, store):
        a, b, c = _event(name="A"), _event(name="B"), _event(name="C")
        for e in (a, b, c):
            store.add(e)

        edited = b.model_copy(update={"name": "B2", "amount": 99.0})
        store.update(edited)

        assert [e.name for e in store.list()] == ["A", "B2", "C"]
        assert store.get(b.id).amount == 99.0

    def it_should_raise_not_found_and_leave_store_unchanged(self, store):
        store.add(_event())
        before = store.list()

        with pytest.raises(NotFoundError) as exc_info:
            store.update(_event(name="Ghost"))

        assert len(store) == 1
        assert store.list() == before
        assert "Ghost" not in [e.name for e in store.list()]
        assert exc_info.value.event_id not in store


class DescribeRemove(DescribeEventStore):
    def it_should_remove_and_return_the_event(self, store):
        a, b, c = _event(name="A"), _event(name="B"), _event(name="C")
        for e in (a, b, c):
            store.add(e)

        removed = store.remove(b.id)

        assert removed == b
        assert [e.name for e in store.list()] == ["A", "C"]

    def it_should_raise_not_found_for_unknown_id(self, store):
        store.add(_event())

        with pytest.raises(NotFoundError):
            store.remove(str(uuid4()))

        assert len(store) == 1


class DescribeReplaceAll(DescribeEventStore):
    def it_should_replace_the_whole_collection(self, store):
        store.add(_event(name="Old"))
        new = [_event(name="New1"), _event(name="New2")]

        store.replace_all(new)

        assert [e.name for e in store.list()] == ["New1", "New2"]

    def it_should_reject_batch_with_duplicate_ids(self, store):
        store.add(_event(name="Old"))
        dup = _event(name="X")

        with pytest.raises(DuplicateIdError):
            store.replace_all([dup, _event(name="Y", id=dup.id)])

        assert [e.name for e in store.list()] == ["Old"]

    def it_should_accept_initial_events_in_constructor(self):
        store = EventStore([_event(name="A"), _event(name="B")])
        assert len(store) == 2


class DescribeFindByIdPrefix(DescribeEventStore):
    @pytest.fixture
    def populated(self, store):
        store.add(_event(name="A", id="aaaa1111-0000-4000-8000-000000000001"))
        store.add(_event(name="B", id="aaaa2222-0000-4000-8000-000000000002"))
        store.add(_event(name="C", id="bbbb3333-0000-4000-8000-000000000003"))
        return store

    def it_should_find_unique_match(self, populated):
        result = populated.find_by_id_prefix("BBBB")

        assert result.is_match
        assert result.event.name == "C"

    def it_should_report_ambiguous_prefix(self, populated):
        result = populated.find_by_id_prefix("aaaa")

        assert result.is_ambiguous
        assert [e.name for e in result.matches] == ["A", "B"]

    def it_should_report_not_found(self, populated):
        assert populated.find_by_id_prefix("cccc").is_not_found
        assert populated.find_by_id_prefix("").is_not_found
