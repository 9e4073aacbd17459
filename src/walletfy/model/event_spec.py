"""
Tests for the Event model.
"""

from datetime import date, datetime
import json

import pytest
from pydantic import ValidationError

from walletfy.model.event import Event, EventType

SAMPLE_ID = "3f2b8c1e-9a4d-4e7b-8c2a-1d5e6f7a8b9c"


class DescribeEvent:
    """Test Event construction and serialization."""

    def it_should_generate_an_id_when_omitted(self):
        event = Event(name="Salary", amount=1000, date="2025-01-10", type="income")
        assert len(event.id) == 36
        assert event.id != Event(name="Salary", amount=1000, date="2025-01-10", type="income").id

    def it_should_parse_iso_date_strings(self):
        event = Event(id=SAMPLE_ID, name="Rent", amount=500, date="2025-03-01", type="expense")
        assert event.date == date(2025, 3, 1)
        assert event.type == EventType.expense

    def it_should_drop_time_of_day_from_datetime_strings(self):
        event = Event(
            id=SAMPLE_ID, name="Rent", amount=500, date="2025-03-01T18:45:00", type="expense"
        )
        assert event.date == date(2025, 3, 1)

    def it_should_accept_datetime_objects(self):
        event = Event(
            id=SAMPLE_ID, name="Rent", amount=500, date=datetime(2025, 3, 1, 9, 30), type="expense"
        )
        assert event.date == date(2025, 3, 1)

    def it_should_default_optional_fields_to_none(self):
        event = Event(id=SAMPLE_ID, name="Rent", amount=500, date="2025-03-01", type="expense")
        assert event.description is None
        assert event.attachment is None

    def it_should_be_immutable(self):
        event = Event(id=SAMPLE_ID, name="Rent", amount=500, date="2025-03-01", type="expense")
        with pytest.raises(ValidationError):
            event.amount = 600

    def it_should_serialize_to_persisted_json_shape(self):
        event = Event(
            id=SAMPLE_ID,
            name="Coffee",
            description="Morning",
            amount=3.5,
            date="2025-03-01",
            type="expense",
        )
        data = json.loads(event.model_dump_json())
        assert data == {
            "id": SAMPLE_ID,
            "name": "Coffee",
            "description": "Morning",
            "amount": 3.5,
            "date": "2025-03-01",
            "type": "expense",
            "attachment": None,
        }

    def it_should_deserialize_from_json(self):
        event = Event(id=SAMPLE_ID, name="Coffee", amount=3.5, date="2025-03-01", type="expense")
        restored = Event.model_validate_json(event.model_dump_json())
        assert restored == event


class DescribeIsIncome:
    def it_should_be_true_for_income(self):
        event = Event(name="Salary", amount=1000, date="2025-01-10", type="income")
        assert event.is_income

    def it_should_be_false_for_expense(self):
        event = Event(name="Rent", amount=400, date="2025-01-10", type="expense")
        assert not event.is_income
